"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations with their
collaborators injected explicitly.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IUserRepository
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenIssuer
    from modules.notifications.interfaces import INotificationSender
    from modules.products.interfaces import IProductService
    from modules.products.repository import ProductRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._user_repository: "IUserRepository | None" = None
        self._password_hasher: "PasswordHasher | None" = None
        self._token_issuer: "TokenIssuer | None" = None
        self._notifier: "INotificationSender | None" = None
        self._auth_service: "IAuthService | None" = None
        self._product_repository: "ProductRepository | None" = None
        self._product_service: "IProductService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def password_hasher(self) -> "PasswordHasher":
        """Get the password hasher instance."""
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def token_issuer(self) -> "TokenIssuer":
        """Get the token issuer instance."""
        if self._token_issuer is None:
            from modules.auth.tokens import TokenIssuer
            self._token_issuer = TokenIssuer(
                secret=self.settings.jwt_secret,
                algorithm=self.settings.jwt_algorithm,
            )
        return self._token_issuer

    @property
    def notifier(self) -> "INotificationSender":
        """Get the notification sender instance."""
        if self._notifier is None:
            from modules.notifications.service import EmailNotificationSender
            self._notifier = EmailNotificationSender(self.settings)
        return self._notifier

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=self.password_hasher,
                tokens=self.token_issuer,
                notifier=self.notifier,
            )
        return self._auth_service

    @property
    def product_repository(self) -> "ProductRepository":
        """Get the product repository instance."""
        if self._product_repository is None:
            from modules.products.repository import ProductRepository
            from shared.database import get_supabase_client
            self._product_repository = ProductRepository(get_supabase_client())
        return self._product_repository

    @property
    def products(self) -> "IProductService":
        """Get the product service instance."""
        if self._product_service is None:
            from modules.products.service import ProductService
            self._product_service = ProductService(self.product_repository)
        return self._product_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._settings = None
        self._user_repository = None
        self._password_hasher = None
        self._token_issuer = None
        self._notifier = None
        self._auth_service = None
        self._product_repository = None
        self._product_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_product_service() -> "IProductService":
    """FastAPI dependency for product service."""
    return get_container().products
