"""
Products module exceptions.
"""

from shared.exceptions import ExternalServiceError, NotFoundError


class ProductNotFoundError(NotFoundError):
    """Raised when a product is not found."""

    def __init__(self, product_id: str):
        super().__init__(
            f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )


class ProductStoreError(ExternalServiceError):
    """Raised when the product store fails."""

    def __init__(self, operation: str, original_error: str):
        super().__init__(
            f"Product store failure during {operation}",
            service="supabase",
            code="PRODUCT_STORE_ERROR",
            details={"operation": operation, "original_error": original_error},
        )
