"""
Storefront API package.

Provides the FastAPI application for the product catalog and account service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
