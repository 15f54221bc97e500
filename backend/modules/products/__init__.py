"""
Products module.

Plain CRUD over the product catalog.

Public API:
- IProductService: Interface for catalog operations
- Product, ProductCreate, ProductUpdate: Catalog models
- ProductNotFoundError, ProductStoreError: Module exceptions
"""

from .interfaces import IProductService
from .models import Product, ProductCreate, ProductUpdate
from .exceptions import ProductNotFoundError, ProductStoreError

__all__ = [
    "IProductService",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "ProductNotFoundError",
    "ProductStoreError",
]
