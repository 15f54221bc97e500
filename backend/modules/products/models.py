"""
Products module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Request to add a product to the catalog."""

    title: str = Field(..., min_length=1, max_length=200, description="Product title")
    price: float = Field(..., ge=0, description="Unit price")
    img: str = Field(..., min_length=1, description="Image URL or reference")


class ProductUpdate(BaseModel):
    """
    Partial product update.

    Only the fields that are set are written.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    price: Optional[float] = Field(None, ge=0)
    img: Optional[str] = Field(None, min_length=1)


class Product(BaseModel):
    """A catalog entry."""

    id: str
    title: str
    price: float
    img: str
    created_at: Optional[datetime] = None
