# gateway/models.py
"""
Request and response models for the gateway.

All models serialize with camelCase field names (``skuId``, ``categoryIds``).
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CamelModel):
    """A sellable product."""

    sku_id: str = Field(..., description="Stock keeping unit identifier")
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    stock: int = Field(0, ge=0)
    description: Optional[str] = None
    category_ids: List[int] = Field(default_factory=list)


class ProductUpdate(CamelModel):
    """Partial product update; omitted fields are left as they are."""

    name: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    category_ids: Optional[List[int]] = None


class UserProfile(CamelModel):
    """Public profile of a user."""

    user_id: int
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None


class UserProfileUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    address: Optional[str] = None


class Category(CamelModel):
    """Product category; root categories have no parent."""

    id: int
    name: str
    parent_id: Optional[int] = None
