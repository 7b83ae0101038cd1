"""
CatalogPackage Entity

Sellable catalog item scoped to an organization.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import PackageCategory


class CatalogPackage(SQLModel, table=True):
    """
    CatalogPackage entity.

    Business Rules:
    - price is finite and >= 0
    - Rental items track stock_quantity, buffer_days and optional replacement_cost
    - floor_price and target_cost are advisory for non-package categories
    """

    __tablename__ = "packages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(
        foreign_key="organizations.id", nullable=False, index=True
    )

    name: str = Field(max_length=200)
    description: Optional[str] = Field(default=None, max_length=5000)
    category: PackageCategory = Field(default=PackageCategory.package)

    price: float = Field(default=0)
    floor_price: Optional[float] = Field(default=None)
    target_cost: Optional[float] = Field(default=None)

    # Rental
    stock_quantity: Optional[int] = Field(default=None)
    is_sub_rental: bool = Field(default=False)
    replacement_cost: Optional[float] = Field(default=None)
    buffer_days: int = Field(default=0)

    is_active: bool = Field(default=True)
    definition: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_package_org_category", "organization_id", "category"),)
