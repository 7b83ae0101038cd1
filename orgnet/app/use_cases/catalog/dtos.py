"""
Catalog Use Case DTOs
"""

from typing import Optional

from pydantic import BaseModel, Field

from orgnet.domain.entities import CatalogPackage, PackageCategory


class CreatePackageCommand(BaseModel):
    name: str = Field(..., max_length=200)
    description: Optional[str] = None
    category: PackageCategory = PackageCategory.package
    price: float
    floor_price: Optional[float] = None
    target_cost: Optional[float] = None
    stock_quantity: Optional[int] = None
    is_sub_rental: Optional[bool] = None
    replacement_cost: Optional[float] = None
    buffer_days: Optional[float] = None
    definition: Optional[dict] = None


class UpdatePackageCommand(BaseModel):
    """Partial update; only fields that are set are applied"""

    name: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    category: Optional[PackageCategory] = None
    price: Optional[float] = None
    floor_price: Optional[float] = None
    target_cost: Optional[float] = None
    is_active: Optional[bool] = None
    stock_quantity: Optional[int] = None
    is_sub_rental: Optional[bool] = None
    replacement_cost: Optional[float] = None
    buffer_days: Optional[float] = None
    definition: Optional[dict] = None


class PackageResponse(BaseModel):
    id: str
    organization_id: str
    name: str
    description: Optional[str] = None
    category: str
    price: float
    floor_price: Optional[float] = None
    target_cost: Optional[float] = None
    stock_quantity: Optional[int] = None
    is_sub_rental: bool
    replacement_cost: Optional[float] = None
    buffer_days: int
    is_active: bool
    definition: Optional[dict] = None

    @classmethod
    def from_entity(cls, package: CatalogPackage) -> "PackageResponse":
        return cls(
            id=str(package.id),
            organization_id=str(package.organization_id),
            name=package.name,
            description=package.description,
            category=package.category.value,
            price=package.price,
            floor_price=package.floor_price,
            target_cost=package.target_cost,
            stock_quantity=package.stock_quantity,
            is_sub_rental=package.is_sub_rental,
            replacement_cost=package.replacement_cost,
            buffer_days=package.buffer_days,
            is_active=package.is_active,
            definition=package.definition,
        )
