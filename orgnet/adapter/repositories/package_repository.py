from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from orgnet.app.repositories.package_repository import IPackageRepository
from orgnet.domain.entities import CatalogPackage


class PackageRepository(IPackageRepository):
    """CatalogPackage repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, package_id: UUID) -> Optional[CatalogPackage]:
        """Get catalog item by ID"""
        stmt = select(CatalogPackage).where(CatalogPackage.id == package_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_organization_id(
        self, organization_id: UUID
    ) -> List[CatalogPackage]:
        """Get catalog items of an organization, active first then by name"""
        stmt = (
            select(CatalogPackage)
            .where(CatalogPackage.organization_id == organization_id)
            .order_by(CatalogPackage.is_active.desc(), CatalogPackage.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, package: CatalogPackage) -> CatalogPackage:
        """Create a new catalog item"""
        self.session.add(package)
        await self.session.flush()
        await self.session.refresh(package)
        return package

    async def update(self, package: CatalogPackage) -> CatalogPackage:
        """Update existing catalog item"""
        self.session.add(package)
        await self.session.flush()
        await self.session.refresh(package)
        return package
