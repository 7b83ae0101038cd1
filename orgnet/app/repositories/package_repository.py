from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from orgnet.domain.entities import CatalogPackage


class IPackageRepository(ABC):
    """CatalogPackage repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, package_id: UUID) -> Optional[CatalogPackage]:
        """Get catalog item by ID"""
        pass

    @abstractmethod
    async def get_by_organization_id(
        self, organization_id: UUID
    ) -> List[CatalogPackage]:
        """Get catalog items of an organization, active first then by name"""
        pass

    @abstractmethod
    async def create(self, package: CatalogPackage) -> CatalogPackage:
        """Create a new catalog item"""
        pass

    @abstractmethod
    async def update(self, package: CatalogPackage) -> CatalogPackage:
        """Update existing catalog item"""
        pass
