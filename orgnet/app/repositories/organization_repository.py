from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from orgnet.domain.entities import Organization


class SlugConflictError(Exception):
    """Raised when an organization slug is already taken"""

    def __init__(self, slug: str):
        super().__init__(f"Slug already in use: {slug}")
        self.slug = slug


class IOrganizationRepository(ABC):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID"""
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Organization]:
        """Get organization by slug"""
        pass

    @abstractmethod
    async def get_by_ids(self, organization_ids: List[UUID]) -> List[Organization]:
        """Get organizations by IDs"""
        pass

    @abstractmethod
    async def get_owned_by(self, entity_id: UUID) -> Optional[Organization]:
        """Get the first organization owned by an entity"""
        pass

    @abstractmethod
    async def create(self, organization: Organization) -> Organization:
        """
        Create a new organization.

        Raises:
            SlugConflictError: slug is already taken
        """
        pass

    @abstractmethod
    async def update(self, organization: Organization) -> Organization:
        """Update existing organization"""
        pass

    @abstractmethod
    async def claim_if_unclaimed(
        self, organization_id: UUID, owner_id: UUID, at: datetime
    ) -> bool:
        """
        Conditionally claim an organization.

        Returns:
            True if this call claimed it, False if it was already claimed.
        """
        pass
