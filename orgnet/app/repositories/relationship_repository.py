from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from orgnet.domain.entities import OrgRelationship, RelationshipTier


class IRelationshipRepository(ABC):
    """OrgRelationship repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, relationship_id: UUID) -> Optional[OrgRelationship]:
        """Get relationship by ID"""
        pass

    @abstractmethod
    async def get_by_source_and_target(
        self, source_org_id: UUID, target_org_id: UUID
    ) -> Optional[OrgRelationship]:
        """Get relationship by source and target organization"""
        pass

    @abstractmethod
    async def get_active_by_source(
        self, source_org_id: UUID, tier: Optional[RelationshipTier] = None
    ) -> List[OrgRelationship]:
        """Get relationships that are not soft-deleted"""
        pass

    @abstractmethod
    async def get_deleted_since(
        self, source_org_id: UUID, cutoff: datetime
    ) -> List[OrgRelationship]:
        """Get relationships soft-deleted after cutoff, newest first"""
        pass

    @abstractmethod
    async def create(self, relationship: OrgRelationship) -> OrgRelationship:
        """Create a new relationship"""
        pass

    @abstractmethod
    async def update(self, relationship: OrgRelationship) -> OrgRelationship:
        """Update existing relationship"""
        pass

    @abstractmethod
    async def purge_deleted_before(self, cutoff: datetime) -> int:
        """Hard-delete relationships soft-deleted at or before cutoff"""
        pass
