from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from orgnet.domain.entities import OrgMember


class IOrgMemberRepository(ABC):
    """OrgMember repository interface - application layer"""

    @abstractmethod
    async def get_by_org_and_entity(
        self, org_id: UUID, entity_id: UUID
    ) -> Optional[OrgMember]:
        """Get roster row by organization and entity"""
        pass

    @abstractmethod
    async def create(self, member: OrgMember) -> OrgMember:
        """Create a new roster row"""
        pass

    @abstractmethod
    async def update(self, member: OrgMember) -> OrgMember:
        """Update existing roster row"""
        pass

    @abstractmethod
    async def delete(self, member: OrgMember) -> None:
        """Delete a roster row"""
        pass
