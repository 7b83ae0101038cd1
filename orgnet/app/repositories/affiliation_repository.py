from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from orgnet.domain.entities import Affiliation


class IAffiliationRepository(ABC):
    """Affiliation repository interface - application layer"""

    @abstractmethod
    async def get_by_entity_and_organization(
        self, entity_id: UUID, organization_id: UUID
    ) -> Optional[Affiliation]:
        """Get affiliation by entity and organization"""
        pass

    @abstractmethod
    async def get_active_by_entity(self, entity_id: UUID) -> List[Affiliation]:
        """Get all active affiliations of an entity"""
        pass

    @abstractmethod
    async def create(self, affiliation: Affiliation) -> Affiliation:
        """Create a new affiliation"""
        pass

    @abstractmethod
    async def update(self, affiliation: Affiliation) -> Affiliation:
        """Update existing affiliation"""
        pass

    @abstractmethod
    async def delete(self, affiliation: Affiliation) -> None:
        """Delete an affiliation"""
        pass
