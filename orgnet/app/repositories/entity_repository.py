from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from orgnet.domain.entities import Entity


class IEntityRepository(ABC):
    """Entity repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, entity_id: UUID) -> Optional[Entity]:
        """Get entity by ID"""
        pass

    @abstractmethod
    async def get_by_auth_id(self, auth_id: str) -> Optional[Entity]:
        """Get the entity bound to an authenticated user"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Entity]:
        """Get entity by email (case-insensitive)"""
        pass

    @abstractmethod
    async def get_ghost_affiliates(self, organization_id: UUID) -> List[Entity]:
        """Get ghost entities affiliated with an organization, oldest first"""
        pass

    @abstractmethod
    async def create(self, entity: Entity) -> Entity:
        """Create a new entity"""
        pass

    @abstractmethod
    async def update(self, entity: Entity) -> Entity:
        """Update existing entity"""
        pass

    @abstractmethod
    async def delete(self, entity: Entity) -> None:
        """Delete an entity"""
        pass
