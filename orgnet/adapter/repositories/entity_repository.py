from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from orgnet.app.repositories.entity_repository import IEntityRepository
from orgnet.domain.entities import Affiliation, Entity


class EntityRepository(IEntityRepository):
    """Entity repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, entity_id: UUID) -> Optional[Entity]:
        """Get entity by ID"""
        stmt = select(Entity).where(Entity.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_auth_id(self, auth_id: str) -> Optional[Entity]:
        """Get the entity bound to an authenticated user"""
        stmt = select(Entity).where(Entity.auth_id == auth_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Entity]:
        """Get entity by email (case-insensitive), preferring bound entities"""
        stmt = (
            select(Entity)
            .where(func.lower(Entity.email) == email.strip().lower())
            .order_by(Entity.is_ghost, Entity.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_ghost_affiliates(self, organization_id: UUID) -> List[Entity]:
        """Get ghost entities affiliated with an organization, oldest first"""
        stmt = (
            select(Entity)
            .join(Affiliation, Affiliation.entity_id == Entity.id)
            .where(
                Affiliation.organization_id == organization_id,
                Entity.is_ghost == True,  # noqa: E712
            )
            .order_by(Affiliation.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, entity: Entity) -> Entity:
        """Create a new entity"""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: Entity) -> Entity:
        """Update existing entity"""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: Entity) -> None:
        """Delete an entity"""
        await self.session.delete(entity)
        await self.session.flush()
