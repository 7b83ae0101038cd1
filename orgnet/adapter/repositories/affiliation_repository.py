from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from orgnet.app.repositories.affiliation_repository import IAffiliationRepository
from orgnet.domain.entities import Affiliation, AffiliationStatus


class AffiliationRepository(IAffiliationRepository):
    """Affiliation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_entity_and_organization(
        self, entity_id: UUID, organization_id: UUID
    ) -> Optional[Affiliation]:
        """Get affiliation by entity and organization"""
        stmt = select(Affiliation).where(
            Affiliation.entity_id == entity_id,
            Affiliation.organization_id == organization_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_entity(self, entity_id: UUID) -> List[Affiliation]:
        """Get all active affiliations of an entity"""
        stmt = (
            select(Affiliation)
            .where(
                Affiliation.entity_id == entity_id,
                Affiliation.status == AffiliationStatus.active,
            )
            .order_by(Affiliation.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, affiliation: Affiliation) -> Affiliation:
        """Create a new affiliation"""
        self.session.add(affiliation)
        await self.session.flush()
        await self.session.refresh(affiliation)
        return affiliation

    async def update(self, affiliation: Affiliation) -> Affiliation:
        """Update existing affiliation"""
        self.session.add(affiliation)
        await self.session.flush()
        await self.session.refresh(affiliation)
        return affiliation

    async def delete(self, affiliation: Affiliation) -> None:
        """Delete an affiliation"""
        await self.session.delete(affiliation)
        await self.session.flush()
