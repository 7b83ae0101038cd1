from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from orgnet.app.repositories.relationship_repository import IRelationshipRepository
from orgnet.domain.entities import OrgRelationship, RelationshipTier


class RelationshipRepository(IRelationshipRepository):
    """OrgRelationship repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, relationship_id: UUID) -> Optional[OrgRelationship]:
        """Get relationship by ID"""
        stmt = select(OrgRelationship).where(OrgRelationship.id == relationship_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_source_and_target(
        self, source_org_id: UUID, target_org_id: UUID
    ) -> Optional[OrgRelationship]:
        """Get relationship by source and target organization"""
        stmt = select(OrgRelationship).where(
            OrgRelationship.source_org_id == source_org_id,
            OrgRelationship.target_org_id == target_org_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_source(
        self, source_org_id: UUID, tier: Optional[RelationshipTier] = None
    ) -> List[OrgRelationship]:
        """Get relationships that are not soft-deleted"""
        stmt = select(OrgRelationship).where(
            OrgRelationship.source_org_id == source_org_id,
            OrgRelationship.deleted_at.is_(None),
        )
        if tier is not None:
            stmt = stmt.where(OrgRelationship.tier == tier)
        stmt = stmt.order_by(OrgRelationship.created_at)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_deleted_since(
        self, source_org_id: UUID, cutoff: datetime
    ) -> List[OrgRelationship]:
        """Get relationships soft-deleted after cutoff, newest first"""
        stmt = (
            select(OrgRelationship)
            .where(
                OrgRelationship.source_org_id == source_org_id,
                OrgRelationship.deleted_at.is_not(None),
                OrgRelationship.deleted_at > cutoff,
            )
            .order_by(OrgRelationship.deleted_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, relationship: OrgRelationship) -> OrgRelationship:
        """Create a new relationship"""
        self.session.add(relationship)
        await self.session.flush()
        await self.session.refresh(relationship)
        return relationship

    async def update(self, relationship: OrgRelationship) -> OrgRelationship:
        """Update existing relationship"""
        self.session.add(relationship)
        await self.session.flush()
        await self.session.refresh(relationship)
        return relationship

    async def purge_deleted_before(self, cutoff: datetime) -> int:
        """Hard-delete relationships soft-deleted at or before cutoff"""
        stmt = (
            delete(OrgRelationship)
            .where(
                OrgRelationship.deleted_at.is_not(None),
                OrgRelationship.deleted_at <= cutoff,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0
