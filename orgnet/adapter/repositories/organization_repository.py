from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from orgnet.app.repositories.organization_repository import (
    IOrganizationRepository,
    SlugConflictError,
)
from orgnet.domain.entities import Organization


class OrganizationRepository(IOrganizationRepository):
    """Organization repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID"""
        stmt = select(Organization).where(Organization.id == organization_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Organization]:
        """Get organization by slug"""
        stmt = select(Organization).where(Organization.slug == slug)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_ids(self, organization_ids: List[UUID]) -> List[Organization]:
        """Get organizations by IDs"""
        if not organization_ids:
            return []
        stmt = select(Organization).where(Organization.id.in_(organization_ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_owned_by(self, entity_id: UUID) -> Optional[Organization]:
        """Get the first organization owned by an entity"""
        stmt = (
            select(Organization)
            .where(Organization.owner_id == entity_id)
            .order_by(Organization.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, organization: Organization) -> Organization:
        """Create a new organization, translating slug collisions"""
        self.session.add(organization)
        try:
            await self.session.flush()
        except IntegrityError as e:
            if "slug" in str(e.orig).lower():
                raise SlugConflictError(organization.slug) from e
            raise
        await self.session.refresh(organization)
        return organization

    async def update(self, organization: Organization) -> Organization:
        """Update existing organization"""
        self.session.add(organization)
        await self.session.flush()
        await self.session.refresh(organization)
        return organization

    async def claim_if_unclaimed(
        self, organization_id: UUID, owner_id: UUID, at: datetime
    ) -> bool:
        """Conditional unclaimed -> claimed transition"""
        stmt = (
            update(Organization)
            .where(
                Organization.id == organization_id,
                Organization.is_claimed == False,  # noqa: E712
            )
            .values(is_claimed=True, claimed_at=at, owner_id=owner_id, updated_at=at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
