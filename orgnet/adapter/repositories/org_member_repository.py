from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from orgnet.app.repositories.org_member_repository import IOrgMemberRepository
from orgnet.domain.entities import OrgMember


class OrgMemberRepository(IOrgMemberRepository):
    """OrgMember repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_org_and_entity(
        self, org_id: UUID, entity_id: UUID
    ) -> Optional[OrgMember]:
        """Get roster row by organization and entity"""
        stmt = select(OrgMember).where(
            OrgMember.org_id == org_id, OrgMember.entity_id == entity_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, member: OrgMember) -> OrgMember:
        """Create a new roster row"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    async def update(self, member: OrgMember) -> OrgMember:
        """Update existing roster row"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    async def delete(self, member: OrgMember) -> None:
        """Delete a roster row"""
        await self.session.delete(member)
        await self.session.flush()
