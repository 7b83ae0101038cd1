from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from orgnet.app.repositories.invitation_repository import IInvitationRepository
from orgnet.domain.entities import Invitation, InvitationStatus


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token_hash(self, token_hash: str) -> Optional[Invitation]:
        """Get invitation by token hash, regardless of status"""
        stmt = select(Invitation).where(Invitation.token_hash == token_hash)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_valid_by_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[Invitation]:
        """Get a pending, unexpired invitation by token hash"""
        stmt = select(Invitation).where(
            Invitation.token_hash == token_hash,
            Invitation.status == InvitationStatus.pending,
            Invitation.expires_at > now,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_organization_and_email(
        self, organization_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by organization and email"""
        stmt = (
            select(Invitation)
            .where(
                Invitation.organization_id == organization_id,
                func.lower(Invitation.email) == email.strip().lower(),
                Invitation.status == InvitationStatus.pending,
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def consume(self, invitation_id: UUID, now: datetime) -> bool:
        """Conditional pending -> accepted transition"""
        stmt = (
            update(Invitation)
            .where(
                Invitation.id == invitation_id,
                Invitation.status == InvitationStatus.pending,
                Invitation.expires_at > now,
            )
            .values(status=InvitationStatus.accepted)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
