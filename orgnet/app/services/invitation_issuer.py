"""
Invitation Issuer

Generates single-use claim tokens. Only the SHA-256 of a token is persisted;
the raw token leaves the process once, inside the claim link.
"""

import hashlib
import secrets
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional
from uuid import UUID

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.domain.base import utcnow
from orgnet.domain.entities import AccessLevel, Invitation, InvitationStatus

INVITATION_TTL = timedelta(days=7)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


@dataclass
class IssuedInvitation:
    invitation: Invitation
    token: str


class InvitationIssuer:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def issue(
        self,
        organization_id: UUID,
        email: str,
        access_level: AccessLevel = AccessLevel.admin,
        created_by_org_id: Optional[UUID] = None,
    ) -> IssuedInvitation:
        token = secrets.token_urlsafe(32)
        invitation = Invitation(
            organization_id=organization_id,
            email=email.strip().lower(),
            token_hash=hash_token(token),
            status=InvitationStatus.pending,
            access_level=access_level,
            created_by_org_id=created_by_org_id,
            expires_at=utcnow() + INVITATION_TTL,
        )
        invitation = await self.uow.invitations.create(invitation)
        return IssuedInvitation(invitation=invitation, token=token)
