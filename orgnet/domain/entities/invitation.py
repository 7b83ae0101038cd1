"""
Invitation Entity

Single-use, time-limited claim tokens bound to an organization and email.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import AccessLevel, InvitationStatus


class Invitation(SQLModel, table=True):
    """
    Invitation entity - pending claim of an organization by an email.

    Business Rules:
    - Expires after 7 days
    - Token is single-use, cryptographically secure; only its hash is stored
    - pending -> accepted is the only transition a claim performs
    - access_level is granted on claim (admin for ghost orgs, member for teams)
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(
        foreign_key="organizations.id", nullable=False, index=True
    )
    email: str = Field(max_length=255, nullable=False, index=True)

    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 hash
    status: InvitationStatus = Field(default=InvitationStatus.pending)
    access_level: AccessLevel = Field(default=AccessLevel.admin)

    created_by_org_id: Optional[UUID] = Field(default=None, foreign_key="organizations.id")

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_org_email", "organization_id", "email"),
        Index("idx_invitation_status", "status"),
    )

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
