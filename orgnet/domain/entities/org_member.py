"""
OrgMember Entity

Roster row for a person inside an organization.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import OrgMemberRole


class OrgMember(SQLModel, table=True):
    __tablename__ = "org_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    org_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    entity_id: UUID = Field(foreign_key="entities.id", nullable=False, index=True)

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    job_title: Optional[str] = Field(default=None, max_length=200)
    role: OrgMemberRole = Field(default=OrgMemberRole.member)
    avatar_url: Optional[str] = Field(default=None, max_length=2000)
    phone: Optional[str] = Field(default=None, max_length=50)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_org_member_org_entity", "org_id", "entity_id", unique=True),
    )

    @property
    def display_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p).strip()
