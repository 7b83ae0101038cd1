"""
Affiliation Entity

Membership edge between an Entity and an Organization.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import AccessLevel, AffiliationStatus


class Affiliation(SQLModel, table=True):
    """
    Affiliation entity - links an Entity to an Organization with an access level.

    Business Rules:
    - (entity_id, organization_id) must be unique
    - Ghost contacts are linked as members; claiming escalates to admin
    - Only active affiliations grant access
    """

    __tablename__ = "affiliations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    entity_id: UUID = Field(foreign_key="entities.id", nullable=False, index=True)
    organization_id: UUID = Field(
        foreign_key="organizations.id", nullable=False, index=True
    )

    access_level: AccessLevel = Field(default=AccessLevel.member)
    status: AffiliationStatus = Field(default=AffiliationStatus.active)
    role_label: Optional[str] = Field(default=None, max_length=100)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "idx_affiliation_entity_org", "entity_id", "organization_id", unique=True
        ),
        Index("idx_affiliation_status", "status"),
    )
