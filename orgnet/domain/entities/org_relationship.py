"""
OrgRelationship Entity

Directed edge between two organizations with soft-delete support.
"""

from datetime import datetime, timedelta
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import (
    RelationshipLifecycle,
    RelationshipState,
    RelationshipTier,
    RelationshipType,
)

RESTORE_WINDOW = timedelta(days=30)


class OrgRelationship(SQLModel, table=True):
    """
    OrgRelationship entity - source organization's view of a partner.

    Business Rules:
    - (source_org_id, target_org_id) is unique
    - Pin/unpin only changes tier, the row id is preserved
    - Soft delete sets deleted_at; restore is allowed within 30 days
    - Rows deleted 30 or more days ago are purgeable and hidden from every list
    """

    __tablename__ = "org_relationships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    source_org_id: UUID = Field(foreign_key="organizations.id", nullable=False)
    target_org_id: UUID = Field(foreign_key="organizations.id", nullable=False)

    type: RelationshipType = Field(default=RelationshipType.partner)
    tier: RelationshipTier = Field(default=RelationshipTier.preferred)
    notes: Optional[str] = Field(default=None, max_length=5000)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    lifecycle_status: RelationshipLifecycle = Field(
        default=RelationshipLifecycle.active
    )

    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "idx_relationship_source_target",
            "source_org_id",
            "target_org_id",
            unique=True,
        ),
        Index("idx_relationship_deleted_at", "deleted_at"),
    )

    def state(self, now: datetime) -> RelationshipState:
        if self.deleted_at is None:
            return RelationshipState.active
        if now - self.deleted_at < RESTORE_WINDOW:
            return RelationshipState.deleted
        return RelationshipState.purgeable
