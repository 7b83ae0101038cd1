"""
AuditEvent Entity

Immutable log of claim, ghost and relationship actions.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of ownership-changing events.

    Business Rules:
    - Immutable (never updated or deleted)
    - organization_id is the organization acted upon
    - Metadata stores additional context (slug, target org, counts)
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: Optional[UUID] = Field(default=None, index=True)
    entity_id: Optional[UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100)  # e.g., "organization_claimed"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_org_action", "organization_id", "action"),
    )
