"""
Network Use Case DTOs

Commands and responses for org-to-org relationships.
"""

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from orgnet.domain.entities import (
    OrganizationCategory,
    OrgRelationship,
    RelationshipLifecycle,
    RelationshipTier,
    RelationshipType,
)


# ============================================================================
# Command DTOs
# ============================================================================


class CreateRelationshipCommand(BaseModel):
    target_org_id: UUID
    type: RelationshipType = RelationshipType.partner
    tier: RelationshipTier = RelationshipTier.preferred


class SummonGhostPartnerCommand(BaseModel):
    """A person gets a '(Personal)' organization named after them"""

    name: str = Field(..., min_length=1, max_length=200)
    kind: Literal["organization", "person"] = "organization"
    type: RelationshipType = RelationshipType.partner
    category: Optional[OrganizationCategory] = None
    city: Optional[str] = None
    website: Optional[str] = None
    contact_name: Optional[str] = None
    email: Optional[str] = None


class ScoutConnectionCommand(BaseModel):
    url: str = Field(..., min_length=3, max_length=2000)


class UpdateRelationshipCommand(BaseModel):
    """Only fields that are set are applied"""

    notes: Optional[str] = Field(default=None, max_length=5000)
    type: Optional[RelationshipType] = None
    tags: Optional[List[str]] = None
    lifecycle_status: Optional[RelationshipLifecycle] = None


# ============================================================================
# Response DTOs
# ============================================================================


class RelationshipResponse(BaseModel):
    id: str
    source_org_id: str
    target_org_id: str
    target_name: str
    target_is_claimed: bool
    type: str
    tier: str
    notes: Optional[str] = None
    tags: List[str] = []
    lifecycle_status: str
    state: str
    deleted_at: Optional[str] = None
    created_at: str

    @classmethod
    def build(
        cls, rel: OrgRelationship, target, now: datetime
    ) -> "RelationshipResponse":
        return cls(
            id=str(rel.id),
            source_org_id=str(rel.source_org_id),
            target_org_id=str(rel.target_org_id),
            target_name=target.name if target else "Unknown",
            target_is_claimed=target.is_claimed if target else False,
            type=rel.type.value,
            tier=rel.tier.value,
            notes=rel.notes,
            tags=list(rel.tags or []),
            lifecycle_status=rel.lifecycle_status.value,
            state=rel.state(now).value,
            deleted_at=rel.deleted_at.isoformat() if rel.deleted_at else None,
            created_at=rel.created_at.isoformat(),
        )


class DeletedRelationshipResponse(BaseModel):
    id: str
    target_org_id: str
    target_name: str
    deleted_at: str
    restore_deadline: str
    can_restore: bool


class GhostConnectionResponse(BaseModel):
    relationship: RelationshipResponse
    organization_id: str
    contacts_added: int
    scout_used: bool = False
