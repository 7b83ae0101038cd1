from typing import Optional, Tuple
from uuid import UUID

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.domain.entities import (
    OrgRelationship,
    RelationshipTier,
    RelationshipType,
)
from orgnet.libs.result import Error

RELATIONSHIP_NOT_FOUND = Error("RELATIONSHIP_NOT_FOUND", "Connection not found.")


async def get_scoped_relationship(
    uow: UnitOfWork, ctx: RequestContext, relationship_id: UUID
) -> Tuple[Optional[OrgRelationship], Optional[Error]]:
    """
    Load a relationship owned by the context organization.

    Relationships of other organizations are reported as not found so their
    existence does not leak.
    """
    relationship = await uow.relationships.get_by_id(relationship_id)
    if relationship is None or relationship.source_org_id != ctx.organization_id:
        return None, RELATIONSHIP_NOT_FOUND
    return relationship, None


async def upsert_relationship(
    uow: UnitOfWork,
    source_org_id: UUID,
    target_org_id: UUID,
    type: RelationshipType = RelationshipType.partner,
    tier: RelationshipTier = RelationshipTier.preferred,
) -> OrgRelationship:
    """Create a relationship, or promote the existing one keeping its id"""
    existing = await uow.relationships.get_by_source_and_target(
        source_org_id, target_org_id
    )
    if existing is not None:
        existing.type = type
        existing.tier = tier
        existing.deleted_at = None
        return await uow.relationships.update(existing)

    return await uow.relationships.create(
        OrgRelationship(
            source_org_id=source_org_id,
            target_org_id=target_org_id,
            type=type,
            tier=tier,
        )
    )
