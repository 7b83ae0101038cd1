"""
Restore Relationship Use Case

Brings back a soft-deleted relationship within the 30-day window.
"""

from uuid import UUID

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.domain.base import utcnow
from orgnet.domain.entities import AuditEvent, RelationshipState
from orgnet.libs.result import Error, Result, Return

from .dtos import RelationshipResponse
from .scope import get_scoped_relationship


class RestoreRelationshipUseCase:
    """
    Business Rules:
    - Relationship must be soft-deleted (NOT_DELETED otherwise)
    - now - deleted_at must be under 30 days (RESTORE_WINDOW_EXPIRED otherwise)
    - The id, tier and metadata are kept
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, relationship_id: UUID
    ) -> Result[RelationshipResponse]:
        error = require_write_access(ctx)
        if error:
            return Return.err(error)

        now = utcnow()
        async with self.uow:
            relationship, error = await get_scoped_relationship(
                self.uow, ctx, relationship_id
            )
            if error:
                return Return.err(error)

            state = relationship.state(now)
            if state == RelationshipState.active:
                return Return.err(Error("NOT_DELETED", "Connection is not deleted."))
            if state == RelationshipState.purgeable:
                return Return.err(
                    Error(
                        "RESTORE_WINDOW_EXPIRED",
                        "This connection was deleted more than 30 days ago and can no longer be restored.",
                    )
                )

            relationship.deleted_at = None
            relationship = await self.uow.relationships.update(relationship)
            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=ctx.organization_id,
                    entity_id=ctx.entity_id,
                    action="relationship_restored",
                    event_metadata={"relationship_id": str(relationship.id)},
                )
            )
            await self.uow.commit()

            target = await self.uow.organizations.get_by_id(relationship.target_org_id)
            return Return.ok(RelationshipResponse.build(relationship, target, now))
