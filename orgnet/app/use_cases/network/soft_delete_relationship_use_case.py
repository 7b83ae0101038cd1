from uuid import UUID

from pydantic import BaseModel

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.domain.base import utcnow
from orgnet.domain.entities import RESTORE_WINDOW, AuditEvent
from orgnet.libs.result import Result, Return

from .scope import RELATIONSHIP_NOT_FOUND, get_scoped_relationship


class SoftDeleteRelationshipResponse(BaseModel):
    id: str
    deleted_at: str
    restore_deadline: str


class SoftDeleteRelationshipUseCase:
    """
    Hides a relationship from the network. It stays restorable for 30 days,
    after which it becomes purgeable.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, relationship_id: UUID
    ) -> Result[SoftDeleteRelationshipResponse]:
        error = require_write_access(ctx)
        if error:
            return Return.err(error)

        async with self.uow:
            relationship, error = await get_scoped_relationship(
                self.uow, ctx, relationship_id
            )
            if error:
                return Return.err(error)
            if relationship.deleted_at is not None:
                return Return.err(RELATIONSHIP_NOT_FOUND)

            relationship.deleted_at = utcnow()
            relationship = await self.uow.relationships.update(relationship)
            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=ctx.organization_id,
                    entity_id=ctx.entity_id,
                    action="relationship_deleted",
                    event_metadata={"relationship_id": str(relationship.id)},
                )
            )
            await self.uow.commit()

            return Return.ok(
                SoftDeleteRelationshipResponse(
                    id=str(relationship.id),
                    deleted_at=relationship.deleted_at.isoformat(),
                    restore_deadline=(relationship.deleted_at + RESTORE_WINDOW).isoformat(),
                )
            )
