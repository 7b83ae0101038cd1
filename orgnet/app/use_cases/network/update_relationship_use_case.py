from uuid import UUID

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.domain.base import utcnow
from orgnet.libs.result import Result, Return

from .dtos import RelationshipResponse, UpdateRelationshipCommand
from .scope import RELATIONSHIP_NOT_FOUND, get_scoped_relationship


class UpdateRelationshipUseCase:
    """Partial update of notes, type, tags and lifecycle status"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        ctx: RequestContext,
        relationship_id: UUID,
        command: UpdateRelationshipCommand,
    ) -> Result[RelationshipResponse]:
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

            changes = command.model_dump(exclude_unset=True)
            if "notes" in changes:
                relationship.notes = (command.notes or "").strip() or None
            if command.type is not None:
                relationship.type = command.type
            if "tags" in changes:
                relationship.tags = sorted(
                    {t.strip() for t in command.tags or [] if t and t.strip()}
                )
            if command.lifecycle_status is not None:
                relationship.lifecycle_status = command.lifecycle_status

            relationship = await self.uow.relationships.update(relationship)
            await self.uow.commit()

            target = await self.uow.organizations.get_by_id(relationship.target_org_id)
            return Return.ok(RelationshipResponse.build(relationship, target, utcnow()))
