"""
Create Relationship Use Case

Connects the caller's organization to an existing organization.
"""

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.domain.base import utcnow
from orgnet.domain.entities import AuditEvent
from orgnet.libs.result import Error, Result, Return

from .dtos import CreateRelationshipCommand, RelationshipResponse
from .scope import upsert_relationship


class CreateRelationshipUseCase:
    """
    Business Rules:
    - Target must exist and differ from the source organization
    - Existing relationship (even soft-deleted) is promoted, keeping its id
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, command: CreateRelationshipCommand
    ) -> Result[RelationshipResponse]:
        error = require_write_access(ctx)
        if error:
            return Return.err(error)
        if command.target_org_id == ctx.organization_id:
            return Return.err(
                Error("INVALID_TARGET", "An organization cannot connect to itself.")
            )

        async with self.uow:
            target = await self.uow.organizations.get_by_id(command.target_org_id)
            if target is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found."))

            relationship = await upsert_relationship(
                self.uow,
                ctx.organization_id,
                target.id,
                type=command.type,
                tier=command.tier,
            )
            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=ctx.organization_id,
                    entity_id=ctx.entity_id,
                    action="relationship_created",
                    event_metadata={
                        "relationship_id": str(relationship.id),
                        "target_org_id": str(target.id),
                    },
                )
            )
            await self.uow.commit()

            return Return.ok(RelationshipResponse.build(relationship, target, utcnow()))
