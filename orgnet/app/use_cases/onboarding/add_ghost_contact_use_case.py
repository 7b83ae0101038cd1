from uuid import UUID

from orgnet.app.services.ghost_factory import GhostRecordFactory
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.libs.result import Error, Result, Return

from .dtos import GhostContactInput, GhostContactResponse


class AddGhostContactUseCase:
    """
    Adds a person to the roster of a ghost organization.

    Only the organization that created the ghost can add crew. Contacts
    without an email get a placeholder address.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, organization_id: UUID, contact: GhostContactInput
    ) -> Result[GhostContactResponse]:
        error = require_write_access(ctx)
        if error:
            return Return.err(error)

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Partner org not found."))
            if organization.created_by_org_id != ctx.organization_id:
                return Return.err(
                    Error(
                        "NO_CLEARANCE",
                        "Only the org that created this partner can add crew.",
                    )
                )

            entity, member = await GhostRecordFactory(self.uow).add_roster_member(
                organization.id,
                first_name=contact.first_name,
                last_name=contact.last_name,
                email=contact.email,
                role=contact.role,
                job_title=contact.job_title,
                avatar_url=contact.avatar_url,
            )
            await self.uow.commit()

            return Return.ok(
                GhostContactResponse(
                    entity_id=str(entity.id),
                    member_id=str(member.id),
                    email=entity.email,
                    display_name=member.display_name,
                )
            )
