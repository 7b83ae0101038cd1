from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.libs.result import Result, Return

from .dtos import MeResponse, OrganizationMembershipItem, RequestContext


class GetMeUseCase:
    """Caller's entity plus every organization they are actively affiliated with"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[MeResponse]:
        async with self.uow:
            affiliations = await self.uow.affiliations.get_active_by_entity(
                ctx.entity_id
            )
            organizations = await self.uow.organizations.get_by_ids(
                [a.organization_id for a in affiliations]
            )
            by_id = {o.id: o for o in organizations}

            items = []
            for affiliation in affiliations:
                org = by_id.get(affiliation.organization_id)
                if org is None:
                    continue
                items.append(
                    OrganizationMembershipItem(
                        organization_id=str(org.id),
                        name=org.name,
                        slug=org.slug,
                        is_claimed=org.is_claimed,
                        is_owner=org.owner_id == ctx.entity_id,
                        access_level=affiliation.access_level.value,
                        role_label=affiliation.role_label,
                    )
                )

            return Return.ok(
                MeResponse(
                    entity_id=str(ctx.entity_id),
                    email=ctx.email,
                    current_organization_id=(
                        str(ctx.organization_id) if ctx.organization_id else None
                    ),
                    access_level=ctx.access_level.value if ctx.access_level else None,
                    organizations=items,
                )
            )
