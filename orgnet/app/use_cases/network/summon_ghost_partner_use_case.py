"""
Summon Ghost Partner Use Case

Creates a ghost organization for a partner that is not in the network yet,
optionally with a main contact, and connects it to the caller's organization.
"""

from orgnet.app.services.ghost_factory import GhostRecordFactory
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.domain.base import utcnow
from orgnet.domain.entities import AuditEvent
from orgnet.libs.result import Result, Return

from .dtos import GhostConnectionResponse, RelationshipResponse, SummonGhostPartnerCommand
from .scope import upsert_relationship


class SummonGhostPartnerUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, command: SummonGhostPartnerCommand
    ) -> Result[GhostConnectionResponse]:
        error = require_write_access(ctx)
        if error:
            return Return.err(error)

        name = command.name.strip()
        org_name = f"{name} (Personal)" if command.kind == "person" and name else name

        async with self.uow:
            factory = GhostRecordFactory(self.uow)
            created = await factory.create_organization(
                org_name,
                created_by_org_id=ctx.organization_id,
                category=command.category,
                city=command.city,
                website=(command.website or "").strip() or None,
            )
            if created.is_err():
                return created
            ghost = created.value

            contacts_added = 0
            contact_name = (
                (command.contact_name or "").strip() if command.kind == "organization" else name
            )
            email = (command.email or "").strip() or None
            if contact_name or email:
                parts = (contact_name or name or "Contact").split()
                await factory.add_roster_member(
                    ghost.id,
                    first_name=parts[0] if parts else "Contact",
                    last_name=" ".join(parts[1:]),
                    email=email,
                )
                contacts_added = 1

            relationship = await upsert_relationship(
                self.uow, ctx.organization_id, ghost.id, type=command.type
            )
            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=ctx.organization_id,
                    entity_id=ctx.entity_id,
                    action="ghost_partner_summoned",
                    event_metadata={
                        "relationship_id": str(relationship.id),
                        "target_org_id": str(ghost.id),
                    },
                )
            )
            await self.uow.commit()

            return Return.ok(
                GhostConnectionResponse(
                    relationship=RelationshipResponse.build(relationship, ghost, utcnow()),
                    organization_id=str(ghost.id),
                    contacts_added=contacts_added,
                )
            )
