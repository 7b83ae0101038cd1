"""
Create Genesis Organization Use Case

Creates the caller's HQ organization, claimed from the start.
"""

import logging

from orgnet.app.services.affiliation_linker import AffiliationLinker
from orgnet.app.services.slug import create_with_unique_slug, normalize_slug, slugify
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.domain.base import utcnow
from orgnet.domain.entities import (
    AccessLevel,
    AuditEvent,
    Organization,
    OrgMember,
    OrgMemberRole,
)
from orgnet.libs.result import Error, Result, Return

from .dtos import GenesisCommand, OrganizationResponse

logger = logging.getLogger(__name__)


class CreateGenesisOrganizationUseCase:
    """
    Business Rules:
    - Organization is claimed immediately, owned by the caller's entity
    - Slug: user-provided (normalized) or derived from name; collisions retried
    - Caller gets an Owner affiliation (admin) and an owner roster row
    - logo_url kept only when it is an http(s) URL
    - All writes happen in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, command: GenesisCommand
    ) -> Result[OrganizationResponse]:
        name = command.name.strip()
        if not name:
            return Return.err(Error("INVALID_NAME", "Organization name is required."))

        base_slug = normalize_slug(command.slug or "").strip("-") or slugify(name)
        logo_url = (command.logo_url or "").strip()
        brand_color = (command.brand_color or "").strip()

        async with self.uow:

            def build(slug: str) -> Organization:
                return Organization(
                    name=name,
                    slug=slug,
                    is_claimed=True,
                    claimed_at=utcnow(),
                    owner_id=ctx.entity_id,
                    tier=command.tier,
                    category=command.category,
                    brand_color=brand_color or None,
                    logo_url=logo_url if logo_url.startswith("http") else None,
                )

            organization = await create_with_unique_slug(self.uow, base_slug, build)
            if organization is None:
                return Return.err(
                    Error(
                        "SLUG_UNAVAILABLE",
                        "That address is already in use. Choose a different one.",
                    )
                )

            await AffiliationLinker(self.uow).link(
                ctx.entity_id, organization.id, AccessLevel.admin, role_label="Owner"
            )
            await self.uow.org_members.create(
                OrgMember(
                    org_id=organization.id,
                    entity_id=ctx.entity_id,
                    role=OrgMemberRole.owner,
                )
            )
            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=organization.id,
                    entity_id=ctx.entity_id,
                    action="genesis_organization_created",
                    event_metadata={"slug": organization.slug, "tier": command.tier.value},
                )
            )

            await self.uow.commit()
            logger.info(f"Genesis organization {organization.slug} created by {ctx.entity_id}")

            return Return.ok(OrganizationResponse.from_entity(organization))
