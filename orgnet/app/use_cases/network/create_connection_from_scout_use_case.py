"""
Create Connection From Scout Use Case

Turns a website into a ghost partner: looks the site up through the Scout
enrichment service, creates the ghost organization with its profile and
roster, and connects it to the caller's organization.
"""

import logging
from typing import Optional
from urllib.parse import urlparse

from orgnet.app.services.ghost_factory import GhostRecordFactory
from orgnet.app.services.scout_service import IScoutService, ScoutProfile
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.app.use_cases.onboarding.dtos import AddressInput, GhostProfileInput
from orgnet.app.use_cases.onboarding.update_ghost_profile_use_case import (
    apply_ghost_profile,
)
from orgnet.domain.base import utcnow
from orgnet.domain.entities import AuditEvent, OrganizationCategory
from orgnet.libs.result import Error, Result, Return

from .dtos import GhostConnectionResponse, RelationshipResponse, ScoutConnectionCommand
from .scope import upsert_relationship

logger = logging.getLogger(__name__)


def normalize_url(raw: str) -> str:
    url = raw.strip()
    if not url.lower().startswith(("http://", "https://")):
        url = f"https://{url}"
    return url


def host_name(url: str) -> Optional[str]:
    host = urlparse(url).hostname or ""
    if host.startswith("www."):
        host = host[4:]
    return host if "." in host else None


class CreateConnectionFromScoutUseCase:
    """
    Business Rules:
    - Scout lookup is best-effort; without it the name is the URL host
    - Lookup runs before the transaction opens
    - Ghost org, profile, roster and relationship commit together
    """

    def __init__(self, uow: UnitOfWork, scout: IScoutService):
        self.uow = uow
        self.scout = scout

    async def execute(
        self, ctx: RequestContext, command: ScoutConnectionCommand
    ) -> Result[GhostConnectionResponse]:
        error = require_write_access(ctx)
        if error:
            return Return.err(error)

        url = normalize_url(command.url)
        host = host_name(url)
        if host is None:
            return Return.err(Error("INVALID_URL", "Enter a valid website address."))

        profile = await self.scout.lookup(url)
        if profile is None:
            logger.info(f"No Scout data for {url}, using host name")
            profile = ScoutProfile()

        name = (profile.name or "").strip() or host

        async with self.uow:
            factory = GhostRecordFactory(self.uow)
            created = await factory.create_organization(
                name, created_by_org_id=ctx.organization_id
            )
            if created.is_err():
                return created
            ghost = created.value

            error = apply_ghost_profile(
                ghost,
                GhostProfileInput(
                    name=name,
                    website=profile.website or url,
                    logo_url=profile.logo_url,
                    support_email=profile.support_email,
                    phone=profile.phone,
                    address=(
                        AddressInput.model_validate(profile.address)
                        if profile.address
                        else None
                    ),
                    doing_business_as=profile.doing_business_as,
                    category=OrganizationCategory.coordinator,
                ),
            )
            if error:
                return Return.err(error)
            ghost = await self.uow.organizations.update(ghost)

            for person in profile.roster:
                await factory.add_roster_member(
                    ghost.id,
                    first_name=person.first_name,
                    last_name=person.last_name,
                    email=person.email,
                    job_title=person.job_title,
                    avatar_url=person.avatar_url,
                )

            relationship = await upsert_relationship(
                self.uow, ctx.organization_id, ghost.id
            )
            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=ctx.organization_id,
                    entity_id=ctx.entity_id,
                    action="scout_connection_created",
                    event_metadata={
                        "relationship_id": str(relationship.id),
                        "target_org_id": str(ghost.id),
                        "url": url,
                        "roster_size": len(profile.roster),
                    },
                )
            )
            await self.uow.commit()

            return Return.ok(
                GhostConnectionResponse(
                    relationship=RelationshipResponse.build(relationship, ghost, utcnow()),
                    organization_id=str(ghost.id),
                    contacts_added=len(profile.roster),
                    scout_used=bool(profile.name or profile.roster),
                )
            )
