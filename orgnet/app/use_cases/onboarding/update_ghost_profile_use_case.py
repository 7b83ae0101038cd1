"""
Update Ghost Profile Use Case

Edits the public profile of an unclaimed organization. Only the organization
that created the ghost may edit it, and only until it is claimed.
"""

from typing import Optional
from uuid import UUID

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.domain.base import utcnow
from orgnet.domain.entities import Organization
from orgnet.libs.result import Error, Result, Return

from .dtos import GhostProfileInput, OrganizationResponse

OPERATIONAL_KEYS = ("doing_business_as", "entity_type", "tax_id", "payment_terms")


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def apply_ghost_profile(
    organization: Organization, profile: GhostProfileInput
) -> Optional[Error]:
    """Validate and copy a profile onto an organization; returns an Error on bad input"""
    name = (profile.name or "").strip()
    if len(name) <= 1:
        return Error("INVALID_NAME", "Name is required.")
    website = _clean(profile.website)
    if website and "." not in website:
        return Error("INVALID_WEBSITE", "Website must contain a domain.")

    organization.name = name
    organization.website = website
    organization.brand_color = _clean(profile.brand_color)
    organization.logo_url = _clean(profile.logo_url)
    organization.support_email = _clean(profile.support_email)
    organization.phone = _clean(profile.phone)
    organization.category = profile.category

    if profile.address is not None:
        address = {k: v.strip() for k, v in profile.address.model_dump().items() if v and v.strip()}
        organization.address = address or None
    else:
        organization.address = None

    # Merge: provided values win, missing ones keep what was stored
    settings = dict(organization.operational_settings or {})
    for key in OPERATIONAL_KEYS:
        value = _clean(getattr(profile, key))
        settings[key] = value if value is not None else settings.get(key)
    currency = _clean(profile.default_currency)
    if currency is not None:
        settings["default_currency"] = currency
    organization.operational_settings = settings

    organization.updated_at = utcnow()
    return None


class UpdateGhostProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, organization_id: UUID, profile: GhostProfileInput
    ) -> Result[OrganizationResponse]:
        error = require_write_access(ctx)
        if error:
            return Return.err(error)

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)
            if (
                organization is None
                or organization.created_by_org_id != ctx.organization_id
                or organization.is_claimed
            ):
                return Return.err(
                    Error(
                        "NO_CLEARANCE",
                        "You do not have clearance to edit this entity.",
                    )
                )

            error = apply_ghost_profile(organization, profile)
            if error:
                return Return.err(error)

            organization = await self.uow.organizations.update(organization)
            await self.uow.commit()

            return Return.ok(OrganizationResponse.from_entity(organization))
