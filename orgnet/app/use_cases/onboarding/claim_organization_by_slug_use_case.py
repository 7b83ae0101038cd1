"""
Claim Organization By Slug Use Case

Self-service claim of an unclaimed organization by its public slug.
"""

import logging

from orgnet.app.services.affiliation_linker import AffiliationLinker
from orgnet.app.services.slug import MIN_SLUG_LENGTH, normalize_slug
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import Identity
from orgnet.domain.base import utcnow
from orgnet.domain.entities import (
    AccessLevel,
    AuditEvent,
    Entity,
    OrgMember,
    OrgMemberRole,
)
from orgnet.libs.result import Error, Result, Return

from .dtos import ClaimOrganizationResponse

logger = logging.getLogger(__name__)


class ClaimOrganizationBySlugUseCase:
    """
    Business Rules:
    - Slug normalized; shorter than 2 chars is rejected
    - Organization must exist and be unclaimed
    - Caller's entity is created if missing
    - Claim sets is_claimed, claimed_at and owner_id together
    - Owner affiliation (admin) and owner roster row are created if missing
    - Everything commits together or not at all
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, slug: str
    ) -> Result[ClaimOrganizationResponse]:
        normalized = normalize_slug(slug)
        if len(normalized) < MIN_SLUG_LENGTH:
            return Return.err(Error("INVALID_SLUG", "Invalid slug."))

        async with self.uow:
            organization = await self.uow.organizations.get_by_slug(normalized)
            if organization is None or organization.is_claimed:
                return Return.err(
                    Error(
                        "ORG_NOT_CLAIMABLE",
                        "Organization not found or already claimed.",
                    )
                )

            entity = await self.uow.entities.get_by_auth_id(identity.auth_id)
            if entity is None:
                entity = await self.uow.entities.create(
                    Entity(
                        email=identity.email.strip().lower(),
                        is_ghost=False,
                        auth_id=identity.auth_id,
                    )
                )

            claimed = await self.uow.organizations.claim_if_unclaimed(
                organization.id, entity.id, utcnow()
            )
            if not claimed:
                return Return.err(
                    Error(
                        "ORG_NOT_CLAIMABLE",
                        "Organization not found or already claimed.",
                    )
                )

            await AffiliationLinker(self.uow).link(
                entity.id, organization.id, AccessLevel.admin, role_label="Owner"
            )

            member = await self.uow.org_members.get_by_org_and_entity(
                organization.id, entity.id
            )
            if member is None:
                await self.uow.org_members.create(
                    OrgMember(
                        org_id=organization.id,
                        entity_id=entity.id,
                        role=OrgMemberRole.owner,
                    )
                )
            elif member.role != OrgMemberRole.owner:
                member.role = OrgMemberRole.owner
                await self.uow.org_members.update(member)

            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=organization.id,
                    entity_id=entity.id,
                    action="organization_claimed",
                    event_metadata={"method": "slug", "slug": normalized},
                )
            )

            await self.uow.commit()
            logger.info(f"Organization {normalized} claimed by entity {entity.id}")

            return Return.ok(
                ClaimOrganizationResponse(
                    organization_id=str(organization.id),
                    organization_name=organization.name,
                    entity_id=str(entity.id),
                    access_level=AccessLevel.admin.value,
                )
            )
