"""
Ghost Record Factory

Creates placeholder (unclaimed) organizations and person entities on behalf of
an organization, recording who created them.
"""

import uuid
from typing import Optional, Tuple
from uuid import UUID

from orgnet.app.services.affiliation_linker import AffiliationLinker
from orgnet.app.services.slug import create_with_unique_slug, slugify
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.domain.entities import (
    AccessLevel,
    Entity,
    Organization,
    OrganizationCategory,
    OrgMember,
    OrgMemberRole,
)
from orgnet.libs.result import Error, Result, Return

MAX_NAME_LENGTH = 200
GHOST_EMAIL_DOMAIN = "orgnet.local"


def placeholder_email() -> str:
    return f"ghost-{uuid.uuid4()}@{GHOST_EMAIL_DOMAIN}"


class GhostRecordFactory:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create_organization(
        self,
        name: str,
        created_by_org_id: Optional[UUID],
        category: Optional[OrganizationCategory] = None,
        city: Optional[str] = None,
        website: Optional[str] = None,
    ) -> Result[Organization]:
        """
        Insert an unclaimed organization with a unique slug.

        Errors:
            INVALID_NAME: name empty after trim or longer than 200 chars
            SLUG_UNAVAILABLE: every slug candidate is taken
        """
        clean_name = (name or "").strip()
        if not clean_name:
            return Return.err(Error("INVALID_NAME", "Organization name is required."))
        if len(clean_name) > MAX_NAME_LENGTH:
            return Return.err(
                Error("INVALID_NAME", f"Name must be {MAX_NAME_LENGTH} characters or less.")
            )

        address = {"city": city.strip()} if city and city.strip() else None

        def build(slug: str) -> Organization:
            return Organization(
                name=clean_name,
                slug=slug,
                is_claimed=False,
                owner_id=None,
                created_by_org_id=created_by_org_id,
                category=category,
                website=website,
                address=address,
            )

        organization = await create_with_unique_slug(self.uow, slugify(clean_name), build)
        if organization is None:
            return Return.err(
                Error(
                    "SLUG_UNAVAILABLE",
                    "Could not generate a unique address for this organization. Try a different name.",
                )
            )
        return Return.ok(organization)

    async def create_contact(self, email: Optional[str] = None) -> Entity:
        """Ghost person entity, not bound to any login"""
        clean_email = (email or "").strip().lower() or placeholder_email()
        return await self.uow.entities.create(
            Entity(email=clean_email, is_ghost=True, auth_id=None)
        )

    async def add_roster_member(
        self,
        organization_id: UUID,
        first_name: str,
        last_name: str = "",
        email: Optional[str] = None,
        role: OrgMemberRole = OrgMemberRole.member,
        job_title: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> Tuple[Entity, OrgMember]:
        """Ghost contact affiliated as member and listed on the roster"""
        entity = await self.create_contact(email)
        await AffiliationLinker(self.uow).link(
            entity.id, organization_id, AccessLevel.member
        )
        member = await self.uow.org_members.create(
            OrgMember(
                org_id=organization_id,
                entity_id=entity.id,
                first_name=(first_name or "").strip() or "Contact",
                last_name=(last_name or "").strip(),
                role=role,
                job_title=(job_title or "").strip() or None,
                avatar_url=(avatar_url or "").strip() or None,
            )
        )
        return entity, member
