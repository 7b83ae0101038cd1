"""
Create Ghost Organization Use Case

Creates an unclaimed organization on behalf of the caller's organization,
links a ghost contact to it and issues a claim invitation to that contact.
"""

import logging
from typing import Optional
from uuid import UUID

from orgnet.app.services.affiliation_linker import AffiliationLinker
from orgnet.app.services.ghost_factory import GhostRecordFactory
from orgnet.app.services.invitation_issuer import IssuedInvitation, InvitationIssuer
from orgnet.app.services.invitation_mailer import IInvitationMailer
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import WRITE_ACCESS, require_write_access
from orgnet.domain.entities import AccessLevel, AffiliationStatus, AuditEvent
from orgnet.libs.result import Error, Result, Return

from .dtos import CreateGhostOrganizationResponse, OrganizationResponse

logger = logging.getLogger(__name__)


class CreateGhostOrganizationUseCase:
    """
    Business Rules:
    - Creator org: explicit id (caller must be admin/member there) or context org
    - Ghost org is unclaimed, created_by_org_id = creator org
    - Contact is a ghost entity affiliated as member with role "Owner"
    - Invitation (admin on claim) is non-fatal: failure is logged and reported
    - Any other failure rolls back every write of the operation
    """

    def __init__(
        self, uow: UnitOfWork, mailer: IInvitationMailer, claim_url_base: str
    ):
        self.uow = uow
        self.mailer = mailer
        self.claim_url_base = claim_url_base.rstrip("/")

    async def execute(
        self,
        ctx: RequestContext,
        name: str,
        contact_email: str,
        creator_org_id: Optional[UUID] = None,
    ) -> Result[CreateGhostOrganizationResponse]:
        email = (contact_email or "").strip().lower()
        if "@" not in email:
            return Return.err(Error("INVALID_EMAIL", "A valid contact email is required."))

        async with self.uow:
            if creator_org_id is not None:
                affiliation = await self.uow.affiliations.get_by_entity_and_organization(
                    ctx.entity_id, creator_org_id
                )
                if (
                    affiliation is None
                    or affiliation.status != AffiliationStatus.active
                    or affiliation.access_level not in WRITE_ACCESS
                ):
                    return Return.err(
                        Error(
                            "NOT_A_MEMBER",
                            "You are not a member of the selected creator organization.",
                        )
                    )
            else:
                error = require_write_access(ctx)
                if error:
                    return Return.err(error)
                creator_org_id = ctx.organization_id

            factory = GhostRecordFactory(self.uow)
            created = await factory.create_organization(name, created_by_org_id=creator_org_id)
            if created.is_err():
                return created
            organization = created.value

            contact = await factory.create_contact(email)
            await AffiliationLinker(self.uow).link(
                contact.id, organization.id, AccessLevel.member, role_label="Owner"
            )

            issued: Optional[IssuedInvitation] = None
            try:
                async with self.uow.savepoint():
                    issued = await InvitationIssuer(self.uow).issue(
                        organization.id,
                        email,
                        access_level=AccessLevel.admin,
                        created_by_org_id=creator_org_id,
                    )
            except Exception:
                logger.warning(
                    f"Invitation for ghost organization {organization.id} ({email}) "
                    f"was not created; resend manually",
                    exc_info=True,
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=organization.id,
                    entity_id=ctx.entity_id,
                    action="ghost_organization_created",
                    event_metadata={
                        "created_by_org_id": str(creator_org_id),
                        "slug": organization.slug,
                        "invitation_issued": issued is not None,
                    },
                )
            )

            await self.uow.commit()

        if issued is not None:
            await self._send(email, organization.name, issued.token)

        return Return.ok(
            CreateGhostOrganizationResponse(
                organization=OrganizationResponse.from_entity(organization),
                contact_entity_id=str(contact.id),
                invitation_issued=issued is not None,
            )
        )

    async def _send(self, email: str, organization_name: str, token: str) -> None:
        try:
            await self.mailer.send_invitation(
                email, organization_name, f"{self.claim_url_base}/{token}"
            )
        except Exception:
            logger.warning(f"Failed to deliver invitation to {email}", exc_info=True)
