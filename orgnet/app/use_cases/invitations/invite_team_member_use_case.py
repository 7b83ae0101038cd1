"""
Invite Team Member Use Case

Adds a person to the caller's organization roster and issues a member-level
invitation they can redeem after signing in.
"""

import logging

from orgnet.app.services.affiliation_linker import AffiliationLinker
from orgnet.app.services.ghost_factory import GhostRecordFactory
from orgnet.app.services.invitation_issuer import InvitationIssuer
from orgnet.app.services.invitation_mailer import IInvitationMailer
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.domain.entities import (
    AccessLevel,
    AffiliationStatus,
    AuditEvent,
    OrgMember,
    OrgMemberRole,
)
from orgnet.libs.result import Error, Result, Return

from .dtos import TeamInviteCommand, TeamInviteResponse

logger = logging.getLogger(__name__)

ADMIN_ROLES = (OrgMemberRole.owner, OrgMemberRole.admin)


class InviteTeamMemberUseCase:
    """
    Business Rules:
    - Caller needs admin or member access to the context organization
    - Only admins can hand out the admin role; owner is never assigned by invite
    - One pending invitation per email and organization
    - Invitee is a ghost contact (reused when already on the roster)
    - Affiliation (member) + roster row + invitation (member) in one transaction
    """

    def __init__(
        self, uow: UnitOfWork, mailer: IInvitationMailer, claim_url_base: str
    ):
        self.uow = uow
        self.mailer = mailer
        self.claim_url_base = claim_url_base.rstrip("/")

    async def execute(
        self, ctx: RequestContext, command: TeamInviteCommand
    ) -> Result[TeamInviteResponse]:
        error = require_write_access(ctx)
        if error:
            return Return.err(error)

        email = command.email.strip().lower()
        if "@" not in email:
            return Return.err(Error("INVALID_EMAIL", "A valid email is required."))
        if command.role == OrgMemberRole.owner:
            return Return.err(Error("INVALID_ROLE", "The owner role cannot be assigned."))
        if command.role in ADMIN_ROLES and ctx.access_level != AccessLevel.admin:
            return Return.err(
                Error("INSUFFICIENT_ACCESS", "Only admins can assign the admin role.")
            )

        organization_id = ctx.organization_id

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found."))

            pending = await self.uow.invitations.get_pending_by_organization_and_email(
                organization_id, email
            )
            if pending is not None:
                return Return.err(
                    Error(
                        "INVITE_ALREADY_EXISTS",
                        "An invitation is already pending for this email.",
                    )
                )

            existing = await self.uow.entities.get_by_email(email)
            if existing is not None and not existing.is_ghost:
                affiliation = await self.uow.affiliations.get_by_entity_and_organization(
                    existing.id, organization_id
                )
                if affiliation is not None and affiliation.status == AffiliationStatus.active:
                    return Return.err(
                        Error("ALREADY_MEMBER", "This person is already on your team.")
                    )
            # Invitee joins as a ghost contact; redeeming the invitation binds or
            # merges it into their own entity
            ghosts = await self.uow.entities.get_ghost_affiliates(organization_id)
            entity = next((g for g in ghosts if g.email.strip().lower() == email), None)
            if entity is None:
                entity = await GhostRecordFactory(self.uow).create_contact(email)

            await AffiliationLinker(self.uow).link(
                entity.id, organization_id, AccessLevel.member
            )

            member = await self.uow.org_members.get_by_org_and_entity(
                organization_id, entity.id
            )
            if member is None:
                member = await self.uow.org_members.create(
                    OrgMember(
                        org_id=organization_id,
                        entity_id=entity.id,
                        first_name=(command.first_name or "").strip() or None,
                        last_name=(command.last_name or "").strip() or None,
                        job_title=(command.job_title or "").strip() or None,
                        role=command.role,
                    )
                )

            issued = await InvitationIssuer(self.uow).issue(
                organization_id,
                email,
                access_level=AccessLevel.member,
                created_by_org_id=organization_id,
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=organization_id,
                    entity_id=ctx.entity_id,
                    action="team_member_invited",
                    event_metadata={
                        "invitation_id": str(issued.invitation.id),
                        "invited_entity_id": str(entity.id),
                        "role": command.role.value,
                    },
                )
            )

            await self.uow.commit()

        try:
            await self.mailer.send_invitation(
                email, organization.name, f"{self.claim_url_base}/{issued.token}"
            )
        except Exception:
            logger.warning(f"Failed to deliver team invitation to {email}", exc_info=True)

        return Return.ok(
            TeamInviteResponse(
                invite_id=str(issued.invitation.id),
                entity_id=str(entity.id),
                member_id=str(member.id),
                status=issued.invitation.status.value,
                expires_at=issued.invitation.expires_at.isoformat(),
            )
        )
