"""
Claim Organization Use Case

Redeems an invitation token: transfers ownership of a ghost organization to
the caller and binds the ghost contact to the caller's identity.

State machine:
    pending --(valid token, matching email, not expired)--> accepted
Every other transition fails closed.
"""

import logging
from typing import Optional
from uuid import UUID

from orgnet.app.services.affiliation_linker import AffiliationLinker, outranks
from orgnet.app.services.invitation_issuer import hash_token
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import Identity
from orgnet.app.use_cases.onboarding.dtos import ClaimOrganizationResponse
from orgnet.domain.base import utcnow
from orgnet.domain.entities import AuditEvent, Entity, OrgMember, OrgMemberRole
from orgnet.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

INVALID_INVITATION = Error("INVALID_INVITATION", "Invalid or expired invitation.")


class ClaimOrganizationUseCase:
    """
    Business Rules:
    - Invitation must be pending and unexpired; consumed exactly once
    - Caller email must match the invitation email (case-insensitive)
    - Ghost contact: the ghost affiliate with the invited email, else any ghost affiliate
    - Unclaimed organization becomes owned by the claimer
    - Caller without an entity takes over the ghost entity; caller with an
      entity absorbs the ghost's affiliation and roster rows
    - Access level is escalated to the invitation's level, never lowered
    - One transaction: any failure leaves no partial claim behind
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, token: str
    ) -> Result[ClaimOrganizationResponse]:
        token = (token or "").strip()
        if not token:
            return Return.err(Error("MISSING_TOKEN", "Missing token."))

        now = utcnow()
        caller_email = identity.email.strip().lower()

        async with self.uow:
            invitation = await self.uow.invitations.get_pending_valid_by_token_hash(
                hash_token(token), now
            )
            if invitation is None:
                return Return.err(INVALID_INVITATION)

            invited_email = invitation.email.strip().lower()
            if invited_email != caller_email:
                return Return.err(
                    Error(
                        "EMAIL_MISMATCH",
                        "This invitation was sent to a different email address.",
                    )
                )

            organization = await self.uow.organizations.get_by_id(
                invitation.organization_id
            )
            if organization is None:
                return Return.err(INVALID_INVITATION)

            caller = await self.uow.entities.get_by_auth_id(identity.auth_id)
            ghost = await self._resolve_ghost(organization.id, invited_email)
            if ghost is None and not await self._is_affiliated(caller, organization.id):
                return Return.err(
                    Error("NO_LINKED_CONTACT", "Organization has no linked contact.")
                )

            if not await self.uow.invitations.consume(invitation.id, now):
                return Return.err(INVALID_INVITATION)

            merged_ghost_id: Optional[UUID] = None
            if ghost is None:
                entity = caller
            elif caller is None:
                ghost.is_ghost = False
                ghost.auth_id = identity.auth_id
                entity = await self.uow.entities.update(ghost)
            else:
                merged_ghost_id = ghost.id
                await self._merge_ghost(ghost, caller, organization.id)
                entity = caller

            ownership_transferred = await self.uow.organizations.claim_if_unclaimed(
                organization.id, entity.id, now
            )

            affiliation = await AffiliationLinker(self.uow).link(
                entity.id, organization.id, invitation.access_level
            )

            if ownership_transferred:
                await self._ensure_owner_roster(organization.id, entity.id)

            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=organization.id,
                    entity_id=entity.id,
                    action="organization_claimed",
                    event_metadata={
                        "method": "token",
                        "invitation_id": str(invitation.id),
                        "ownership_transferred": ownership_transferred,
                        "merged_ghost_id": str(merged_ghost_id) if merged_ghost_id else None,
                        "access_level": affiliation.access_level.value,
                    },
                )
            )

            await self.uow.commit()
            logger.info(
                f"Invitation {invitation.id} redeemed by entity {entity.id} "
                f"(ownership_transferred={ownership_transferred})"
            )

            return Return.ok(
                ClaimOrganizationResponse(
                    organization_id=str(organization.id),
                    organization_name=organization.name,
                    entity_id=str(entity.id),
                    access_level=affiliation.access_level.value,
                )
            )

    async def _resolve_ghost(
        self, organization_id: UUID, invited_email: str
    ) -> Optional[Entity]:
        ghosts = await self.uow.entities.get_ghost_affiliates(organization_id)
        for ghost in ghosts:
            if ghost.email.strip().lower() == invited_email:
                return ghost
        # Without an email match only an unambiguous single ghost is taken
        return ghosts[0] if len(ghosts) == 1 else None

    async def _is_affiliated(self, caller: Optional[Entity], organization_id: UUID) -> bool:
        if caller is None:
            return False
        affiliation = await self.uow.affiliations.get_by_entity_and_organization(
            caller.id, organization_id
        )
        return affiliation is not None

    async def _merge_ghost(self, ghost: Entity, caller: Entity, organization_id: UUID):
        """Move the ghost's rows for this organization onto the caller's entity"""
        ghost_affiliation = await self.uow.affiliations.get_by_entity_and_organization(
            ghost.id, organization_id
        )
        caller_affiliation = await self.uow.affiliations.get_by_entity_and_organization(
            caller.id, organization_id
        )
        if ghost_affiliation is not None:
            if caller_affiliation is None:
                ghost_affiliation.entity_id = caller.id
                await self.uow.affiliations.update(ghost_affiliation)
            else:
                if outranks(ghost_affiliation.access_level, caller_affiliation.access_level):
                    caller_affiliation.access_level = ghost_affiliation.access_level
                    await self.uow.affiliations.update(caller_affiliation)
                await self.uow.affiliations.delete(ghost_affiliation)

        ghost_member = await self.uow.org_members.get_by_org_and_entity(
            organization_id, ghost.id
        )
        if ghost_member is not None:
            caller_member = await self.uow.org_members.get_by_org_and_entity(
                organization_id, caller.id
            )
            if caller_member is None:
                ghost_member.entity_id = caller.id
                await self.uow.org_members.update(ghost_member)
            else:
                await self.uow.org_members.delete(ghost_member)

        if not await self.uow.affiliations.get_active_by_entity(ghost.id):
            await self.uow.entities.delete(ghost)

    async def _ensure_owner_roster(self, organization_id: UUID, entity_id: UUID):
        member = await self.uow.org_members.get_by_org_and_entity(
            organization_id, entity_id
        )
        if member is None:
            await self.uow.org_members.create(
                OrgMember(org_id=organization_id, entity_id=entity_id, role=OrgMemberRole.owner)
            )
        elif member.role != OrgMemberRole.owner:
            member.role = OrgMemberRole.owner
            await self.uow.org_members.update(member)
