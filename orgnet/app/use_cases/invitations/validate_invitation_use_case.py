from orgnet.app.services.invitation_issuer import hash_token
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.domain.base import utcnow
from orgnet.domain.entities import InvitationStatus
from orgnet.libs.result import Error, Result, Return

from .dtos import ValidateInvitationResponse


class ValidateInvitationUseCase:
    """
    Read-only check used by the claim page before the caller signs in.

    Errors:
        MISSING_TOKEN, INVALID_INVITATION, INVITATION_USED, INVITATION_EXPIRED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[ValidateInvitationResponse]:
        token = (token or "").strip()
        if not token:
            return Return.err(Error("MISSING_TOKEN", "Missing token."))

        async with self.uow:
            invitation = await self.uow.invitations.get_by_token_hash(hash_token(token))
            if invitation is None:
                return Return.err(
                    Error("INVALID_INVITATION", "Invalid or expired invitation.")
                )
            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error("INVITATION_USED", "This invitation has already been used.")
                )
            if invitation.is_expired(utcnow()):
                return Return.err(
                    Error("INVITATION_EXPIRED", "This invitation has expired.")
                )

            organization = await self.uow.organizations.get_by_id(
                invitation.organization_id
            )

            return Return.ok(
                ValidateInvitationResponse(
                    email=invitation.email,
                    organization_id=str(invitation.organization_id),
                    organization_name=organization.name if organization else "Organization",
                    expires_at=invitation.expires_at.isoformat(),
                )
            )
