from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from orgnet.api.error import ClientError, ServerError
from orgnet.app.services.invitation_mailer import IInvitationMailer
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity import RequestContext
from orgnet.app.use_cases.invitations import (
    InviteTeamMemberUseCase,
    TeamInviteCommand,
    TeamInviteResponse,
)
from orgnet.depends import get_mailer, get_request_context, get_unit_of_work

router = APIRouter(prefix="/team", tags=["Team"])


@router.post(
    "/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=TeamInviteResponse,
)
async def invite_team_member(
    command: TeamInviteCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IInvitationMailer = Depends(get_mailer),
):
    """
    Invite a person to the caller's current organization.

    Raises:
        - 400 Bad Request: INVALID_EMAIL, INVALID_ROLE
        - 403 Forbidden: NO_ORGANIZATION, INSUFFICIENT_ACCESS
        - 404 Not Found: ORGANIZATION_NOT_FOUND
        - 409 Conflict: INVITE_ALREADY_EXISTS, ALREADY_MEMBER
    """
    use_case = InviteTeamMemberUseCase(uow, mailer, ApplicationConfig.CLAIM_URL_BASE)
    result = await use_case.execute(ctx, command)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_EMAIL", "INVALID_ROLE"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code in ("NO_ORGANIZATION", "INSUFFICIENT_ACCESS"):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "ORGANIZATION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in ("INVITE_ALREADY_EXISTS", "ALREADY_MEMBER"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
