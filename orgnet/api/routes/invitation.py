from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from orgnet.api.error import ClientError, ServerError
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity import Identity
from orgnet.app.use_cases.invitations import (
    ClaimOrganizationUseCase,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from orgnet.app.use_cases.onboarding import ClaimOrganizationResponse
from orgnet.depends import get_identity, get_unit_of_work

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class ClaimInvitationRequest(BaseModel):
    token: str = Field(..., description="Raw claim token from the invitation link")


@router.get(
    "/validate",
    status_code=status.HTTP_200_OK,
    response_model=ValidateInvitationResponse,
)
async def validate_invitation(
    token: str = "",
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Public preview of a claim link: which organization and which email.

    Raises:
        - 400 Bad Request: MISSING_TOKEN
        - 404 Not Found: INVALID_INVITATION
        - 409 Conflict: INVITATION_USED
        - 410 Gone: INVITATION_EXPIRED
    """
    result = await ValidateInvitationUseCase(uow).execute(token)

    if result.is_err():
        error = result.error
        if error.code == "MISSING_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "INVALID_INVITATION":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "INVITATION_USED":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "INVITATION_EXPIRED":
            raise ClientError(error, status_code=status.HTTP_410_GONE)
        raise ServerError(error)

    return result.value


@router.post(
    "/claim",
    status_code=status.HTTP_200_OK,
    response_model=ClaimOrganizationResponse,
)
async def claim_invitation(
    request: ClaimInvitationRequest,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Redeem a claim token. The token is single-use and bound to the invited
    email address.

    Raises:
        - 400 Bad Request: MISSING_TOKEN
        - 403 Forbidden: EMAIL_MISMATCH
        - 404 Not Found: INVALID_INVITATION, ORGANIZATION_NOT_FOUND
        - 409 Conflict: NO_LINKED_CONTACT
    """
    result = await ClaimOrganizationUseCase(uow).execute(identity, request.token)

    if result.is_err():
        error = result.error
        if error.code == "MISSING_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "EMAIL_MISMATCH":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code in ("INVALID_INVITATION", "ORGANIZATION_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "NO_LINKED_CONTACT":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
