from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from orgnet.api.error import ClientError, ServerError
from orgnet.app.services.invitation_mailer import IInvitationMailer
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity import Identity, RequestContext
from orgnet.app.use_cases.onboarding import (
    AddGhostContactUseCase,
    CheckSlugAvailabilityUseCase,
    ClaimOrganizationBySlugUseCase,
    ClaimOrganizationResponse,
    CreateGenesisOrganizationUseCase,
    CreateGhostOrganizationResponse,
    CreateGhostOrganizationUseCase,
    GenesisCommand,
    GhostContactInput,
    GhostContactResponse,
    GhostProfileInput,
    OrganizationResponse,
    SlugAvailabilityResponse,
    UpdateGhostProfileUseCase,
)
from orgnet.depends import get_identity, get_mailer, get_request_context, get_unit_of_work

router = APIRouter(prefix="/organizations", tags=["Onboarding"])


class CreateGhostOrganizationRequest(BaseModel):
    """
    Create ghost organization HTTP request payload

    creator_org_id defaults to the caller's current organization.
    """

    name: str = Field(..., min_length=1, max_length=200)
    contact_email: str = Field(..., min_length=3, max_length=255)
    creator_org_id: Optional[UUID] = None


class ClaimBySlugRequest(BaseModel):
    slug: str = Field(..., min_length=1, max_length=120)


@router.get(
    "/slug-availability",
    status_code=status.HTTP_200_OK,
    response_model=SlugAvailabilityResponse,
)
async def check_slug_availability(
    slug: str,
    exclude_org_id: Optional[UUID] = None,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Slug status: void (free), taken (claimed org), ghost (claimable) or invalid.
    """
    result = await CheckSlugAvailabilityUseCase(uow).execute(slug, exclude_org_id)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.post(
    "/genesis",
    status_code=status.HTTP_201_CREATED,
    response_model=OrganizationResponse,
)
async def create_genesis_organization(
    command: GenesisCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create the caller's HQ organization, owned and administered by the caller.

    Raises:
        - 400 Bad Request: INVALID_NAME, INVALID_SLUG
        - 409 Conflict: SLUG_UNAVAILABLE
    """
    result = await CreateGenesisOrganizationUseCase(uow).execute(ctx, command)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_NAME", "INVALID_SLUG"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "SLUG_UNAVAILABLE":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.post(
    "/ghosts",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateGhostOrganizationResponse,
)
async def create_ghost_organization(
    request: CreateGhostOrganizationRequest,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IInvitationMailer = Depends(get_mailer),
):
    """
    Create an unclaimed organization on someone else's behalf and invite its
    contact to claim it.

    Raises:
        - 400 Bad Request: INVALID_NAME, INVALID_EMAIL
        - 403 Forbidden: NOT_A_MEMBER, NO_ORGANIZATION, INSUFFICIENT_ACCESS
        - 409 Conflict: SLUG_UNAVAILABLE
    """
    use_case = CreateGhostOrganizationUseCase(
        uow, mailer, ApplicationConfig.CLAIM_URL_BASE
    )
    result = await use_case.execute(
        ctx, request.name, request.contact_email, request.creator_org_id
    )

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_NAME", "INVALID_EMAIL"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code in ("NOT_A_MEMBER", "NO_ORGANIZATION", "INSUFFICIENT_ACCESS"):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "SLUG_UNAVAILABLE":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.post(
    "/claim-by-slug",
    status_code=status.HTTP_200_OK,
    response_model=ClaimOrganizationResponse,
)
async def claim_organization_by_slug(
    request: ClaimBySlugRequest,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Claim an unclaimed organization directly by its slug.

    Raises:
        - 400 Bad Request: INVALID_SLUG
        - 404 Not Found: ORG_NOT_CLAIMABLE (missing or already claimed)
    """
    result = await ClaimOrganizationBySlugUseCase(uow).execute(identity, request.slug)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_SLUG":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "ORG_NOT_CLAIMABLE":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.put(
    "/{organization_id}/profile",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationResponse,
)
async def update_ghost_profile(
    organization_id: UUID,
    profile: GhostProfileInput,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Edit the profile of a ghost organization created by the caller's org.

    Raises:
        - 400 Bad Request: INVALID_NAME, INVALID_WEBSITE
        - 403 Forbidden: NO_CLEARANCE, NO_ORGANIZATION, INSUFFICIENT_ACCESS
    """
    result = await UpdateGhostProfileUseCase(uow).execute(ctx, organization_id, profile)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_NAME", "INVALID_WEBSITE"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code in ("NO_CLEARANCE", "NO_ORGANIZATION", "INSUFFICIENT_ACCESS"):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value


@router.post(
    "/{organization_id}/contacts",
    status_code=status.HTTP_201_CREATED,
    response_model=GhostContactResponse,
)
async def add_ghost_contact(
    organization_id: UUID,
    contact: GhostContactInput,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add a roster contact to a ghost organization created by the caller's org.

    Raises:
        - 403 Forbidden: NO_CLEARANCE, NO_ORGANIZATION, INSUFFICIENT_ACCESS
        - 404 Not Found: ORGANIZATION_NOT_FOUND
    """
    result = await AddGhostContactUseCase(uow).execute(ctx, organization_id, contact)

    if result.is_err():
        error = result.error
        if error.code in ("NO_CLEARANCE", "NO_ORGANIZATION", "INSUFFICIENT_ACCESS"):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "ORGANIZATION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
