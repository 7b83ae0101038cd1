"""
Network routes: org-to-org relationships.

Relationships are addressed by id and always scoped to the caller's current
organization as source; other organizations' rows are reported as not found.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from orgnet.api.error import ClientError, ServerError
from orgnet.app.services.scout_service import IScoutService
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity import RequestContext
from orgnet.app.use_cases.network import (
    CreateConnectionFromScoutUseCase,
    CreateRelationshipCommand,
    CreateRelationshipUseCase,
    DeletedRelationshipResponse,
    GhostConnectionResponse,
    ListDeletedRelationshipsUseCase,
    ListRelationshipsUseCase,
    PinRelationshipUseCase,
    RelationshipResponse,
    RestoreRelationshipUseCase,
    ScoutConnectionCommand,
    SoftDeleteRelationshipResponse,
    SoftDeleteRelationshipUseCase,
    SummonGhostPartnerCommand,
    SummonGhostPartnerUseCase,
    UnpinRelationshipUseCase,
    UpdateRelationshipCommand,
    UpdateRelationshipUseCase,
)
from orgnet.domain.entities import RelationshipTier
from orgnet.depends import get_request_context, get_scout_service, get_unit_of_work
from orgnet.libs.result import Error

router = APIRouter(prefix="/network", tags=["Network"])

ACCESS_ERRORS = ("NO_ORGANIZATION", "INSUFFICIENT_ACCESS")


def raise_for_error(error: Error):
    if error.code in (
        "INVALID_NAME",
        "INVALID_URL",
        "INVALID_WEBSITE",
        "INVALID_TARGET",
    ):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code in ACCESS_ERRORS:
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("RELATIONSHIP_NOT_FOUND", "ORGANIZATION_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code in ("SLUG_UNAVAILABLE", "NOT_DELETED"):
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    elif error.code == "RESTORE_WINDOW_EXPIRED":
        raise ClientError(error, status_code=status.HTTP_410_GONE)
    raise ServerError(error)


@router.get(
    "", status_code=status.HTTP_200_OK, response_model=List[RelationshipResponse]
)
async def list_relationships(
    tier: Optional[RelationshipTier] = None,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active network, optionally filtered to the inner (preferred) or outer circle"""
    result = await ListRelationshipsUseCase(uow).execute(ctx, tier=tier)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/deleted",
    status_code=status.HTTP_200_OK,
    response_model=List[DeletedRelationshipResponse],
)
async def list_deleted_relationships(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Connections deleted within the restore window"""
    result = await ListDeletedRelationshipsUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/relationships",
    status_code=status.HTTP_201_CREATED,
    response_model=RelationshipResponse,
)
async def create_relationship(
    command: CreateRelationshipCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateRelationshipUseCase(uow).execute(ctx, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/ghosts",
    status_code=status.HTTP_201_CREATED,
    response_model=GhostConnectionResponse,
)
async def summon_ghost_partner(
    command: SummonGhostPartnerCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Create a ghost partner organization and connect to it in one step"""
    result = await SummonGhostPartnerUseCase(uow).execute(ctx, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/scout",
    status_code=status.HTTP_201_CREATED,
    response_model=GhostConnectionResponse,
)
async def create_connection_from_scout(
    command: ScoutConnectionCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    scout: IScoutService = Depends(get_scout_service),
):
    """
    Create a ghost partner from a website URL, enriched by the Scout service
    when it answers.
    """
    result = await CreateConnectionFromScoutUseCase(uow, scout).execute(ctx, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/relationships/{relationship_id}/pin",
    status_code=status.HTTP_200_OK,
    response_model=RelationshipResponse,
)
async def pin_relationship(
    relationship_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await PinRelationshipUseCase(uow).execute(ctx, relationship_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/relationships/{relationship_id}/unpin",
    status_code=status.HTTP_200_OK,
    response_model=RelationshipResponse,
)
async def unpin_relationship(
    relationship_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UnpinRelationshipUseCase(uow).execute(ctx, relationship_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/relationships/{relationship_id}",
    status_code=status.HTTP_200_OK,
    response_model=RelationshipResponse,
)
async def update_relationship(
    relationship_id: UUID,
    command: UpdateRelationshipCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateRelationshipUseCase(uow).execute(ctx, relationship_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/relationships/{relationship_id}",
    status_code=status.HTTP_200_OK,
    response_model=SoftDeleteRelationshipResponse,
)
async def delete_relationship(
    relationship_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Soft delete; restorable for 30 days"""
    result = await SoftDeleteRelationshipUseCase(uow).execute(ctx, relationship_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/relationships/{relationship_id}/restore",
    status_code=status.HTTP_200_OK,
    response_model=RelationshipResponse,
)
async def restore_relationship(
    relationship_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: RELATIONSHIP_NOT_FOUND
        - 409 Conflict: NOT_DELETED
        - 410 Gone: RESTORE_WINDOW_EXPIRED
    """
    result = await RestoreRelationshipUseCase(uow).execute(ctx, relationship_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
