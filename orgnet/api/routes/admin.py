"""
Admin API Routes - Maintenance Endpoints

Authentication is via Admin API Key, not user JWTs.
"""

from fastapi import APIRouter, Depends, status

from orgnet.api.error import ServerError
from orgnet.api.utils.admin_auth import verify_admin_api_key
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.admin import (
    PurgeExpiredRelationshipsUseCase,
    PurgeRelationshipsResponse,
)
from orgnet.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/relationships/purge",
    status_code=status.HTTP_200_OK,
    response_model=PurgeRelationshipsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_expired_relationships(
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Hard-delete relationships soft-deleted more than 30 days ago.

    Requires: X-Admin-API-Key header
    """
    result = await PurgeExpiredRelationshipsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value
