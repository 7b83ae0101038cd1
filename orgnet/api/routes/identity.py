from fastapi import APIRouter, Depends, status

from orgnet.api.error import ServerError
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity import GetMeUseCase, MeResponse, RequestContext
from orgnet.depends import get_request_context, get_unit_of_work

router = APIRouter(tags=["Identity"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def get_me(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current caller, its current organization and every active affiliation.

    The entity record is created on the first authenticated request.
    """
    result = await GetMeUseCase(uow).execute(ctx)
    if result.is_err():
        raise ServerError(result.error)
    return result.value
