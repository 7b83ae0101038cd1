from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from orgnet.api.error import ClientError, ServerError
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.catalog import (
    CreatePackageCommand,
    CreatePackageUseCase,
    GetPackageUseCase,
    ListPackagesUseCase,
    PackageResponse,
    UpdatePackageCommand,
    UpdatePackageUseCase,
)
from orgnet.app.use_cases.identity import RequestContext
from orgnet.depends import get_request_context, get_unit_of_work

router = APIRouter(prefix="/packages", tags=["Catalog"])

VALIDATION_ERRORS = ("INVALID_NAME", "INVALID_PRICE", "INVALID_STOCK")
ACCESS_ERRORS = ("NO_ORGANIZATION", "INSUFFICIENT_ACCESS")


@router.get("", status_code=status.HTTP_200_OK, response_model=List[PackageResponse])
async def list_packages(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListPackagesUseCase(uow).execute(ctx)

    if result.is_err():
        error = result.error
        if error.code in ACCESS_ERRORS:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PackageResponse)
async def create_package(
    command: CreatePackageCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a catalog item in the caller's current organization.

    Raises:
        - 400 Bad Request: INVALID_NAME, INVALID_PRICE, INVALID_STOCK
        - 403 Forbidden: NO_ORGANIZATION, INSUFFICIENT_ACCESS
    """
    result = await CreatePackageUseCase(uow).execute(ctx, command)

    if result.is_err():
        error = result.error
        if error.code in VALIDATION_ERRORS:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code in ACCESS_ERRORS:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value


@router.get(
    "/{package_id}", status_code=status.HTTP_200_OK, response_model=PackageResponse
)
async def get_package(
    package_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetPackageUseCase(uow).execute(ctx, package_id)

    if result.is_err():
        error = result.error
        if error.code in ACCESS_ERRORS:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "PACKAGE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.patch(
    "/{package_id}", status_code=status.HTTP_200_OK, response_model=PackageResponse
)
async def update_package(
    package_id: UUID,
    command: UpdatePackageCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Partial update. Items of other organizations are reported as not found.

    Raises:
        - 400 Bad Request: INVALID_NAME, INVALID_PRICE, INVALID_STOCK
        - 403 Forbidden: NO_ORGANIZATION, INSUFFICIENT_ACCESS
        - 404 Not Found: PACKAGE_NOT_FOUND
    """
    result = await UpdatePackageUseCase(uow).execute(ctx, package_id, command)

    if result.is_err():
        error = result.error
        if error.code in VALIDATION_ERRORS:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code in ACCESS_ERRORS:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "PACKAGE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
