"""
Catalog read use cases
"""

from typing import List
from uuid import UUID

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_organization
from orgnet.libs.result import Result, Return

from .dtos import PackageResponse
from .update_package_use_case import PACKAGE_NOT_FOUND


class GetPackageUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, package_id: UUID
    ) -> Result[PackageResponse]:
        error = require_organization(ctx)
        if error:
            return Return.err(error)

        async with self.uow:
            package = await self.uow.packages.get_by_id(package_id)
            if package is None or package.organization_id != ctx.organization_id:
                return Return.err(PACKAGE_NOT_FOUND)
            return Return.ok(PackageResponse.from_entity(package))


class ListPackagesUseCase:
    """Active items first, then by name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[List[PackageResponse]]:
        error = require_organization(ctx)
        if error:
            return Return.err(error)

        async with self.uow:
            packages = await self.uow.packages.get_by_organization_id(
                ctx.organization_id
            )
            return Return.ok([PackageResponse.from_entity(p) for p in packages])
