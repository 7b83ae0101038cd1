"""
Update Package Use Case

Partial update of a catalog item. The provided fields are merged onto the
stored item and the merged result is normalized as a whole, so switching
category away from rental clears the rental fields.
"""

from uuid import UUID

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.domain.base import utcnow
from orgnet.libs.result import Error, Result, Return

from .dtos import PackageResponse, UpdatePackageCommand
from .package_fields import normalize_package_fields

PACKAGE_NOT_FOUND = Error("PACKAGE_NOT_FOUND", "Package not found.")

NORMALIZED_FIELDS = (
    "name",
    "description",
    "category",
    "price",
    "floor_price",
    "target_cost",
    "stock_quantity",
    "is_sub_rental",
    "replacement_cost",
    "buffer_days",
)

# An explicit null leaves these unchanged
REQUIRED_FIELDS = ("name", "category", "price", "is_sub_rental")


class UpdatePackageUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, package_id: UUID, command: UpdatePackageCommand
    ) -> Result[PackageResponse]:
        error = require_write_access(ctx)
        if error:
            return Return.err(error)

        async with self.uow:
            package = await self.uow.packages.get_by_id(package_id)
            if package is None or package.organization_id != ctx.organization_id:
                return Return.err(PACKAGE_NOT_FOUND)

            changes = command.model_dump(exclude_unset=True)
            merged = {name: getattr(package, name) for name in NORMALIZED_FIELDS}
            merged.update(
                {
                    k: v
                    for k, v in changes.items()
                    if k in NORMALIZED_FIELDS
                    and not (v is None and k in REQUIRED_FIELDS)
                }
            )
            fields, error = normalize_package_fields(merged)
            if error:
                return Return.err(error)

            for name, value in fields.items():
                setattr(package, name, value)
            if "is_active" in changes and changes["is_active"] is not None:
                package.is_active = changes["is_active"]
            if "definition" in changes:
                package.definition = changes["definition"]
            package.updated_at = utcnow()

            package = await self.uow.packages.update(package)
            await self.uow.commit()

            return Return.ok(PackageResponse.from_entity(package))
