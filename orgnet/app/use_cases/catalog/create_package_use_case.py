"""
Create Package Use Case
"""

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.domain.entities import AuditEvent, CatalogPackage
from orgnet.libs.result import Result, Return

from .dtos import CreatePackageCommand, PackageResponse
from .package_fields import normalize_package_fields


class CreatePackageUseCase:
    """
    Business Rules:
    - Item belongs to the caller's current organization
    - Name is required, price must be finite and non-negative
    - Rental fields are kept only for rentals, advisory pricing only off packages
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, command: CreatePackageCommand
    ) -> Result[PackageResponse]:
        error = require_write_access(ctx)
        if error:
            return Return.err(error)

        fields, error = normalize_package_fields(command.model_dump())
        if error:
            return Return.err(error)

        async with self.uow:
            package = await self.uow.packages.create(
                CatalogPackage(
                    organization_id=ctx.organization_id,
                    definition=command.definition,
                    **fields,
                )
            )
            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=ctx.organization_id,
                    entity_id=ctx.entity_id,
                    action="package_created",
                    event_metadata={
                        "package_id": str(package.id),
                        "category": package.category.value,
                    },
                )
            )
            await self.uow.commit()

            return Return.ok(PackageResponse.from_entity(package))
