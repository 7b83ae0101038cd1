"""
List Relationships Use Cases

The active network of an organization and its recently deleted connections.
Purgeable rows (deleted 30 or more days ago) appear in neither list.
"""

from typing import List, Optional

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_organization
from orgnet.domain.base import utcnow
from orgnet.domain.entities import RESTORE_WINDOW, RelationshipTier
from orgnet.libs.result import Result, Return

from .dtos import DeletedRelationshipResponse, RelationshipResponse


class ListRelationshipsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, tier: Optional[RelationshipTier] = None
    ) -> Result[List[RelationshipResponse]]:
        error = require_organization(ctx)
        if error:
            return Return.err(error)

        now = utcnow()
        async with self.uow:
            relationships = await self.uow.relationships.get_active_by_source(
                ctx.organization_id, tier=tier
            )
            targets = await self.uow.organizations.get_by_ids(
                list({r.target_org_id for r in relationships})
            )
            by_id = {t.id: t for t in targets}

            return Return.ok(
                [
                    RelationshipResponse.build(r, by_id.get(r.target_org_id), now)
                    for r in relationships
                ]
            )


class ListDeletedRelationshipsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext
    ) -> Result[List[DeletedRelationshipResponse]]:
        error = require_organization(ctx)
        if error:
            return Return.err(error)

        now = utcnow()
        async with self.uow:
            relationships = await self.uow.relationships.get_deleted_since(
                ctx.organization_id, now - RESTORE_WINDOW
            )
            targets = await self.uow.organizations.get_by_ids(
                list({r.target_org_id for r in relationships})
            )
            names = {t.id: t.name for t in targets}

            return Return.ok(
                [
                    DeletedRelationshipResponse(
                        id=str(r.id),
                        target_org_id=str(r.target_org_id),
                        target_name=names.get(r.target_org_id, "Unknown"),
                        deleted_at=r.deleted_at.isoformat(),
                        restore_deadline=(r.deleted_at + RESTORE_WINDOW).isoformat(),
                        can_restore=True,
                    )
                    for r in relationships
                ]
            )
