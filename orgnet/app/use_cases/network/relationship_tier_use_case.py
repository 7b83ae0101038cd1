"""
Pin / Unpin Relationship Use Cases

Moves a relationship between the inner circle (preferred) and the outer
orbit (standard). The relationship id never changes.
"""

from uuid import UUID

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity.dtos import RequestContext
from orgnet.app.use_cases.identity.guards import require_write_access
from orgnet.domain.base import utcnow
from orgnet.domain.entities import RelationshipTier
from orgnet.libs.result import Result, Return

from .dtos import RelationshipResponse
from .scope import RELATIONSHIP_NOT_FOUND, get_scoped_relationship


class SetRelationshipTierUseCase:
    tier: RelationshipTier

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, relationship_id: UUID
    ) -> Result[RelationshipResponse]:
        error = require_write_access(ctx)
        if error:
            return Return.err(error)

        async with self.uow:
            relationship, error = await get_scoped_relationship(
                self.uow, ctx, relationship_id
            )
            if error:
                return Return.err(error)
            if relationship.deleted_at is not None:
                return Return.err(RELATIONSHIP_NOT_FOUND)

            if relationship.tier != self.tier:
                relationship.tier = self.tier
                relationship = await self.uow.relationships.update(relationship)
                await self.uow.commit()

            target = await self.uow.organizations.get_by_id(relationship.target_org_id)
            return Return.ok(RelationshipResponse.build(relationship, target, utcnow()))


class PinRelationshipUseCase(SetRelationshipTierUseCase):
    tier = RelationshipTier.preferred


class UnpinRelationshipUseCase(SetRelationshipTierUseCase):
    tier = RelationshipTier.standard
