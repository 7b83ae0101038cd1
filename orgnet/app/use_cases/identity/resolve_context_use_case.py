"""
Resolve Context Use Case

Maps an authenticated caller to a durable Entity and picks the organization
the request acts on.
"""

import logging
from typing import Optional
from uuid import UUID

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.domain.entities import ACCESS_LEVEL_PRIORITY, AccessLevel, Entity
from orgnet.libs.result import Result, Return

from .dtos import Identity, RequestContext

logger = logging.getLogger(__name__)


class ResolveContextUseCase:
    """
    Use case for resolving the per-request context.

    Business Rules:
    - The Entity is created on first use (is_ghost=False, bound to auth_id)
    - Requested organization wins when the entity is actively affiliated there
    - Otherwise the organization the entity owns
    - Otherwise the first active affiliation by priority admin > member > read_only
    - organization_id may be None (caller has not created an HQ yet)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, requested_org_id: Optional[UUID] = None
    ) -> Result[RequestContext]:
        async with self.uow:
            entity = await self.uow.entities.get_by_auth_id(identity.auth_id)
            if entity is None:
                entity = await self.uow.entities.create(
                    Entity(
                        email=identity.email.strip().lower(),
                        is_ghost=False,
                        auth_id=identity.auth_id,
                    )
                )
                await self.uow.commit()
                logger.info(f"Created entity {entity.id} for auth user {identity.auth_id}")

            affiliations = await self.uow.affiliations.get_active_by_entity(entity.id)
            by_org = {a.organization_id: a for a in affiliations}

            organization_id = None
            access_level = None

            if requested_org_id is not None and requested_org_id in by_org:
                organization_id = requested_org_id
                access_level = by_org[requested_org_id].access_level
            else:
                owned = await self.uow.organizations.get_owned_by(entity.id)
                if owned is not None:
                    organization_id = owned.id
                    owner_affiliation = by_org.get(owned.id)
                    access_level = (
                        owner_affiliation.access_level
                        if owner_affiliation
                        else AccessLevel.admin
                    )
                elif affiliations:
                    best = min(
                        affiliations, key=lambda a: ACCESS_LEVEL_PRIORITY[a.access_level]
                    )
                    organization_id = best.organization_id
                    access_level = best.access_level

            return Return.ok(
                RequestContext(
                    auth_id=identity.auth_id,
                    email=entity.email,
                    entity_id=entity.id,
                    organization_id=organization_id,
                    access_level=access_level,
                )
            )
