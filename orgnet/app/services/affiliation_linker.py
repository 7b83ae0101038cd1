from typing import Optional
from uuid import UUID

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.domain.entities import (
    ACCESS_LEVEL_PRIORITY,
    AccessLevel,
    Affiliation,
    AffiliationStatus,
)


class AffiliationLinker:
    """Creates and upgrades entity <-> organization edges"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def link(
        self,
        entity_id: UUID,
        organization_id: UUID,
        access_level: AccessLevel = AccessLevel.member,
        role_label: Optional[str] = None,
    ) -> Affiliation:
        """Create an active affiliation, or re-activate and escalate an existing one"""
        existing = await self.uow.affiliations.get_by_entity_and_organization(
            entity_id, organization_id
        )
        if existing is None:
            return await self.uow.affiliations.create(
                Affiliation(
                    entity_id=entity_id,
                    organization_id=organization_id,
                    access_level=access_level,
                    status=AffiliationStatus.active,
                    role_label=role_label,
                )
            )

        existing.status = AffiliationStatus.active
        if outranks(access_level, existing.access_level):
            existing.access_level = access_level
        if role_label and not existing.role_label:
            existing.role_label = role_label
        return await self.uow.affiliations.update(existing)

    async def escalate(
        self, entity_id: UUID, organization_id: UUID, access_level: AccessLevel
    ) -> Optional[Affiliation]:
        """Raise access level; never lowers it. None if no affiliation exists."""
        affiliation = await self.uow.affiliations.get_by_entity_and_organization(
            entity_id, organization_id
        )
        if affiliation is None:
            return None
        if outranks(access_level, affiliation.access_level):
            affiliation.access_level = access_level
            affiliation = await self.uow.affiliations.update(affiliation)
        return affiliation


def outranks(candidate: AccessLevel, current: AccessLevel) -> bool:
    return ACCESS_LEVEL_PRIORITY[candidate] < ACCESS_LEVEL_PRIORITY[current]
