from typing import Optional
from uuid import UUID

from orgnet.app.services.slug import MIN_SLUG_LENGTH, normalize_slug
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.libs.result import Result, Return

from .dtos import SlugAvailabilityResponse


class CheckSlugAvailabilityUseCase:
    """
    Reports whether a slug is free.

    A slug held by an unclaimed organization is reported as "ghost" so the
    caller can offer to claim it instead.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, slug: str, exclude_org_id: Optional[UUID] = None
    ) -> Result[SlugAvailabilityResponse]:
        normalized = normalize_slug(slug).strip("-")
        if len(normalized) < MIN_SLUG_LENGTH:
            return Return.ok(
                SlugAvailabilityResponse(
                    slug=normalized, available=False, status="invalid"
                )
            )

        async with self.uow:
            existing = await self.uow.organizations.get_by_slug(normalized)

            if existing is None or existing.id == exclude_org_id:
                return Return.ok(
                    SlugAvailabilityResponse(
                        slug=normalized, available=True, status="void"
                    )
                )
            if not existing.is_claimed:
                return Return.ok(
                    SlugAvailabilityResponse(
                        slug=normalized,
                        available=False,
                        status="ghost",
                        ghost_name=existing.name,
                    )
                )
            return Return.ok(
                SlugAvailabilityResponse(
                    slug=normalized, available=False, status="taken"
                )
            )
