from unittest.mock import AsyncMock

import pytest

from orgnet.app.repositories.organization_repository import SlugConflictError
from orgnet.app.services.slug import (
    MAX_SLUG_ATTEMPTS,
    create_with_unique_slug,
    normalize_slug,
    slugify,
)
from orgnet.domain.entities import Organization


def test_slugify_collapses_punctuation_and_spaces():
    assert slugify("  Acme Events, Inc. ") == "acme-events-inc"
    assert slugify("Lights & Sound -- Co") == "lights-sound-co"


def test_slugify_falls_back_for_symbol_only_names():
    slug = slugify("!!!")
    assert slug.startswith("org-")
    assert len(slug) == len("org-") + 8


def test_normalize_slug_strips_invalid_characters():
    assert normalize_slug(" My_Venue! ") == "myvenue"
    assert normalize_slug(None) == ""


def _build(slug: str) -> Organization:
    return Organization(name="Acme", slug=slug)


@pytest.mark.asyncio
async def test_collision_retries_with_numeric_suffix(mock_uow):
    taken = {"acme"}

    async def create(org):
        if org.slug in taken:
            raise SlugConflictError(org.slug)
        return org

    mock_uow.organizations.create = AsyncMock(side_effect=create)

    organization = await create_with_unique_slug(mock_uow, "acme", _build)

    assert organization.slug == "acme-1"
    assert mock_uow.organizations.create.await_count == 2
    assert mock_uow.savepoint.call_count == 2


@pytest.mark.asyncio
async def test_gives_up_after_ten_retries(mock_uow):
    async def create(org):
        raise SlugConflictError(org.slug)

    mock_uow.organizations.create = AsyncMock(side_effect=create)

    organization = await create_with_unique_slug(mock_uow, "acme", _build)

    assert organization is None
    tried = [c.args[0].slug for c in mock_uow.organizations.create.await_args_list]
    assert tried[0] == "acme"
    assert tried[-1] == f"acme-{MAX_SLUG_ATTEMPTS}"
    assert len(tried) == MAX_SLUG_ATTEMPTS + 1


@pytest.mark.asyncio
async def test_other_errors_are_not_retried(mock_uow):
    mock_uow.organizations.create = AsyncMock(side_effect=RuntimeError("db down"))

    with pytest.raises(RuntimeError):
        await create_with_unique_slug(mock_uow, "acme", _build)

    assert mock_uow.organizations.create.await_count == 1
