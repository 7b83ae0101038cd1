from uuid import uuid4

import pytest

from orgnet.app.use_cases.identity import ResolveContextUseCase
from orgnet.domain.entities import (
    AccessLevel,
    Affiliation,
    AffiliationStatus,
    Entity,
    Organization,
)


def _affiliation(entity_id, access_level, org_id=None):
    return Affiliation(
        entity_id=entity_id,
        organization_id=org_id or uuid4(),
        access_level=access_level,
        status=AffiliationStatus.active,
    )


@pytest.mark.asyncio
async def test_first_request_creates_entity(mock_uow, identity):
    result = await ResolveContextUseCase(mock_uow).execute(identity)

    assert result.is_ok()
    created = mock_uow.entities.create.await_args.args[0]
    assert created.auth_id == identity.auth_id
    assert created.is_ghost is False
    assert result.value.entity_id == created.id
    assert result.value.organization_id is None
    assert result.value.access_level is None
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_owned_organization_wins_over_other_affiliations(mock_uow, identity):
    entity = Entity(email=identity.email, auth_id=identity.auth_id)
    owned = Organization(name="HQ", slug="hq", is_claimed=True, owner_id=entity.id)
    mock_uow.entities.get_by_auth_id.return_value = entity
    mock_uow.organizations.get_owned_by.return_value = owned
    mock_uow.affiliations.get_active_by_entity.return_value = [
        _affiliation(entity.id, AccessLevel.admin),
        _affiliation(entity.id, AccessLevel.admin, org_id=owned.id),
    ]

    result = await ResolveContextUseCase(mock_uow).execute(identity)

    assert result.value.organization_id == owned.id
    assert result.value.access_level == AccessLevel.admin
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_falls_back_to_highest_access_affiliation(mock_uow, identity):
    entity = Entity(email=identity.email, auth_id=identity.auth_id)
    mock_uow.entities.get_by_auth_id.return_value = entity
    read_only = _affiliation(entity.id, AccessLevel.read_only)
    member = _affiliation(entity.id, AccessLevel.member)
    mock_uow.affiliations.get_active_by_entity.return_value = [read_only, member]

    result = await ResolveContextUseCase(mock_uow).execute(identity)

    assert result.value.organization_id == member.organization_id
    assert result.value.access_level == AccessLevel.member


@pytest.mark.asyncio
async def test_requested_organization_must_be_affiliated(mock_uow, identity):
    entity = Entity(email=identity.email, auth_id=identity.auth_id)
    mock_uow.entities.get_by_auth_id.return_value = entity
    member = _affiliation(entity.id, AccessLevel.member)
    read_only = _affiliation(entity.id, AccessLevel.read_only)
    mock_uow.affiliations.get_active_by_entity.return_value = [member, read_only]

    result = await ResolveContextUseCase(mock_uow).execute(
        identity, read_only.organization_id
    )
    assert result.value.organization_id == read_only.organization_id
    assert result.value.access_level == AccessLevel.read_only

    result = await ResolveContextUseCase(mock_uow).execute(identity, uuid4())
    assert result.value.organization_id == member.organization_id
