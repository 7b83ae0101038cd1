import pytest

from orgnet.app.use_cases.onboarding import (
    CheckSlugAvailabilityUseCase,
    ClaimOrganizationBySlugUseCase,
)
from orgnet.domain.entities import AccessLevel, Entity, Organization, OrgMemberRole


@pytest.mark.asyncio
async def test_claims_unclaimed_organization(mock_uow, identity):
    ghost = Organization(name="Blue Venue", slug="blue-venue", is_claimed=False)
    mock_uow.organizations.get_by_slug.return_value = ghost
    mock_uow.organizations.claim_if_unclaimed.return_value = True

    result = await ClaimOrganizationBySlugUseCase(mock_uow).execute(
        identity, " Blue-Venue "
    )

    assert result.is_ok()
    assert result.value.organization_id == str(ghost.id)
    assert result.value.access_level == "admin"
    mock_uow.organizations.get_by_slug.assert_awaited_once_with("blue-venue")

    entity = mock_uow.entities.create.await_args.args[0]
    assert entity.auth_id == identity.auth_id
    affiliation = mock_uow.affiliations.create.await_args.args[0]
    assert affiliation.access_level == AccessLevel.admin
    assert affiliation.role_label == "Owner"
    member = mock_uow.org_members.create.await_args.args[0]
    assert member.role == OrgMemberRole.owner
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_already_claimed_is_not_claimable(mock_uow, identity):
    mock_uow.organizations.get_by_slug.return_value = Organization(
        name="Taken", slug="taken", is_claimed=True
    )

    result = await ClaimOrganizationBySlugUseCase(mock_uow).execute(identity, "taken")

    assert result.error.code == "ORG_NOT_CLAIMABLE"
    mock_uow.organizations.claim_if_unclaimed.assert_not_awaited()


@pytest.mark.asyncio
async def test_concurrent_claim_loses(mock_uow, identity):
    mock_uow.entities.get_by_auth_id.return_value = Entity(
        email=identity.email, auth_id=identity.auth_id
    )
    mock_uow.organizations.get_by_slug.return_value = Organization(
        name="Blue Venue", slug="blue-venue", is_claimed=False
    )
    mock_uow.organizations.claim_if_unclaimed.return_value = False

    result = await ClaimOrganizationBySlugUseCase(mock_uow).execute(
        identity, "blue-venue"
    )

    assert result.error.code == "ORG_NOT_CLAIMABLE"
    mock_uow.affiliations.create.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_short_slug_is_invalid(mock_uow, identity):
    result = await ClaimOrganizationBySlugUseCase(mock_uow).execute(identity, "!a!")

    assert result.error.code == "INVALID_SLUG"


@pytest.mark.asyncio
async def test_slug_availability_statuses(mock_uow):
    use_case = CheckSlugAvailabilityUseCase(mock_uow)

    result = await use_case.execute("fresh-name")
    assert result.value.status == "void"
    assert result.value.available is True

    mock_uow.organizations.get_by_slug.return_value = Organization(
        name="Ghost Co", slug="ghost-co", is_claimed=False
    )
    result = await use_case.execute("ghost-co")
    assert result.value.status == "ghost"
    assert result.value.ghost_name == "Ghost Co"

    claimed = Organization(name="Real Co", slug="real-co", is_claimed=True)
    mock_uow.organizations.get_by_slug.return_value = claimed
    result = await use_case.execute("real-co")
    assert result.value.status == "taken"
    assert result.value.available is False

    result = await use_case.execute("real-co", exclude_org_id=claimed.id)
    assert result.value.available is True

    result = await use_case.execute("x")
    assert result.value.status == "invalid"
