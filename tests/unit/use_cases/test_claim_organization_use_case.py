from datetime import timedelta
from uuid import uuid4

import pytest

from orgnet.app.services.invitation_issuer import hash_token
from orgnet.app.use_cases.identity import Identity
from orgnet.app.use_cases.invitations import ClaimOrganizationUseCase
from orgnet.domain.base import utcnow
from orgnet.domain.entities import (
    AccessLevel,
    Affiliation,
    Entity,
    Invitation,
    InvitationStatus,
    Organization,
    OrgMember,
    OrgMemberRole,
)

TOKEN = "raw-claim-token"


@pytest.fixture
def ghost_org():
    return Organization(name="Stage Crew Ltd", slug="stage-crew-ltd", is_claimed=False)


@pytest.fixture
def ghost_contact():
    return Entity(email="owner@stagecrew.io", is_ghost=True)


@pytest.fixture
def invitation(ghost_org):
    return Invitation(
        organization_id=ghost_org.id,
        email="owner@stagecrew.io",
        token_hash=hash_token(TOKEN),
        status=InvitationStatus.pending,
        access_level=AccessLevel.admin,
        expires_at=utcnow() + timedelta(days=7),
    )


@pytest.fixture
def claimable(mock_uow, ghost_org, ghost_contact, invitation):
    mock_uow.invitations.get_pending_valid_by_token_hash.return_value = invitation
    mock_uow.organizations.get_by_id.return_value = ghost_org
    mock_uow.entities.get_ghost_affiliates.return_value = [ghost_contact]
    mock_uow.invitations.consume.return_value = True
    mock_uow.organizations.claim_if_unclaimed.return_value = True
    return mock_uow


@pytest.mark.asyncio
async def test_missing_token(mock_uow):
    result = await ClaimOrganizationUseCase(mock_uow).execute(
        Identity(auth_id="auth|1", email="a@b.co"), "   "
    )

    assert result.is_err()
    assert result.error.code == "MISSING_TOKEN"


@pytest.mark.asyncio
async def test_unknown_or_expired_token_is_invalid(mock_uow):
    result = await ClaimOrganizationUseCase(mock_uow).execute(
        Identity(auth_id="auth|1", email="owner@stagecrew.io"), TOKEN
    )

    assert result.error.code == "INVALID_INVITATION"
    lookup = mock_uow.invitations.get_pending_valid_by_token_hash.await_args
    assert lookup.args[0] == hash_token(TOKEN)
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_email_mismatch_is_rejected(claimable):
    result = await ClaimOrganizationUseCase(claimable).execute(
        Identity(auth_id="auth|1", email="intruder@elsewhere.com"), TOKEN
    )

    assert result.error.code == "EMAIL_MISMATCH"
    claimable.invitations.consume.assert_not_awaited()
    claimable.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_new_caller_takes_over_ghost_contact(claimable, ghost_org, ghost_contact):
    result = await ClaimOrganizationUseCase(claimable).execute(
        Identity(auth_id="auth|owner", email="Owner@StageCrew.IO"), TOKEN
    )

    assert result.is_ok()
    assert result.value.entity_id == str(ghost_contact.id)
    assert result.value.organization_id == str(ghost_org.id)
    assert result.value.access_level == "admin"
    assert ghost_contact.is_ghost is False
    assert ghost_contact.auth_id == "auth|owner"
    claimable.organizations.claim_if_unclaimed.assert_awaited_once()
    assert claimable.organizations.claim_if_unclaimed.await_args.args[1] == ghost_contact.id
    owner_row = claimable.org_members.create.await_args.args[0]
    assert owner_row.role == OrgMemberRole.owner
    claimable.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_second_redemption_loses_the_race(claimable):
    claimable.invitations.consume.return_value = False

    result = await ClaimOrganizationUseCase(claimable).execute(
        Identity(auth_id="auth|owner", email="owner@stagecrew.io"), TOKEN
    )

    assert result.error.code == "INVALID_INVITATION"
    claimable.organizations.claim_if_unclaimed.assert_not_awaited()
    claimable.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_no_ghost_and_no_affiliation(claimable):
    claimable.entities.get_ghost_affiliates.return_value = []

    result = await ClaimOrganizationUseCase(claimable).execute(
        Identity(auth_id="auth|owner", email="owner@stagecrew.io"), TOKEN
    )

    assert result.error.code == "NO_LINKED_CONTACT"
    claimable.invitations.consume.assert_not_awaited()


@pytest.mark.asyncio
async def test_existing_caller_absorbs_ghost_rows(claimable, ghost_org, ghost_contact):
    caller = Entity(email="owner@stagecrew.io", auth_id="auth|owner")
    ghost_affiliation = Affiliation(
        entity_id=ghost_contact.id,
        organization_id=ghost_org.id,
        access_level=AccessLevel.member,
    )
    ghost_member = OrgMember(org_id=ghost_org.id, entity_id=ghost_contact.id)
    claimable.entities.get_by_auth_id.return_value = caller

    affiliations = {(ghost_contact.id, ghost_org.id): ghost_affiliation}

    async def get_affiliation(entity_id, org_id):
        return affiliations.get((entity_id, org_id))

    async def update_affiliation(affiliation):
        affiliations.pop((ghost_contact.id, ghost_org.id), None)
        affiliations[(affiliation.entity_id, affiliation.organization_id)] = affiliation
        return affiliation

    claimable.affiliations.get_by_entity_and_organization.side_effect = get_affiliation
    claimable.affiliations.update.side_effect = update_affiliation

    async def get_member(org_id, entity_id):
        return ghost_member if entity_id == ghost_contact.id else None

    claimable.org_members.get_by_org_and_entity.side_effect = get_member

    result = await ClaimOrganizationUseCase(claimable).execute(
        Identity(auth_id="auth|owner", email="owner@stagecrew.io"), TOKEN
    )

    assert result.is_ok()
    assert result.value.entity_id == str(caller.id)
    assert result.value.access_level == "admin"
    assert ghost_affiliation.entity_id == caller.id
    assert ghost_affiliation.access_level == AccessLevel.admin
    assert ghost_member.entity_id == caller.id
    claimable.entities.delete.assert_awaited_once_with(ghost_contact)
    audit = claimable.audit_events.create.await_args.args[0]
    assert audit.event_metadata["merged_ghost_id"] == str(ghost_contact.id)


@pytest.mark.asyncio
async def test_ambiguous_ghosts_without_email_match_are_not_bound(claimable):
    claimable.entities.get_ghost_affiliates.return_value = [
        Entity(email="crew-lead@stagecrew.io", is_ghost=True),
        Entity(email="accounts@stagecrew.io", is_ghost=True),
    ]

    result = await ClaimOrganizationUseCase(claimable).execute(
        Identity(auth_id="auth|owner", email="owner@stagecrew.io"), TOKEN
    )

    assert result.error.code == "NO_LINKED_CONTACT"
    claimable.invitations.consume.assert_not_awaited()
    claimable.entities.update.assert_not_awaited()
    claimable.entities.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_single_ghost_is_bound_when_email_differs(claimable):
    only_ghost = Entity(email="bookings@stagecrew.io", is_ghost=True)
    claimable.entities.get_ghost_affiliates.return_value = [only_ghost]

    result = await ClaimOrganizationUseCase(claimable).execute(
        Identity(auth_id="auth|owner", email="owner@stagecrew.io"), TOKEN
    )

    assert result.is_ok()
    assert result.value.entity_id == str(only_ghost.id)
    assert only_ghost.auth_id == "auth|owner"
