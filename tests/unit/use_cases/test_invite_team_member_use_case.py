from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from orgnet.app.use_cases.invitations import InviteTeamMemberUseCase, TeamInviteCommand
from orgnet.domain.base import utcnow
from orgnet.domain.entities import (
    AccessLevel,
    Affiliation,
    AffiliationStatus,
    Entity,
    Invitation,
    Organization,
    OrgMemberRole,
)


@pytest.fixture
def mailer():
    mailer = AsyncMock()
    mailer.send_invitation = AsyncMock()
    return mailer


@pytest.fixture
def team_uow(mock_uow, admin_ctx):
    mock_uow.organizations.get_by_id.return_value = Organization(
        id=admin_ctx.organization_id, name="Acme HQ", slug="acme-hq", is_claimed=True
    )
    return mock_uow


@pytest.mark.asyncio
async def test_invites_as_ghost_member(team_uow, admin_ctx, mailer):
    use_case = InviteTeamMemberUseCase(team_uow, mailer, "https://app.test/claim")

    result = await use_case.execute(
        admin_ctx,
        TeamInviteCommand(email="New.Hire@Acme.com", first_name="Nia", role="manager"),
    )

    assert result.is_ok()
    assert result.value.status == "pending"
    ghost = team_uow.entities.create.await_args.args[0]
    assert ghost.is_ghost is True
    assert ghost.email == "new.hire@acme.com"
    affiliation = team_uow.affiliations.create.await_args.args[0]
    assert affiliation.access_level == AccessLevel.member
    member = team_uow.org_members.create.await_args.args[0]
    assert member.role == OrgMemberRole.manager
    invitation = team_uow.invitations.create.await_args.args[0]
    assert invitation.access_level == AccessLevel.member
    mailer.send_invitation.assert_awaited_once()


@pytest.mark.asyncio
async def test_owner_role_cannot_be_assigned(team_uow, admin_ctx, mailer):
    use_case = InviteTeamMemberUseCase(team_uow, mailer, "https://app.test/claim")

    result = await use_case.execute(
        admin_ctx, TeamInviteCommand(email="x@acme.com", role="owner")
    )

    assert result.error.code == "INVALID_ROLE"


@pytest.mark.asyncio
async def test_pending_invitation_blocks_duplicate(team_uow, admin_ctx, mailer):
    team_uow.invitations.get_pending_by_organization_and_email.return_value = Invitation(
        organization_id=admin_ctx.organization_id,
        email="x@acme.com",
        token_hash="h",
        expires_at=utcnow() + timedelta(days=7),
    )
    use_case = InviteTeamMemberUseCase(team_uow, mailer, "https://app.test/claim")

    result = await use_case.execute(admin_ctx, TeamInviteCommand(email="x@acme.com"))

    assert result.error.code == "INVITE_ALREADY_EXISTS"
    team_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_active_member_is_not_reinvited(team_uow, admin_ctx, mailer):
    existing = Entity(email="x@acme.com", auth_id="auth|x")
    team_uow.entities.get_by_email.return_value = existing
    team_uow.affiliations.get_by_entity_and_organization.return_value = Affiliation(
        entity_id=existing.id,
        organization_id=admin_ctx.organization_id,
        access_level=AccessLevel.member,
        status=AffiliationStatus.active,
    )
    use_case = InviteTeamMemberUseCase(team_uow, mailer, "https://app.test/claim")

    result = await use_case.execute(admin_ctx, TeamInviteCommand(email="x@acme.com"))

    assert result.error.code == "ALREADY_MEMBER"
