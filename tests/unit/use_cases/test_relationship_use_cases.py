from datetime import timedelta
from uuid import uuid4

import pytest

from orgnet.app.use_cases.admin import PurgeExpiredRelationshipsUseCase
from orgnet.app.use_cases.network import (
    CreateRelationshipCommand,
    CreateRelationshipUseCase,
    ListDeletedRelationshipsUseCase,
    PinRelationshipUseCase,
    RestoreRelationshipUseCase,
    SoftDeleteRelationshipUseCase,
    UnpinRelationshipUseCase,
    UpdateRelationshipCommand,
    UpdateRelationshipUseCase,
)
from orgnet.domain.base import utcnow
from orgnet.domain.entities import (
    RESTORE_WINDOW,
    AccessLevel,
    Organization,
    OrgRelationship,
    RelationshipState,
    RelationshipTier,
    RelationshipType,
)


@pytest.fixture
def target():
    return Organization(name="Partner Co", slug="partner-co", is_claimed=False)


@pytest.fixture
def relationship(admin_ctx, target):
    return OrgRelationship(
        source_org_id=admin_ctx.organization_id,
        target_org_id=target.id,
        tier=RelationshipTier.preferred,
    )


@pytest.fixture
def network_uow(mock_uow, relationship, target):
    mock_uow.relationships.get_by_id.return_value = relationship
    mock_uow.organizations.get_by_id.return_value = target
    return mock_uow


def test_state_boundaries(relationship):
    now = utcnow()
    assert relationship.state(now) == RelationshipState.active
    relationship.deleted_at = now - timedelta(days=29, hours=23)
    assert relationship.state(now) == RelationshipState.deleted
    relationship.deleted_at = now - RESTORE_WINDOW
    assert relationship.state(now) == RelationshipState.purgeable


@pytest.mark.asyncio
async def test_unpin_then_pin_keeps_id(network_uow, admin_ctx, relationship):
    result = await UnpinRelationshipUseCase(network_uow).execute(
        admin_ctx, relationship.id
    )
    assert result.value.id == str(relationship.id)
    assert result.value.tier == "standard"

    result = await PinRelationshipUseCase(network_uow).execute(
        admin_ctx, relationship.id
    )
    assert result.value.id == str(relationship.id)
    assert result.value.tier == "preferred"
    network_uow.relationships.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_other_organizations_relationship_is_not_found(network_uow, admin_ctx):
    network_uow.relationships.get_by_id.return_value = OrgRelationship(
        source_org_id=uuid4(), target_org_id=uuid4()
    )

    result = await PinRelationshipUseCase(network_uow).execute(admin_ctx, uuid4())

    assert result.error.code == "RELATIONSHIP_NOT_FOUND"


@pytest.mark.asyncio
async def test_read_only_cannot_change_network(network_uow, admin_ctx, relationship):
    ctx = admin_ctx.model_copy(update={"access_level": AccessLevel.read_only})

    result = await SoftDeleteRelationshipUseCase(network_uow).execute(
        ctx, relationship.id
    )

    assert result.error.code == "INSUFFICIENT_ACCESS"


@pytest.mark.asyncio
async def test_soft_delete_sets_restore_deadline(network_uow, admin_ctx, relationship):
    result = await SoftDeleteRelationshipUseCase(network_uow).execute(
        admin_ctx, relationship.id
    )

    assert result.is_ok()
    assert relationship.deleted_at is not None
    assert result.value.restore_deadline == (
        relationship.deleted_at + RESTORE_WINDOW
    ).isoformat()

    result = await SoftDeleteRelationshipUseCase(network_uow).execute(
        admin_ctx, relationship.id
    )
    assert result.error.code == "RELATIONSHIP_NOT_FOUND"


@pytest.mark.asyncio
async def test_restore_within_window(network_uow, admin_ctx, relationship):
    relationship.deleted_at = utcnow() - timedelta(days=3)

    result = await RestoreRelationshipUseCase(network_uow).execute(
        admin_ctx, relationship.id
    )

    assert result.is_ok()
    assert result.value.id == str(relationship.id)
    assert result.value.state == "active"
    assert relationship.deleted_at is None


@pytest.mark.asyncio
async def test_restore_after_window_expired(network_uow, admin_ctx, relationship):
    relationship.deleted_at = utcnow() - timedelta(days=31)

    result = await RestoreRelationshipUseCase(network_uow).execute(
        admin_ctx, relationship.id
    )

    assert result.error.code == "RESTORE_WINDOW_EXPIRED"
    network_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_restore_active_relationship(network_uow, admin_ctx, relationship):
    result = await RestoreRelationshipUseCase(network_uow).execute(
        admin_ctx, relationship.id
    )

    assert result.error.code == "NOT_DELETED"


@pytest.mark.asyncio
async def test_recently_deleted_uses_restore_window_cutoff(
    network_uow, admin_ctx, relationship, target
):
    relationship.deleted_at = utcnow() - timedelta(days=2)
    network_uow.relationships.get_deleted_since.return_value = [relationship]
    network_uow.organizations.get_by_ids.return_value = [target]

    result = await ListDeletedRelationshipsUseCase(network_uow).execute(admin_ctx)

    source, cutoff = network_uow.relationships.get_deleted_since.await_args.args
    assert source == admin_ctx.organization_id
    assert utcnow() - cutoff >= RESTORE_WINDOW
    assert result.value[0].target_name == "Partner Co"
    assert result.value[0].can_restore is True


@pytest.mark.asyncio
async def test_create_relationship_to_self_is_rejected(mock_uow, admin_ctx):
    result = await CreateRelationshipUseCase(mock_uow).execute(
        admin_ctx, CreateRelationshipCommand(target_org_id=admin_ctx.organization_id)
    )

    assert result.error.code == "INVALID_TARGET"


@pytest.mark.asyncio
async def test_create_relationship_revives_deleted_row(
    network_uow, admin_ctx, relationship, target
):
    relationship.deleted_at = utcnow() - timedelta(days=40)
    relationship.tier = RelationshipTier.standard
    network_uow.relationships.get_by_source_and_target.return_value = relationship

    result = await CreateRelationshipUseCase(network_uow).execute(
        admin_ctx, CreateRelationshipCommand(target_org_id=target.id)
    )

    assert result.value.id == str(relationship.id)
    assert result.value.tier == "preferred"
    assert relationship.deleted_at is None
    network_uow.relationships.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_recreating_relationship_applies_new_type(
    network_uow, admin_ctx, relationship, target
):
    relationship.deleted_at = utcnow() - timedelta(days=3)
    network_uow.relationships.get_by_source_and_target.return_value = relationship

    result = await CreateRelationshipUseCase(network_uow).execute(
        admin_ctx,
        CreateRelationshipCommand(target_org_id=target.id, type=RelationshipType.vendor),
    )

    assert result.value.id == str(relationship.id)
    assert result.value.type == "vendor"
    assert relationship.type == RelationshipType.vendor


@pytest.mark.asyncio
async def test_update_relationship_dedupes_tags(network_uow, admin_ctx, relationship):
    result = await UpdateRelationshipUseCase(network_uow).execute(
        admin_ctx,
        relationship.id,
        UpdateRelationshipCommand(tags=["audio", " lighting ", "audio"]),
    )

    assert result.value.tags == ["audio", "lighting"]
    assert relationship.notes is None


@pytest.mark.asyncio
async def test_purge_uses_restore_window(mock_uow):
    mock_uow.relationships.purge_deleted_before.return_value = 4

    result = await PurgeExpiredRelationshipsUseCase(mock_uow).execute()

    assert result.value.purged == 4
    cutoff = mock_uow.relationships.purge_deleted_before.await_args.args[0]
    assert utcnow() - cutoff >= RESTORE_WINDOW
    mock_uow.commit.assert_awaited_once()
