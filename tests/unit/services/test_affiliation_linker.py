from uuid import uuid4

import pytest

from orgnet.app.services.affiliation_linker import AffiliationLinker, outranks
from orgnet.domain.entities import AccessLevel, Affiliation, AffiliationStatus


def test_outranks_orders_admin_over_member_over_read_only():
    assert outranks(AccessLevel.admin, AccessLevel.member)
    assert outranks(AccessLevel.member, AccessLevel.read_only)
    assert not outranks(AccessLevel.member, AccessLevel.admin)
    assert not outranks(AccessLevel.admin, AccessLevel.admin)


@pytest.mark.asyncio
async def test_link_creates_active_affiliation(mock_uow):
    entity_id, org_id = uuid4(), uuid4()

    affiliation = await AffiliationLinker(mock_uow).link(
        entity_id, org_id, AccessLevel.admin, role_label="Owner"
    )

    assert affiliation.entity_id == entity_id
    assert affiliation.organization_id == org_id
    assert affiliation.access_level == AccessLevel.admin
    assert affiliation.status == AffiliationStatus.active
    assert affiliation.role_label == "Owner"
    mock_uow.affiliations.create.assert_awaited_once()


@pytest.mark.asyncio
async def test_link_reactivates_and_escalates_but_never_lowers(mock_uow):
    existing = Affiliation(
        entity_id=uuid4(),
        organization_id=uuid4(),
        access_level=AccessLevel.member,
        status=AffiliationStatus.inactive,
    )
    mock_uow.affiliations.get_by_entity_and_organization.return_value = existing
    linker = AffiliationLinker(mock_uow)

    affiliation = await linker.link(
        existing.entity_id, existing.organization_id, AccessLevel.admin
    )
    assert affiliation.status == AffiliationStatus.active
    assert affiliation.access_level == AccessLevel.admin

    affiliation = await linker.link(
        existing.entity_id, existing.organization_id, AccessLevel.read_only
    )
    assert affiliation.access_level == AccessLevel.admin
    mock_uow.affiliations.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_escalate_without_affiliation_returns_none(mock_uow):
    assert await AffiliationLinker(mock_uow).escalate(
        uuid4(), uuid4(), AccessLevel.admin
    ) is None
