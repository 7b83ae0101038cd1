from uuid import uuid4
from unittest.mock import AsyncMock, MagicMock

import pytest

from orgnet.app.use_cases.identity import Identity, RequestContext
from orgnet.domain.entities import AccessLevel

REPOSITORY_METHODS = {
    "entities": [
        "get_by_id",
        "get_by_auth_id",
        "get_by_email",
        "get_ghost_affiliates",
        "create",
        "update",
        "delete",
    ],
    "organizations": [
        "get_by_id",
        "get_by_slug",
        "get_by_ids",
        "get_owned_by",
        "create",
        "update",
        "claim_if_unclaimed",
    ],
    "affiliations": [
        "get_by_entity_and_organization",
        "get_active_by_entity",
        "create",
        "update",
        "delete",
    ],
    "org_members": [
        "get_by_org_and_entity",
        "create",
        "update",
        "delete",
    ],
    "invitations": [
        "get_by_token_hash",
        "get_pending_valid_by_token_hash",
        "get_pending_by_organization_and_email",
        "create",
        "consume",
    ],
    "relationships": [
        "get_by_id",
        "get_by_source_and_target",
        "get_active_by_source",
        "get_deleted_since",
        "create",
        "update",
        "purge_deleted_before",
    ],
    "packages": ["get_by_id", "get_by_organization_id", "create", "update"],
    "audit_events": ["create"],
}


def _echo(value):
    return value


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork; create/update echo their argument back"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    savepoint = MagicMock()
    savepoint.__aenter__ = AsyncMock(return_value=None)
    savepoint.__aexit__ = AsyncMock(return_value=False)
    uow.savepoint = MagicMock(return_value=savepoint)

    for name, methods in REPOSITORY_METHODS.items():
        repository = MagicMock()
        for method in methods:
            setattr(repository, method, AsyncMock(return_value=None))
        if "create" in methods:
            repository.create.side_effect = _echo
        if "update" in methods:
            repository.update.side_effect = _echo
        setattr(uow, name, repository)

    uow.affiliations.get_active_by_entity.return_value = []
    uow.entities.get_ghost_affiliates.return_value = []
    uow.organizations.get_by_ids.return_value = []
    return uow


@pytest.fixture
def identity():
    return Identity(auth_id="auth|alice", email="alice@acme.com")


@pytest.fixture
def admin_ctx():
    return RequestContext(
        auth_id="auth|alice",
        email="alice@acme.com",
        entity_id=uuid4(),
        organization_id=uuid4(),
        access_level=AccessLevel.admin,
    )
