import asyncio
from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select

from orgnet.adapter.repositories.audit_event_repository import AuditEventRepository
from orgnet.domain.base import utcnow
from orgnet.domain.entities import Invitation, InvitationStatus, Organization

OWNER_EMAIL = "owner@stagecrew.io"


async def _create_ghost(client: AsyncClient, hq) -> dict:
    response = await client.post(
        "/api/organizations/ghosts",
        json={"name": "Stage Crew Ltd", "contact_email": OWNER_EMAIL},
        headers=hq["headers"],
    )
    assert response.status_code == 201
    return response.json()["organization"]


@pytest.mark.asyncio
async def test_expired_invitation_cannot_be_claimed(
    client: AsyncClient, hq, auth_headers, mailer, db_session
):
    await _create_ghost(client, hq)
    token = mailer.last_token()

    invitation = (
        await db_session.exec(select(Invitation).where(Invitation.email == OWNER_EMAIL))
    ).one()
    invitation.expires_at = utcnow() - timedelta(minutes=1)
    db_session.add(invitation)
    await db_session.commit()

    claimed = await client.post(
        "/api/invitations/claim",
        json={"token": token},
        headers=auth_headers("auth|sam", OWNER_EMAIL),
    )
    preview = await client.get("/api/invitations/validate", params={"token": token})

    assert claimed.status_code == 404
    assert claimed.json()["error"]["code"] == "INVALID_INVITATION"
    assert preview.status_code == 410
    assert preview.json()["error"]["code"] == "INVITATION_EXPIRED"


@pytest.mark.asyncio
async def test_concurrent_claims_have_one_winner(
    client: AsyncClient, hq, auth_headers, mailer
):
    ghost = await _create_ghost(client, hq)
    token = mailer.last_token()
    headers = auth_headers("auth|sam", OWNER_EMAIL)

    responses = await asyncio.gather(
        client.post("/api/invitations/claim", json={"token": token}, headers=headers),
        client.post("/api/invitations/claim", json={"token": token}, headers=headers),
    )

    statuses = sorted(r.status_code for r in responses)
    assert statuses == [200, 404]
    winner = next(r for r in responses if r.status_code == 200)
    loser = next(r for r in responses if r.status_code == 404)
    assert winner.json()["organization_id"] == ghost["id"]
    assert loser.json()["error"]["code"] == "INVALID_INVITATION"


@pytest.mark.asyncio
async def test_failed_claim_leaves_no_partial_state(
    client: AsyncClient, hq, auth_headers, mailer, db_session, monkeypatch
):
    ghost = await _create_ghost(client, hq)
    token = mailer.last_token()
    headers = auth_headers("auth|sam", OWNER_EMAIL)

    original_create = AuditEventRepository.create

    async def failing_create(self, audit_event):
        if audit_event.action == "organization_claimed":
            raise RuntimeError("audit store unavailable")
        return await original_create(self, audit_event)

    monkeypatch.setattr(AuditEventRepository, "create", failing_create)

    with pytest.raises(RuntimeError):
        await client.post("/api/invitations/claim", json={"token": token}, headers=headers)

    org = (
        await db_session.exec(select(Organization).where(Organization.slug == ghost["slug"]))
    ).one()
    invitation = (
        await db_session.exec(select(Invitation).where(Invitation.email == OWNER_EMAIL))
    ).one()
    assert org.is_claimed is False
    assert org.owner_id is None
    assert invitation.status == InvitationStatus.pending
    await db_session.rollback()

    monkeypatch.undo()
    retried = await client.post(
        "/api/invitations/claim", json={"token": token}, headers=headers
    )

    assert retried.status_code == 200
    assert retried.json()["organization_id"] == ghost["id"]
