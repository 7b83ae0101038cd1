import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_invite_and_join(client: AsyncClient, hq, auth_headers, mailer):
    response = await client.post(
        "/api/team/invitations",
        json={"email": "nia@acme.com", "first_name": "Nia", "role": "manager"},
        headers=hq["headers"],
    )
    assert response.status_code == 201
    assert response.json()["status"] == "pending"
    assert mailer.sent[-1]["email"] == "nia@acme.com"

    duplicate = await client.post(
        "/api/team/invitations", json={"email": "NIA@acme.com"}, headers=hq["headers"]
    )
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "INVITE_ALREADY_EXISTS"

    nia = auth_headers("auth|nia", "nia@acme.com")
    joined = await client.post(
        "/api/invitations/claim", json={"token": mailer.last_token()}, headers=nia
    )
    assert joined.status_code == 200
    assert joined.json()["access_level"] == "member"
    assert joined.json()["organization_id"] == hq["organization"]["id"]

    me = await client.get("/api/me", headers=nia)
    assert me.json()["current_organization_id"] == hq["organization"]["id"]
    assert me.json()["organizations"][0]["is_owner"] is False

    again = await client.post(
        "/api/team/invitations", json={"email": "nia@acme.com"}, headers=hq["headers"]
    )
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "ALREADY_MEMBER"


@pytest.mark.asyncio
async def test_owner_role_is_rejected(client: AsyncClient, hq):
    response = await client.post(
        "/api/team/invitations",
        json={"email": "x@acme.com", "role": "owner"},
        headers=hq["headers"],
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ROLE"
