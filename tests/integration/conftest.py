from datetime import UTC, datetime, timedelta
from typing import List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from orgnet.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from orgnet.app.services.invitation_mailer import IInvitationMailer
from orgnet.app.services.scout_service import IScoutService, ScoutProfile
from orgnet.depends import (
    enable_sqlite_savepoints,
    get_mailer,
    get_scout_service,
    get_unit_of_work,
)
from tests.fixtures.json_loader import TestDataLoader


def create_access_token(sub: str, email: str, expires_delta: timedelta) -> str:
    """Sign a token in the shape the identity provider issues"""
    now = datetime.now(UTC)
    payload = {"sub": sub, "email": email, "exp": now + expires_delta, "iat": now}
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


class RecordingMailer(IInvitationMailer):
    def __init__(self):
        self.sent: List[dict] = []

    async def send_invitation(self, email: str, organization_name: str, claim_url: str):
        self.sent.append(
            {"email": email, "organization_name": organization_name, "claim_url": claim_url}
        )

    def last_token(self) -> str:
        return self.sent[-1]["claim_url"].rsplit("/", 1)[-1]


class StubScoutService(IScoutService):
    def __init__(self):
        self.profile: Optional[ScoutProfile] = None

    async def lookup(self, url: str) -> Optional[ScoutProfile]:
        return self.profile


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    enable_sqlite_savepoints(engine)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def scout():
    return StubScoutService()


@pytest_asyncio.fixture
async def client(session_factory, mailer, scout):
    from orgnet.api.app import create_app

    app = create_app(ApplicationConfig)

    # One session per request, like the production dependency
    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_scout_service] = lambda: scout

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    """Bearer headers for an identity, optionally pinned to an organization"""

    def make(sub: str, email: str, organization_id: Optional[str] = None) -> dict:
        token = create_access_token(sub, email, timedelta(minutes=15))
        headers = {"Authorization": f"Bearer {token}"}
        if organization_id:
            headers["X-Organization-Id"] = str(organization_id)
        return headers

    return make


@pytest_asyncio.fixture
async def hq(client: AsyncClient, auth_headers):
    """Alice with a freshly created HQ organization"""
    headers = auth_headers("auth|alice", "alice@acme.com")
    response = await client.post(
        "/api/organizations/genesis", json={"name": "Acme Events"}, headers=headers
    )
    assert response.status_code == 201
    return {"headers": headers, "organization": response.json()}
