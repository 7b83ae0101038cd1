from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from orgnet.adapter.services.invitation_mailer import LoggingInvitationMailer
from orgnet.adapter.services.scout_service import HttpScoutService
from orgnet.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from orgnet.api.error import ClientError, ServerError
from orgnet.api.utils.jwt import verify_jwt
from orgnet.app.services.invitation_mailer import IInvitationMailer
from orgnet.app.services.scout_service import IScoutService
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.app.use_cases.identity import Identity, RequestContext, ResolveContextUseCase
from orgnet.libs.result import Error


def enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """
    Let SQLAlchemy emit BEGIN itself so SAVEPOINT works on SQLite.

    The sqlite3 driver otherwise manages transactions on its own and breaks
    begin_nested(). Transactions start IMMEDIATE so concurrent writers queue
    on the busy timeout instead of failing their first write with
    "database is locked".
    """

    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
if engine.dialect.name == "sqlite":
    enable_sqlite_savepoints(engine)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_mailer() -> IInvitationMailer:
    return LoggingInvitationMailer()


def get_scout_service() -> IScoutService:
    return HttpScoutService(
        ApplicationConfig.SCOUT_API_URL,
        timeout=ApplicationConfig.SCOUT_TIMEOUT_SECONDS,
    )


async def get_identity(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> Identity:
    """
    Dependency to extract and verify the bearer token.

    The identity provider puts the stable user id in ``sub`` and the
    verified address in ``email``.

    Raises:
        HTTPException: 401 if token is invalid, expired or missing claims
    """
    payload = verify_jwt(credentials.credentials)

    if payload is None or not payload.get("sub") or not payload.get("email"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return Identity(auth_id=str(payload["sub"]), email=str(payload["email"]))


async def get_request_context(
    identity: Identity = Depends(get_identity),
    x_organization_id: Optional[str] = Header(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> RequestContext:
    """
    Resolve the caller's entity and current organization.

    ``X-Organization-Id`` selects an organization the caller is affiliated
    with; otherwise the owned, then highest-access, organization is used.
    """
    requested_org_id = None
    if x_organization_id:
        try:
            requested_org_id = UUID(x_organization_id)
        except ValueError:
            raise ClientError(
                Error("INVALID_ORGANIZATION_ID", "Invalid organization ID format"),
                status_code=status.HTTP_400_BAD_REQUEST,
            )

    result = await ResolveContextUseCase(uow).execute(identity, requested_org_id)
    if result.is_err():
        raise ServerError(result.error)
    return result.value
