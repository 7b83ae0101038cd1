from sqlmodel.ext.asyncio.session import AsyncSession

from orgnet.adapter.repositories.affiliation_repository import AffiliationRepository
from orgnet.adapter.repositories.audit_event_repository import AuditEventRepository
from orgnet.adapter.repositories.entity_repository import EntityRepository
from orgnet.adapter.repositories.invitation_repository import InvitationRepository
from orgnet.adapter.repositories.org_member_repository import OrgMemberRepository
from orgnet.adapter.repositories.organization_repository import OrganizationRepository
from orgnet.adapter.repositories.package_repository import PackageRepository
from orgnet.adapter.repositories.relationship_repository import RelationshipRepository
from orgnet.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.entities = EntityRepository(self.session)
        self.organizations = OrganizationRepository(self.session)
        self.affiliations = AffiliationRepository(self.session)
        self.org_members = OrgMemberRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.relationships = RelationshipRepository(self.session)
        self.packages = PackageRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

    def savepoint(self):
        return self.session.begin_nested()
