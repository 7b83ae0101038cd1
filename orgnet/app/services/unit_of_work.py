from abc import ABC, abstractmethod
from typing import AsyncContextManager

from orgnet.app.repositories.affiliation_repository import IAffiliationRepository
from orgnet.app.repositories.audit_event_repository import IAuditEventRepository
from orgnet.app.repositories.entity_repository import IEntityRepository
from orgnet.app.repositories.invitation_repository import IInvitationRepository
from orgnet.app.repositories.org_member_repository import IOrgMemberRepository
from orgnet.app.repositories.organization_repository import IOrganizationRepository
from orgnet.app.repositories.package_repository import IPackageRepository
from orgnet.app.repositories.relationship_repository import IRelationshipRepository


class UnitOfWork(ABC):
    """
    Abstract UnitOfWork - defines repository access and transaction management.

    Leaving the context without commit() discards every write made inside it.
    """

    # Repository properties (initialized in __aenter__)
    entities: IEntityRepository
    organizations: IOrganizationRepository
    affiliations: IAffiliationRepository
    org_members: IOrgMemberRepository
    invitations: IInvitationRepository
    relationships: IRelationshipRepository
    packages: IPackageRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

    @abstractmethod
    def savepoint(self) -> AsyncContextManager:
        """
        Nested transaction. An exception raised inside the block rolls back
        only the writes made in the block, then propagates.
        """
        pass
