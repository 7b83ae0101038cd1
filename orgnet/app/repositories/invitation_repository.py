from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from orgnet.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[Invitation]:
        """Get invitation by token hash, regardless of status"""
        pass

    @abstractmethod
    async def get_pending_valid_by_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[Invitation]:
        """Get a pending, unexpired invitation by token hash"""
        pass

    @abstractmethod
    async def get_pending_by_organization_and_email(
        self, organization_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by organization and email"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def consume(self, invitation_id: UUID, now: datetime) -> bool:
        """
        Mark a pending, unexpired invitation as accepted.

        Returns:
            True if this call performed the transition, False if the invitation
            was no longer pending or had expired.
        """
        pass
