from abc import ABC, abstractmethod


class IInvitationMailer(ABC):
    """Delivers claim links to invited emails"""

    @abstractmethod
    async def send_invitation(
        self, email: str, organization_name: str, claim_url: str
    ) -> None:
        pass
