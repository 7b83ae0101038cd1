import logging

from orgnet.app.services.invitation_mailer import IInvitationMailer

logger = logging.getLogger(__name__)


class LoggingInvitationMailer(IInvitationMailer):
    """Writes claim links to the log until an email provider is wired in"""

    async def send_invitation(
        self, email: str, organization_name: str, claim_url: str
    ) -> None:
        logger.info(
            f"Invitation for '{organization_name}' to {email}: {claim_url}"
        )
