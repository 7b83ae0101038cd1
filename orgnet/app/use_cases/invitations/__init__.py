"""
Invitation Use Cases

Validation and redemption of claim tokens, team invitations.
"""

from .claim_organization_use_case import ClaimOrganizationUseCase
from .dtos import TeamInviteCommand, TeamInviteResponse, ValidateInvitationResponse
from .invite_team_member_use_case import InviteTeamMemberUseCase
from .validate_invitation_use_case import ValidateInvitationUseCase

__all__ = [
    "ClaimOrganizationUseCase",
    "InviteTeamMemberUseCase",
    "ValidateInvitationUseCase",
    "TeamInviteCommand",
    "TeamInviteResponse",
    "ValidateInvitationResponse",
]
