"""
Invitation Use Case DTOs
"""

from typing import Optional

from pydantic import BaseModel, Field

from orgnet.domain.entities import OrgMemberRole


class TeamInviteCommand(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: OrgMemberRole = OrgMemberRole.member
    job_title: Optional[str] = None


class ValidateInvitationResponse(BaseModel):
    email: str
    organization_id: str
    organization_name: str
    expires_at: str


class TeamInviteResponse(BaseModel):
    invite_id: Optional[str] = None
    entity_id: str
    member_id: str
    status: str
    expires_at: Optional[str] = None
