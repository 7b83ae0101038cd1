"""
Identity DTOs

The request context is resolved once per request and passed explicitly into
every use case that acts on behalf of an organization.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from orgnet.domain.entities import AccessLevel


class Identity(BaseModel):
    """Authenticated caller as asserted by the identity provider"""

    auth_id: str
    email: str


class RequestContext(BaseModel):
    auth_id: str
    email: str
    entity_id: UUID
    organization_id: Optional[UUID] = None
    access_level: Optional[AccessLevel] = None


class OrganizationMembershipItem(BaseModel):
    organization_id: str
    name: str
    slug: str
    is_claimed: bool
    is_owner: bool
    access_level: str
    role_label: Optional[str] = None


class MeResponse(BaseModel):
    entity_id: str
    email: str
    current_organization_id: Optional[str] = None
    access_level: Optional[str] = None
    organizations: List[OrganizationMembershipItem]
