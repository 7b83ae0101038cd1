"""
Onboarding Use Case DTOs

Commands and responses for HQ creation, ghost organizations and claiming.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from orgnet.domain.entities import GenesisTier, OrganizationCategory, OrgMemberRole


# ============================================================================
# Command DTOs
# ============================================================================


class GenesisCommand(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = None
    tier: GenesisTier = GenesisTier.scout
    brand_color: Optional[str] = None
    logo_url: Optional[str] = None
    category: Optional[OrganizationCategory] = None


class AddressInput(BaseModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class GhostProfileInput(BaseModel):
    """Editable profile of an unclaimed organization"""

    name: str
    website: Optional[str] = None
    brand_color: Optional[str] = None
    logo_url: Optional[str] = None
    doing_business_as: Optional[str] = None
    entity_type: Optional[Literal["organization", "single_operator"]] = None
    support_email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[AddressInput] = None
    default_currency: Optional[str] = None
    tax_id: Optional[str] = None
    payment_terms: Optional[str] = None
    category: Optional[OrganizationCategory] = None


class GhostContactInput(BaseModel):
    first_name: str
    last_name: str = ""
    email: Optional[str] = None
    role: OrgMemberRole = OrgMemberRole.member
    job_title: Optional[str] = None
    avatar_url: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class OrganizationResponse(BaseModel):
    id: str
    name: str
    slug: str
    is_claimed: bool
    owner_id: Optional[str] = None
    created_by_org_id: Optional[str] = None
    category: Optional[str] = None
    tier: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    brand_color: Optional[str] = None

    @classmethod
    def from_entity(cls, org) -> "OrganizationResponse":
        return cls(
            id=str(org.id),
            name=org.name,
            slug=org.slug,
            is_claimed=org.is_claimed,
            owner_id=str(org.owner_id) if org.owner_id else None,
            created_by_org_id=(
                str(org.created_by_org_id) if org.created_by_org_id else None
            ),
            category=org.category.value if org.category else None,
            tier=org.tier.value if org.tier else None,
            website=org.website,
            logo_url=org.logo_url,
            brand_color=org.brand_color,
        )


class SlugAvailabilityResponse(BaseModel):
    """status: void (free), taken (claimed org), ghost (unclaimed org, claimable)"""

    slug: str
    available: bool
    status: Literal["void", "taken", "ghost", "invalid"]
    ghost_name: Optional[str] = None


class CreateGhostOrganizationResponse(BaseModel):
    organization: OrganizationResponse
    contact_entity_id: str
    invitation_issued: bool


class ClaimOrganizationResponse(BaseModel):
    organization_id: str
    organization_name: str
    entity_id: str
    access_level: str


class GhostContactResponse(BaseModel):
    entity_id: str
    member_id: str
    email: str
    display_name: str
