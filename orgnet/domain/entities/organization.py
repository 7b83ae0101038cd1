"""
Organization Entity

A company, venue or vendor record. Either claimed by an owner entity or a
ghost placeholder created on someone else's behalf.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import GenesisTier, OrganizationCategory


class Organization(SQLModel, table=True):
    """
    Organization entity.

    Business Rules:
    - is_claimed=False implies owner_id is None
    - Claiming sets is_claimed, claimed_at and owner_id together
    - Ghosts record the organization that created them (created_by_org_id)
    - Only the creator organization may edit an unclaimed ghost profile
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    slug: str = Field(unique=True, index=True, max_length=120)

    is_claimed: bool = Field(default=False)
    claimed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    owner_id: Optional[UUID] = Field(default=None, foreign_key="entities.id")
    created_by_org_id: Optional[UUID] = Field(
        default=None, foreign_key="organizations.id", index=True
    )

    category: Optional[OrganizationCategory] = Field(default=None)
    tier: Optional[GenesisTier] = Field(default=None)

    # Profile
    website: Optional[str] = Field(default=None, max_length=500)
    logo_url: Optional[str] = Field(default=None, max_length=2000)
    brand_color: Optional[str] = Field(default=None, max_length=20)
    support_email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    operational_settings: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_organization_is_claimed", "is_claimed"),
        Index("idx_organization_owner_id", "owner_id"),
    )
