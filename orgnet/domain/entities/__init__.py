"""
Organization Network Domain Entities

Each entity in its own file.
"""

# Export all enums
from .enums import (
    ACCESS_LEVEL_PRIORITY,
    AccessLevel,
    AffiliationStatus,
    GenesisTier,
    InvitationStatus,
    OrganizationCategory,
    OrgMemberRole,
    PackageCategory,
    RelationshipLifecycle,
    RelationshipState,
    RelationshipTier,
    RelationshipType,
)

# Export all entities
from .entity import Entity
from .organization import Organization
from .affiliation import Affiliation
from .org_member import OrgMember
from .invitation import Invitation
from .org_relationship import RESTORE_WINDOW, OrgRelationship
from .catalog_package import CatalogPackage
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "ACCESS_LEVEL_PRIORITY",
    "AccessLevel",
    "AffiliationStatus",
    "GenesisTier",
    "InvitationStatus",
    "OrganizationCategory",
    "OrgMemberRole",
    "PackageCategory",
    "RelationshipLifecycle",
    "RelationshipState",
    "RelationshipTier",
    "RelationshipType",
    # Entities
    "Entity",
    "Organization",
    "Affiliation",
    "OrgMember",
    "Invitation",
    "OrgRelationship",
    "RESTORE_WINDOW",
    "CatalogPackage",
    "AuditEvent",
]
