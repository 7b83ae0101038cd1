"""
Organization Network Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class AccessLevel(str, Enum):
    """Access granted by an affiliation"""

    admin = "admin"
    member = "member"
    read_only = "read_only"


# Lower value wins when picking an entity's current organization
ACCESS_LEVEL_PRIORITY = {
    AccessLevel.admin: 0,
    AccessLevel.member: 1,
    AccessLevel.read_only: 2,
}


class AffiliationStatus(str, Enum):
    """Affiliation status"""

    active = "active"
    inactive = "inactive"


class OrganizationCategory(str, Enum):
    """Badge shown for an organization in the network"""

    vendor = "vendor"
    venue = "venue"
    coordinator = "coordinator"
    client = "client"
    partner = "partner"


class GenesisTier(str, Enum):
    """Capacity tier chosen when creating an HQ organization"""

    scout = "scout"
    vanguard = "vanguard"
    command = "command"


class OrgMemberRole(str, Enum):
    """Roster role within an organization"""

    owner = "owner"
    admin = "admin"
    manager = "manager"
    member = "member"
    restricted = "restricted"


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"


class RelationshipType(str, Enum):
    """Direction of an org-to-org edge"""

    vendor = "vendor"
    venue = "venue"
    client = "client"
    partner = "partner"


class RelationshipTier(str, Enum):
    """standard = outer orbit, preferred = inner circle"""

    standard = "standard"
    preferred = "preferred"


class RelationshipLifecycle(str, Enum):
    """Commercial status of a relationship"""

    prospect = "prospect"
    active = "active"
    dormant = "dormant"
    blacklisted = "blacklisted"


class RelationshipState(str, Enum):
    """Soft-delete lifecycle of a relationship row"""

    active = "active"
    deleted = "deleted"
    purgeable = "purgeable"


class PackageCategory(str, Enum):
    """Catalog categories, defined by billing behavior"""

    package = "package"
    service = "service"
    rental = "rental"
    talent = "talent"
    retail_sale = "retail_sale"
    fee = "fee"
