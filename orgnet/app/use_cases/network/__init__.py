"""
Network Use Cases

Org-to-org relationship lifecycle.
"""

from .create_connection_from_scout_use_case import CreateConnectionFromScoutUseCase
from .create_relationship_use_case import CreateRelationshipUseCase
from .dtos import (
    CreateRelationshipCommand,
    DeletedRelationshipResponse,
    GhostConnectionResponse,
    RelationshipResponse,
    ScoutConnectionCommand,
    SummonGhostPartnerCommand,
    UpdateRelationshipCommand,
)
from .list_relationships_use_case import (
    ListDeletedRelationshipsUseCase,
    ListRelationshipsUseCase,
)
from .relationship_tier_use_case import PinRelationshipUseCase, UnpinRelationshipUseCase
from .restore_relationship_use_case import RestoreRelationshipUseCase
from .soft_delete_relationship_use_case import (
    SoftDeleteRelationshipResponse,
    SoftDeleteRelationshipUseCase,
)
from .summon_ghost_partner_use_case import SummonGhostPartnerUseCase
from .update_relationship_use_case import UpdateRelationshipUseCase

__all__ = [
    "CreateRelationshipUseCase",
    "SummonGhostPartnerUseCase",
    "CreateConnectionFromScoutUseCase",
    "PinRelationshipUseCase",
    "UnpinRelationshipUseCase",
    "UpdateRelationshipUseCase",
    "SoftDeleteRelationshipUseCase",
    "RestoreRelationshipUseCase",
    "ListRelationshipsUseCase",
    "ListDeletedRelationshipsUseCase",
    "CreateRelationshipCommand",
    "SummonGhostPartnerCommand",
    "ScoutConnectionCommand",
    "UpdateRelationshipCommand",
    "RelationshipResponse",
    "DeletedRelationshipResponse",
    "GhostConnectionResponse",
    "SoftDeleteRelationshipResponse",
]
