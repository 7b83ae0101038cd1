"""
Onboarding Use Cases

HQ creation, ghost organizations and self-service claims.
"""

from .add_ghost_contact_use_case import AddGhostContactUseCase
from .check_slug_availability_use_case import CheckSlugAvailabilityUseCase
from .claim_organization_by_slug_use_case import ClaimOrganizationBySlugUseCase
from .create_genesis_organization_use_case import CreateGenesisOrganizationUseCase
from .create_ghost_organization_use_case import CreateGhostOrganizationUseCase
from .dtos import (
    ClaimOrganizationResponse,
    CreateGhostOrganizationResponse,
    GenesisCommand,
    GhostContactInput,
    GhostContactResponse,
    GhostProfileInput,
    OrganizationResponse,
    SlugAvailabilityResponse,
)
from .update_ghost_profile_use_case import UpdateGhostProfileUseCase, apply_ghost_profile

__all__ = [
    "CreateGenesisOrganizationUseCase",
    "CheckSlugAvailabilityUseCase",
    "CreateGhostOrganizationUseCase",
    "ClaimOrganizationBySlugUseCase",
    "UpdateGhostProfileUseCase",
    "AddGhostContactUseCase",
    "apply_ghost_profile",
    "GenesisCommand",
    "GhostProfileInput",
    "GhostContactInput",
    "OrganizationResponse",
    "SlugAvailabilityResponse",
    "CreateGhostOrganizationResponse",
    "ClaimOrganizationResponse",
    "GhostContactResponse",
]
