"""
Identity Use Cases

Caller resolution and request context.
"""

from .dtos import Identity, MeResponse, OrganizationMembershipItem, RequestContext
from .get_me_use_case import GetMeUseCase
from .guards import require_organization, require_write_access
from .resolve_context_use_case import ResolveContextUseCase

__all__ = [
    "ResolveContextUseCase",
    "GetMeUseCase",
    "Identity",
    "RequestContext",
    "MeResponse",
    "OrganizationMembershipItem",
    "require_organization",
    "require_write_access",
]
