from typing import Optional

from orgnet.domain.entities import AccessLevel
from orgnet.libs.result import Error

from .dtos import RequestContext

WRITE_ACCESS = (AccessLevel.admin, AccessLevel.member)


def require_organization(ctx: RequestContext) -> Optional[Error]:
    if ctx.organization_id is None:
        return Error(
            "NO_ORGANIZATION",
            "You must belong to an organization. Create your HQ first.",
        )
    return None


def require_write_access(ctx: RequestContext) -> Optional[Error]:
    """Mutations need admin or member access to the context organization"""
    error = require_organization(ctx)
    if error:
        return error
    if ctx.access_level not in WRITE_ACCESS:
        return Error(
            "INSUFFICIENT_ACCESS",
            "Your access level does not allow changes to this organization.",
        )
    return None
