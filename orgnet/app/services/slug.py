"""
Organization slug helpers.

Slugs are lowercase ``[a-z0-9-]`` strings. Creation retries collisions with
numeric suffixes, each attempt inside its own savepoint so a failed insert
does not poison the surrounding transaction.
"""

import logging
import re
import uuid
from typing import Callable, Optional

from orgnet.app.repositories.organization_repository import SlugConflictError
from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.domain.entities import Organization

logger = logging.getLogger(__name__)

MAX_SLUG_ATTEMPTS = 10
MIN_SLUG_LENGTH = 2

_WHITESPACE = re.compile(r"\s+")
_INVALID = re.compile(r"[^a-z0-9-]")


def slugify(name: str) -> str:
    """'Acme Events, Inc.' -> 'acme-events-inc'; falls back to org-<8 hex>"""
    slug = _WHITESPACE.sub("-", name.strip().lower())
    slug = _INVALID.sub("", slug)
    slug = re.sub(r"-{2,}", "-", slug).strip("-")
    return slug or f"org-{uuid.uuid4().hex[:8]}"


def normalize_slug(raw: str) -> str:
    """User-typed slug: lowercase, strip everything outside [a-z0-9-]"""
    return _INVALID.sub("", (raw or "").strip().lower())


async def create_with_unique_slug(
    uow: UnitOfWork,
    base_slug: str,
    build: Callable[[str], Organization],
) -> Optional[Organization]:
    """
    Insert an organization, retrying slug collisions with -1 .. -10.

    Args:
        uow: Active unit of work
        base_slug: First slug to try
        build: Returns a fresh Organization for a candidate slug

    Returns:
        The created organization, or None once every candidate is taken
    """
    for attempt in range(MAX_SLUG_ATTEMPTS + 1):
        candidate = base_slug if attempt == 0 else f"{base_slug}-{attempt}"
        try:
            async with uow.savepoint():
                return await uow.organizations.create(build(candidate))
        except SlugConflictError:
            logger.info(f"Slug '{candidate}' taken, retrying")

    logger.warning(f"No free slug for '{base_slug}' after {MAX_SLUG_ATTEMPTS} retries")
    return None
