"""
Purge Expired Relationships Use Case

Hard-deletes relationships whose soft delete is older than the restore
window. Run by an operator or a scheduled job.
"""

import logging

from orgnet.app.services.unit_of_work import UnitOfWork
from orgnet.domain.base import utcnow
from orgnet.domain.entities import RESTORE_WINDOW
from orgnet.libs.result import Result, Return

from .dtos import PurgeRelationshipsResponse

logger = logging.getLogger(__name__)


class PurgeExpiredRelationshipsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[PurgeRelationshipsResponse]:
        cutoff = utcnow() - RESTORE_WINDOW
        async with self.uow:
            purged = await self.uow.relationships.purge_deleted_before(cutoff)
            await self.uow.commit()

        logger.info("Purged %d relationships deleted before %s", purged, cutoff)
        return Return.ok(
            PurgeRelationshipsResponse(purged=purged, cutoff=cutoff.isoformat())
        )
