"""
Admin Use Cases
"""

from .dtos import PurgeRelationshipsResponse
from .purge_expired_relationships_use_case import PurgeExpiredRelationshipsUseCase

__all__ = ["PurgeExpiredRelationshipsUseCase", "PurgeRelationshipsResponse"]
