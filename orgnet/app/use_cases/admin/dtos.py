from pydantic import BaseModel


class PurgeRelationshipsResponse(BaseModel):
    purged: int
    cutoff: str
