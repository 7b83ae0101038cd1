from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel


class ScoutRosterMember(BaseModel):
    first_name: str
    last_name: str = ""
    email: Optional[str] = None
    job_title: Optional[str] = None
    avatar_url: Optional[str] = None


class ScoutProfile(BaseModel):
    """Company profile extracted from a website by the Scout service"""

    name: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    support_email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[dict] = None
    doing_business_as: Optional[str] = None
    roster: List[ScoutRosterMember] = []


class IScoutService(ABC):
    """Website enrichment. Implementations never raise; None means no data."""

    @abstractmethod
    async def lookup(self, url: str) -> Optional[ScoutProfile]:
        pass
