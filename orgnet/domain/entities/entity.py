"""
Entity

A person-like identity, optionally bound to an authenticated user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Entity(SQLModel, table=True):
    """
    Entity - a person who can be affiliated with many organizations.

    Business Rules:
    - Created lazily on the first authenticated request (auth_id bound)
    - Created as a ghost (no auth_id) when referenced before the person signs up
    - A claim binds a ghost entity to the claiming identity
    """

    __tablename__ = "entities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(max_length=255, index=True)

    is_ghost: bool = Field(default=False)
    auth_id: Optional[str] = Field(default=None, unique=True, max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_entity_is_ghost", "is_ghost"),)
