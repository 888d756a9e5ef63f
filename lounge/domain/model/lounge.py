"""Lounge entity.

Lounges are the community spaces posts are published in.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lounge.domain.model.common import DomainModel
from lounge.domain.value import LoungeId


class Lounge(DomainModel):
    """Lounge entity."""

    id: LoungeId
    name: str = Field(min_length=1, max_length=50)
    slug: str = Field(pattern=r"^[a-z0-9-]+$", max_length=50)
    description: Optional[str] = Field(default=None, max_length=500)
    icon: Optional[str] = None
    member_count: int = Field(default=0, ge=0)
    is_official: bool = False
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
