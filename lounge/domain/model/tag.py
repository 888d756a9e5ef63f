"""Popular tag cache entry."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lounge.domain.model.common import DomainModel
from lounge.domain.value import LoungeId


class PopularTag(DomainModel):
    """Precomputed tag popularity.

    Rows without a lounge are the global ranking; rows with a lounge rank
    tags within that lounge.
    """

    tag: str = Field(min_length=1, max_length=50)
    count: int = Field(default=0, ge=0)
    lounge_id: Optional[LoungeId] = None
    updated_at: datetime = Field(default_factory=datetime.now)
