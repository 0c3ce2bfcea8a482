"""Points tracker entity."""

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import UserId


class UserPointsTracker(DomainModel):
    """Per-user points economy state.

    - total_points: lifetime earned minus spent (reputation display)
    - remaining_points: spendable balance, gates posting, never negative
    """

    user_id: UserId
    total_points: int
    remaining_points: int = Field(ge=0)
