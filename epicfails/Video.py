"""
Popularity model for epic fail videos.
"""

import random
from dataclasses import dataclass, field
from typing import Any, Optional

MIN_VIEWERS = 10
MAX_VIEWERS = 30
ANIMALS_PERCENTAGE = 0.75
DEFAULT_PERCENTAGE = 0.40
DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class Video:
    """An epic fail video and its simulated popularity.

    Args:
        epic_rating: How dramatic the failure is, expected between 1 and 10
        has_animals: Whether the video features animals
        rng: Random source with a ``randint`` method (e.g. ``random.Random(seed)``).
            Falls back to the process-wide ``random`` module when not given.
    """

    epic_rating: int
    has_animals: bool
    rng: Optional[Any] = field(default=None, repr=False, compare=False)

    @property
    def approval_percentage(self) -> float:
        """Share of viewers that like the video."""
        return ANIMALS_PERCENTAGE if self.has_animals else DEFAULT_PERCENTAGE

    def random_int(self, low: int, high: int) -> int:
        """Return a uniformly distributed integer in [low, high]."""
        source = self.rng if self.rng is not None else random
        return source.randint(low, high)

    def daily_likes(self) -> int:
        """Simulate the likes this video gets in one day."""
        viewers = self.random_int(MIN_VIEWERS, MAX_VIEWERS) * self.epic_rating
        return round(viewers * self.approval_percentage)

    def weekly_likes(self) -> int:
        """Simulate a week of likes, each day drawn independently."""
        return sum(self.daily_likes() for _ in range(DAYS_PER_WEEK))
