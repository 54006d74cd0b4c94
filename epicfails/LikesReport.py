from dataclasses import dataclass, field
from typing import List


@dataclass
class LikesReport:
    """Results of repeated popularity simulations for one video."""

    epic_rating: int
    has_animals: bool
    trials: int
    daily_likes: List[int] = field(default_factory=list)
    weekly_likes: List[int] = field(default_factory=list)

    @property
    def mean_daily_likes(self) -> float:
        if not self.daily_likes:
            return 0.0
        return sum(self.daily_likes) / len(self.daily_likes)

    @property
    def mean_weekly_likes(self) -> float:
        if not self.weekly_likes:
            return 0.0
        return sum(self.weekly_likes) / len(self.weekly_likes)

    def to_markdown(self) -> str:
        """Render the report as a markdown block."""
        animals_str = "yes" if self.has_animals else "no"
        daily_str = ", ".join(str(likes) for likes in self.daily_likes) or "N/A"
        weekly_str = ", ".join(str(likes) for likes in self.weekly_likes) or "N/A"

        return f"""# Epic Fail Popularity

**Epic Rating:** {self.epic_rating}  
**Has Animals:** {animals_str}  
**Trials:** {self.trials}  

---

- **Daily likes:** {daily_str}
- **Weekly likes:** {weekly_str}
- **Mean daily likes:** {self.mean_daily_likes:.2f}
- **Mean weekly likes:** {self.mean_weekly_likes:.2f}"""
