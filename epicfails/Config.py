import random
from typing import Optional


from pydantic import BaseModel, Field


class Config(BaseModel):
    """Complete application configuration."""

    seed: Optional[int] = None
    trials: int = Field(default=1, ge=1)
    show_weekly: bool = True

    def make_rng(self) -> Optional[random.Random]:
        """Get a seeded random source, or None to use the process-wide one."""
        if self.seed is None:
            return None
        return random.Random(self.seed)
