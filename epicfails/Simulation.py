"""
Repeated popularity trials and input checks shared by the CLI and MCP server.
"""

import logging

from epicfails.EpicFailsError import EpicFailsError
from epicfails.LikesReport import LikesReport
from epicfails.Video import Video

MIN_EPIC_RATING = 1
MAX_EPIC_RATING = 10

logger = logging.getLogger(__name__)


def check_epic_rating(value: int) -> int:
    """Return the rating unchanged, or raise if it is outside 1-10."""
    if not MIN_EPIC_RATING <= value <= MAX_EPIC_RATING:
        raise EpicFailsError(
            f"Invalid epic rating: {value}",
            f"Epic rating must be between {MIN_EPIC_RATING} and {MAX_EPIC_RATING}",
        )
    return value


def simulate(video: Video, trials: int = 1) -> LikesReport:
    """Run a number of daily and weekly trials for a video.

    Args:
        video: Video to simulate
        trials: Number of rounds, each recording one daily and one weekly result

    Returns:
        LikesReport with one daily and one weekly value per trial
    """
    if trials < 1:
        raise EpicFailsError(f"Invalid number of trials: {trials}", "At least one trial is required")

    report = LikesReport(epic_rating=video.epic_rating, has_animals=video.has_animals, trials=trials)

    for i in range(1, trials + 1):
        daily = video.daily_likes()
        weekly = video.weekly_likes()
        logger.debug(f"Trial {i}/{trials}: daily={daily} weekly={weekly}")
        report.daily_likes.append(daily)
        report.weekly_likes.append(weekly)

    return report
