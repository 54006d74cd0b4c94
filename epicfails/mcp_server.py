"""
MCP Server for the epic fail popularity simulator.

This server exposes the popularity simulation as MCP tools that can be
called from AI assistants like Cursor.
"""

import random
from typing import Optional

from fastmcp import FastMCP

from .EpicFailsError import EpicFailsError
from .Simulation import check_epic_rating, simulate
from .Video import Video

# Initialize the FastMCP server
mcp = FastMCP("epic-fails")


def _make_video(epic_rating: int, has_animals: bool, seed: Optional[int]) -> Video:
    rng = random.Random(seed) if seed is not None else None
    return Video(epic_rating=check_epic_rating(epic_rating), has_animals=has_animals, rng=rng)


def simulate_daily_likes(epic_rating: int, has_animals: bool, seed: Optional[int] = None) -> str:
    """Simulate how many likes an epic fail video gets in one day.

    Args:
        epic_rating: How dramatic the failure is (1-10)
        has_animals: Whether the video features animals
        seed: Optional seed for a reproducible result

    Returns:
        Number of daily likes
    """
    try:
        return str(_make_video(epic_rating, has_animals, seed).daily_likes())
    except EpicFailsError as e:
        return f"Error: {str(e)}"


def simulate_weekly_likes(epic_rating: int, has_animals: bool, seed: Optional[int] = None) -> str:
    """Simulate how many likes an epic fail video gets over a week.

    Args:
        epic_rating: How dramatic the failure is (1-10)
        has_animals: Whether the video features animals
        seed: Optional seed for a reproducible result

    Returns:
        Number of weekly likes
    """
    try:
        return str(_make_video(epic_rating, has_animals, seed).weekly_likes())
    except EpicFailsError as e:
        return f"Error: {str(e)}"


def simulate_popularity(epic_rating: int, has_animals: bool, trials: int = 1, seed: Optional[int] = None) -> str:
    """Run several daily and weekly simulations and summarize them.

    Args:
        epic_rating: How dramatic the failure is (1-10)
        has_animals: Whether the video features animals
        trials: Number of simulation rounds (default: 1)
        seed: Optional seed for a reproducible result

    Returns:
        Formatted report in markdown
    """
    try:
        video = _make_video(epic_rating, has_animals, seed)
        return simulate(video, trials).to_markdown()
    except EpicFailsError as e:
        return f"Error: {str(e)}"


mcp.tool(simulate_daily_likes)
mcp.tool(simulate_weekly_likes)
mcp.tool(simulate_popularity)


def main() -> None:
    """Main entry point function for the script."""
    mcp.run()


if __name__ == "__main__":
    main()
