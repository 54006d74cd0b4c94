"""
Command-line interface for the epic fail popularity simulator.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .Config import Config
from .ConfigManager import ConfigManager
from .EpicFailsError import EpicFailsError
from .Simulation import check_epic_rating, simulate
from .Video import Video


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", handlers=[logging.StreamHandler()])


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Epic Fails - Simulate how many likes an epic fail video gets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s 7
  %(prog)s 4 --animals
  %(prog)s 9 --animals --trials 100 --seed 42

        """,
    )

    parser.add_argument("epic_rating", type=int, help="How dramatic the failure is (1-10)")

    parser.add_argument("--animals", "-a", action="store_true", help="The video features animals")

    parser.add_argument("--trials", "-t", type=int, help="Number of simulation rounds (overrides config file setting)")

    parser.add_argument("--seed", "-s", type=int, help="Seed for the random source (overrides config file setting)")

    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Return a config with CLI arguments taking precedence over the config file."""
    overrides = {}
    if args.trials is not None:
        overrides["trials"] = args.trials
    if args.seed is not None:
        overrides["seed"] = args.seed
    return config.model_copy(update=overrides)


def run(video: Video, config: Config) -> None:
    """Simulate and log the popularity of a single video."""
    logger = logging.getLogger(__name__)

    logger.info(f"Video: epic rating {video.epic_rating}, animals: {'yes' if video.has_animals else 'no'}")

    report = simulate(video, config.trials)

    for i, daily in enumerate(report.daily_likes, 1):
        prefix = f"[{i}/{report.trials}] " if report.trials > 1 else ""
        logger.info(f"{prefix}Daily likes: {daily}")
        if config.show_weekly:
            logger.info(f"{prefix}Weekly likes: {report.weekly_likes[i - 1]}")

    if report.trials > 1:
        logger.info("=" * 40)
        logger.info(f"📊 Mean daily likes: {report.mean_daily_likes:.2f}")
        if config.show_weekly:
            logger.info(f"📊 Mean weekly likes: {report.mean_weekly_likes:.2f}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main function to orchestrate the entire process."""
    args = parse_arguments(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config_manager = ConfigManager()
        config = apply_overrides(config_manager.load_config(), args)
        logger.debug(f"Using seed: {config.seed} with {config.trials} trial(s)")
    except ValueError as e:
        logger.error(f"Configuration error: {str(e)}")
        sys.exit(1)

    logger.info("🎬 Epic Fails Popularity Simulator")
    logger.info("=" * 40)

    try:
        epic_rating = check_epic_rating(args.epic_rating)
        video = Video(epic_rating=epic_rating, has_animals=args.animals, rng=config.make_rng())
        run(video, config)
    except EpicFailsError as e:
        logger.error(e.message)
        if e.details:
            logger.debug(f"Details: {e.details}")
        sys.exit(1)


if __name__ == "__main__":
    main()
