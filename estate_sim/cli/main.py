"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from estate_sim.cli.console import ConsoleReader
from estate_sim.cli.menu import PlatformMenu
from estate_sim.config import LOG_FORMATS, PlatformConfig
from estate_sim.exceptions import ConfigurationError
from estate_sim.generators import DemoDataGenerator
from estate_sim.logging import get_logger, setup_logging
from estate_sim.store import RealEstatePlatform

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="estate-sim",
        description="Interactive real-estate listing platform simulation",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for demo data (default: $SEED)",
    )
    parser.add_argument(
        "--demo-users",
        type=int,
        default=None,
        help="Generate this many users before the menu starts (default: $DEMO_USERS or 0)",
    )
    parser.add_argument(
        "--demo-properties",
        type=int,
        default=None,
        help="Generate this many properties before the menu starts (default: $DEMO_PROPERTIES or 0)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: $LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=LOG_FORMATS,
        default=None,
        help="Log format (default: $LOG_FORMAT or standard)",
    )
    return parser


def load_config(args: argparse.Namespace) -> PlatformConfig:
    """Merge command-line flags over the environment configuration."""
    config = PlatformConfig.from_env()

    if args.seed is not None:
        config.seed = args.seed
    if args.demo_users is not None:
        config.demo.num_users = args.demo_users
    if args.demo_properties is not None:
        config.demo.num_properties = args.demo_properties
    if args.log_level is not None:
        config.logging.level = args.log_level
    if args.log_format is not None:
        config.logging.format_type = args.log_format

    config.validate()
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu and return the exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging(config.logging.level, config.logging.format_type)

    platform = RealEstatePlatform()
    if config.demo.enabled:
        DemoDataGenerator(seed=config.seed, locale=config.demo.locale).populate(
            platform,
            config.demo.num_users,
            config.demo.num_properties,
        )

    logger.info("Starting menu")
    return PlatformMenu(platform, ConsoleReader(sys.stdin)).run()
