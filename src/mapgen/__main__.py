"""CLI entry point for the map generator."""

import argparse
import logging
import sys

import structlog

from .config import Config, find_config, load_config
from .shell import MapSession


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog to write to stderr, keeping stdout for the map."""
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def main(argv: list[str] | None = None) -> None:
    """Run an interactive map generator session."""
    parser = argparse.ArgumentParser(
        description="Generate fault-line terrain and render it as text"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of TOML config file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (overrides config)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    logger = structlog.get_logger()

    if args.config:
        try:
            config_path = find_config(args.config)
        except FileNotFoundError:
            logger.error("config_not_found", path=args.config)
            raise SystemExit(1)
        config = load_config(config_path)
        logger.info("config_loaded", path=str(config_path))
    else:
        config = Config()

    # Apply CLI overrides
    if args.seed is not None:
        config.generator.seed = args.seed

    session = MapSession(config, read=input, write=print)
    raise SystemExit(session.run())


if __name__ == "__main__":
    main()
