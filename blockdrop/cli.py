"""
Command-line entry point for blockdrop.

Usage:
    blockdrop
    blockdrop --config config/default.yaml
    blockdrop --relaxed --seed 42 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

import yaml

from blockdrop.game.config import RELAXED_BASE_SPEED_MS, GameConfig


def load_config(config_path: str | pathlib.Path) -> dict:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dict of configuration key-value pairs (empty for an empty file).

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with config, relaxed, seed, and log_level attributes.
    """
    parser = argparse.ArgumentParser(
        description="blockdrop: play a falling-block puzzle game.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML configuration file (default: built-in settings).",
    )
    parser.add_argument(
        "--relaxed",
        action="store_true",
        help=f"Use the slower {RELAXED_BASE_SPEED_MS} ms base drop speed.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the piece generator (default: config value or random).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point: parse args, load config, and start the game."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="[%(name)s] %(asctime)s %(levelname)s - %(message)s",
    )

    config: dict = {}
    if args.config is not None:
        try:
            config = load_config(args.config)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    if args.relaxed:
        config["base_speed_ms"] = RELAXED_BASE_SPEED_MS
    if args.seed is not None:
        config["seed"] = args.seed

    try:
        GameConfig.from_dict(config)
    except (TypeError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    from blockdrop.play import play_manual
    play_manual(config)


if __name__ == "__main__":
    main()
