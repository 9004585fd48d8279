# main.py

"""Entry point for the price_guesser game (TUI or line mode)."""

import argparse
import logging
import sys
from pathlib import Path

from src.config.logging_config import setup_logging
from src.config.settings import Settings
from src.services.selection import Selector, seeded_random, uniform_random

logger = logging.getLogger("price_guesser.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="price_guesser",
        description=(
            "Guess the price of a product in "
            f"{Settings.ATTEMPT_LIMIT} attempts."
        ),
    )
    parser.add_argument(
        "--cli",
        action="store_true",
        default=False,
        help="Play in plain line mode instead of the interactive TUI.",
    )
    parser.add_argument(
        "-c",
        "--catalog",
        type=Path,
        default=None,
        help=f"Product catalog JSON (default: {Settings.CATALOG_PATH}).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the product picker for a repeatable sequence.",
    )
    return parser


def _selector_for(seed: int | None) -> Selector:
    if seed is None:
        return uniform_random
    return seeded_random(seed)


def _run_tui(catalog: Path | None, selector: Selector) -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import PriceGuesserApp

    try:
        app = PriceGuesserApp(catalog_path=catalog, selector=selector)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("price_guesser TUI shutting down")


def _run_cli(catalog: Path | None, selector: Selector) -> None:
    """Run the line-mode game and exit."""
    from src.cli.runner import run_cli_game

    exit_code = run_cli_game(catalog_path=catalog, selector=selector)
    sys.exit(exit_code)


def main(argv: list[str] | None = None) -> None:
    """Route to the TUI (default) or line mode (``--cli``)."""
    log_file = setup_logging()
    logger.info("price_guesser starting, log file: %s", log_file)

    args = _build_parser().parse_args(argv)
    selector = _selector_for(args.seed)

    if args.cli:
        _run_cli(args.catalog, selector)
    else:
        _run_tui(args.catalog, selector)


if __name__ == "__main__":
    main()
