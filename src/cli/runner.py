# src/cli/runner.py

"""Line-mode game runner for terminals without the TUI."""

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.services.selection import Selector, uniform_random
from src.ui.presenter import GamePresenter

logger = logging.getLogger("price_guesser.cli")

QUIT_WORDS = {"q", "quit", "exit"}

_STYLE_FOR = {
    "start": "dim",
    "higher": "yellow",
    "lower": "yellow",
    "correct": "bold green",
}
_MESSAGE_STYLE = {
    "win": "bold green",
    "lose": "bold red",
    "error": "red",
}


def _print_board(console: Console, presenter: GamePresenter) -> None:
    """Render the guess rows as a Rich table."""
    table = Table(
        title=presenter.attempts_label,
        show_lines=False,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=3)
    table.add_column("Guess", justify="right")
    table.add_column("Feedback")

    for idx, row in enumerate(presenter.rows, 1):
        style = _STYLE_FOR.get(row.feedback_style, "")
        table.add_row(
            str(idx),
            row.price_text,
            f"[{style}]{row.feedback_text}[/{style}]"
            if style and row.feedback_text
            else row.feedback_text,
        )

    console.print(table)


def _print_message(console: Console, presenter: GamePresenter) -> None:
    if not presenter.message:
        return
    style = _MESSAGE_STYLE.get(presenter.message_type, "")
    console.print(presenter.message, style=style, markup=False)


def _prompt(console: Console, prompt: str) -> str | None:
    """Read one line; ``None`` means the player hit Ctrl-D or Ctrl-C."""
    try:
        return console.input(prompt).strip()
    except (EOFError, KeyboardInterrupt) as exc:
        logger.info("Input closed (%s), leaving the game", type(exc).__name__)
        console.print()
        return None


def _play_round(console: Console, presenter: GamePresenter) -> bool:
    """Play one round; return ``False`` if the player asked to quit."""
    presenter.new_game()
    if not presenter.input_enabled:
        return True
    console.print(f"\n[bold]{escape(presenter.product_label)}[/bold]")
    console.print(f"[dim]{escape(presenter.image_label)}[/dim]")
    _print_board(console, presenter)

    while presenter.input_enabled:
        raw = _prompt(console, "[bold]Your guess (€)[/bold] ")
        if raw is None or raw.lower() in QUIT_WORDS:
            return False
        result = presenter.submit(raw)
        if result is not None:
            _print_board(console, presenter)
        _print_message(console, presenter)

    return True


def run_cli_game(
    catalog_path: Path | None = None,
    selector: Selector = uniform_random,
    console: Console | None = None,
) -> int:
    """Play rounds until the player quits; return an exit code (0=ok, 1=fail)."""
    console = console if console is not None else Console()
    presenter = GamePresenter.from_catalog(catalog_path, selector=selector)

    if presenter.engine is None:
        _print_message(console, presenter)
        return 1

    console.print(
        "[bold cyan]Price Guesser[/bold cyan] "
        f"[dim]{presenter.engine.attempt_limit} tries per product, "
        "'q' quits[/dim]"
    )

    rounds = 0
    while True:
        if not _play_round(console, presenter):
            break
        if not presenter.game_over:
            # Round never started (empty catalog)
            _print_message(console, presenter)
            return 1
        rounds += 1
        again = _prompt(console, r"Play again? \[y/N] ")
        if again is None or again.lower() not in {"y", "yes"}:
            break

    logger.info("CLI session ended after %d completed round(s)", rounds)
    return 0
