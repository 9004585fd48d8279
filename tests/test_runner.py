# tests/test_runner.py

"""Tests for the line-mode CLI runner."""

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from rich.console import Console

from src.cli.runner import run_cli_game
from src.services.selection import fixed_index


class TestRunCliGame(unittest.TestCase):
    """run_cli_game with scripted input."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.catalog = Path(self._tmp.name) / "products.json"
        self.catalog.write_text(
            json.dumps([
                {"id": 1, "name": "Olive Oil", "price": 12.5},
                {"id": 2, "name": "Coffee Mug", "price": 5},
            ]),
            encoding="utf-8",
        )
        self.output = io.StringIO()
        self.console = Console(file=self.output, width=100)

    def _run(self, answers: list[str], catalog: Path | None = None) -> int:
        with patch.object(self.console, "input", side_effect=answers):
            return run_cli_game(
                catalog_path=catalog or self.catalog,
                selector=fixed_index(0),
                console=self.console,
            )

    def test_win_then_stop(self) -> None:
        """A winning round followed by 'n' exits cleanly."""
        code = self._run(["10", "15", "12.50", "n"])
        self.assertEqual(code, 0)
        text = self.output.getvalue()
        self.assertIn("Olive Oil", text)
        self.assertIn("Higher", text)
        self.assertIn("Lower", text)
        self.assertIn("Correct! The price is €12.50. You won!", text)

    def test_lose(self) -> None:
        """Five misses end the round with the price revealed."""
        code = self._run(["1", "2", "3", "4", "6", "no"])
        self.assertEqual(code, 0)
        self.assertIn(
            "Game Over! The correct price was €12.50.",
            self.output.getvalue(),
        )

    def test_invalid_input_keeps_round_going(self) -> None:
        """Bad input prints guidance and asks again."""
        code = self._run(["abc", "12.5", "n"])
        self.assertEqual(code, 0)
        self.assertIn(
            "Please enter a valid price (€0.00 or higher)",
            self.output.getvalue(),
        )

    def test_quit_mid_round(self) -> None:
        """'q' leaves immediately."""
        self.assertEqual(self._run(["5", "q"]), 0)

    def test_end_of_input_at_guess_prompt(self) -> None:
        """Ctrl-D while guessing ends the session cleanly."""
        with patch.object(self.console, "input", side_effect=EOFError):
            code = run_cli_game(
                catalog_path=self.catalog,
                selector=fixed_index(0),
                console=self.console,
            )
        self.assertEqual(code, 0)

    def test_interrupt_mid_round(self) -> None:
        """Ctrl-C after a guess is treated as quitting."""
        self.assertEqual(self._run(["10", KeyboardInterrupt]), 0)  # type: ignore[list-item]
        self.assertIn("Higher", self.output.getvalue())

    def test_end_of_input_at_play_again(self) -> None:
        """Ctrl-D at the replay prompt exits after the finished round."""
        code = self._run(["12.5", EOFError])  # type: ignore[list-item]
        self.assertEqual(code, 0)
        self.assertIn("You won!", self.output.getvalue())

    def test_play_again(self) -> None:
        """Answering 'y' starts another round."""
        code = self._run(["12.5", "y", "12.5", "n"])
        self.assertEqual(code, 0)
        self.assertEqual(self.output.getvalue().count("You won!"), 2)

    def test_missing_catalog_fails(self) -> None:
        """An unreadable catalog returns exit code 1."""
        code = self._run([], catalog=Path(self._tmp.name) / "none.json")
        self.assertEqual(code, 1)
        self.assertIn("Failed to load products", self.output.getvalue())

    def test_empty_catalog_fails(self) -> None:
        empty = Path(self._tmp.name) / "empty.json"
        empty.write_text("[]", encoding="utf-8")
        self.assertEqual(self._run([], catalog=empty), 1)


if __name__ == "__main__":
    unittest.main()
