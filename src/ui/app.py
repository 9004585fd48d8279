# src/ui/app.py

"""Terminal UI for the price guessing game."""

import logging
import webbrowser
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Input, Static

from src.config.settings import Settings
from src.services.selection import Selector, uniform_random
from src.ui.presenter import GamePresenter, is_url

logger = logging.getLogger("price_guesser.ui")

_ROW_STYLES = ("incorrect", "correct")
_FEEDBACK_STYLES = ("start", "higher", "lower", "correct")
_MESSAGE_TYPES = ("win", "lose", "error")


class PriceGuesserApp(App[object]):
    """Guess the product's price in five tries."""

    CSS_PATH = "styles.css"
    TITLE = "Price Guesser"

    BINDINGS = [
        Binding("ctrl+n", "new_game", "New Game"),
        Binding("ctrl+o", "open_image", "Open Image"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        catalog_path: Path | None = None,
        selector: Selector = uniform_random,
    ) -> None:
        super().__init__()
        self.presenter = GamePresenter.from_catalog(
            catalog_path, selector=selector
        )

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        rows = [
            Horizontal(
                Static(Settings.PRICE_PLACEHOLDER, id=f"price_{i}",
                       classes="guess-price"),
                Static("", id=f"feedback_{i}", classes="feedback-text"),
                id=f"row_{i}",
                classes="guess-row",
            )
            for i in range(len(self.presenter.rows))
        ]

        yield Header()
        yield Container(
            Static("", id="product_description"),
            Static(Settings.IMAGE_PLACEHOLDER, id="product_image"),
            Static("", id="attempts"),
            Vertical(*rows, id="guess_rows"),
            Horizontal(
                Input(
                    placeholder=Settings.INPUT_PLACEHOLDER,
                    id="price_input",
                ),
                Button("Guess", variant="primary", id="submit_btn"),
                id="guess_bar",
            ),
            Static("", id="game_message"),
            Button("New Game", variant="success", id="new_game_btn"),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Start the first round once the widgets exist."""
        self.presenter.new_game()
        self.refresh_board()
        self.query_one("#price_input", Input).focus()

    # ── Event wiring ────────────────────────────────────

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        if event.button.id == "submit_btn":
            self.submit_guess()
        elif event.button.id == "new_game_btn":
            self.action_new_game()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in the price input."""
        if event.input.id == "price_input":
            self.submit_guess()

    def submit_guess(self) -> None:
        """Send the typed price to the presenter and redraw."""
        price_input = self.query_one("#price_input", Input)
        result = self.presenter.submit(price_input.value)
        if result is not None:
            price_input.value = ""
        self.refresh_board()
        if self.presenter.game_over:
            self.query_one("#new_game_btn", Button).focus()
        else:
            price_input.focus()

    def action_new_game(self) -> None:
        """Discard the current round and start another."""
        self.presenter.new_game()
        price_input = self.query_one("#price_input", Input)
        price_input.value = ""
        self.refresh_board()
        price_input.focus()

    def action_open_image(self) -> None:
        """Open the product image in the default browser."""
        ref = self.presenter.image_ref
        if not is_url(ref):
            self.notify(Settings.IMAGE_PLACEHOLDER, severity="warning")
            return
        try:
            webbrowser.open(ref)
        except webbrowser.Error:
            logger.error("Failed to open image %s", ref, exc_info=True)
            self.notify("Could not open a browser", severity="error")

    # ── Rendering ───────────────────────────────────────

    def refresh_board(self) -> None:
        """Copy presenter state onto the widgets."""
        presenter = self.presenter

        self.query_one("#product_description", Static).update(
            Text(presenter.product_label)
        )
        self.query_one("#product_image", Static).update(
            Text(presenter.image_label)
        )
        self.query_one("#attempts", Static).update(
            presenter.attempts_label
        )

        for i, row in enumerate(presenter.rows):
            row_widget = self.query_one(f"#row_{i}", Horizontal)
            row_widget.remove_class(*_ROW_STYLES)
            if row.row_style:
                row_widget.add_class(row.row_style)

            feedback = self.query_one(f"#feedback_{i}", Static)
            feedback.update(Text(row.feedback_text))
            feedback.remove_class(*_FEEDBACK_STYLES)
            if row.feedback_style:
                feedback.add_class(row.feedback_style)

            self.query_one(f"#price_{i}", Static).update(row.price_text)

        message = self.query_one("#game_message", Static)
        message.update(Text(presenter.message))
        message.remove_class(*_MESSAGE_TYPES)
        if presenter.message_type:
            message.add_class(presenter.message_type)
        message.display = bool(presenter.message)

        self.query_one("#price_input", Input).disabled = (
            not presenter.input_enabled
        )
        self.query_one("#submit_btn", Button).disabled = (
            not presenter.input_enabled
        )
        self.query_one("#new_game_btn", Button).display = (
            presenter.game_over
        )
