"""
TypeaheadApp - Textual demo application for the typeahead controller.
"""

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, RichLog

from typeahead.application import TypeaheadController
from typeahead.domain.events import Committed, FetchFailed
from typeahead.logger import get_logger
from typeahead.presentation.widgets import SuggestionsView, TypeaheadInput

logger = get_logger("typeahead_tui")


class TypeaheadApp(App):
    """
    Search field with live suggestions.

    Layout:
    ┌──────────────────────────────┐
    │           Header             │
    ├──────────────────────────────┤
    │  Search input                │
    │  Suggestions (when visible)  │
    ├──────────────────────────────┤
    │  Committed values log        │
    ├──────────────────────────────┤
    │           Footer             │
    └──────────────────────────────┘
    """

    TITLE = "Typeahead"
    SUB_TITLE = "Type to search, arrows to move, Enter to pick, Esc to hide"

    CSS = """
    #search {
        height: auto;
    }
    #suggestions {
        max-height: 12;
        border: round $accent;
    }
    #committed {
        border: round $secondary;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, controller: TypeaheadController):
        super().__init__()
        self.controller = controller

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="search"):
            yield TypeaheadInput(self.controller, id="query")
            yield SuggestionsView(self.controller, id="suggestions")
        yield RichLog(id="committed", markup=True, wrap=True)
        yield Footer()

    def on_mount(self) -> None:
        self.controller.subscribe(Committed, self._on_committed)
        self.controller.subscribe(FetchFailed, self._on_fetch_failed)
        self.query_one(TypeaheadInput).focus()
        logger.info("Typeahead app mounted")

    def on_unmount(self) -> None:
        self.controller.close()

    def on_click(self, event: events.Click) -> None:
        """Clicking outside the search area hides the suggestions."""
        widget = getattr(event, "widget", None)
        if isinstance(widget, (TypeaheadInput, SuggestionsView)):
            return
        self.controller.dismiss()

    def on_input_submitted(self, event: TypeaheadInput.Submitted) -> None:
        self._log_line("Submitted", event.value, "cyan")

    def _on_committed(self, event: Committed) -> None:
        self._log_line("Picked", event.value, "green")

    def _on_fetch_failed(self, event: FetchFailed) -> None:
        self._log_line("Failed", f"{event.query} ({event.error})", "red")

    def _log_line(self, label: str, value: str, style: str) -> None:
        line = Text()
        line.append(f"{label}: ", style=f"bold {style}")
        line.append(value)
        self.query_one("#committed", RichLog).write(line)
