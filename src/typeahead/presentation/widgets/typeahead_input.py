"""
TypeaheadInput - Input field that drives a TypeaheadController.

Terminals only deliver key presses, so the widget maps them onto the
controller's two channels: Up/Down/Escape/Enter become key-down events and
every change of the field's value becomes a key-up event carrying the text.
"""

from textual.binding import Binding
from textual.widgets import Input

from typeahead.application import TypeaheadController
from typeahead.domain.events import Committed
from typeahead.domain.keys import Key
from typeahead.logger import get_logger

logger = get_logger("typeahead_input")


class TypeaheadInput(Input):
    """Input widget forwarding its key events to a typeahead controller."""

    BORDER_TITLE = "Search"

    BINDINGS = [
        Binding("up", "navigate_prev", "Previous suggestion", show=False),
        Binding("down", "navigate_next", "Next suggestion", show=False),
        Binding("escape", "dismiss_suggestions", "Hide suggestions", show=False),
    ]

    def __init__(self, controller: TypeaheadController, **kwargs):
        """
        Initialize the input field.

        Args:
            controller: Controller receiving this field's key events
        """
        self.controller = controller
        self._applying_completion = False  # Flag to keep our own writes out of the pipeline

        super().__init__(placeholder="Start typing to get suggestions", **kwargs)

        controller.subscribe(Committed, self._on_committed)

    def watch_value(self, value: str) -> None:
        """Forward user edits to the controller as key-up text changes."""
        if self._applying_completion:
            return
        self.controller.handle_key_up(Key.UNIDENTIFIED, value)

    def action_navigate_prev(self) -> None:
        self.controller.handle_key_down(Key.ARROW_UP)

    def action_navigate_next(self) -> None:
        self.controller.handle_key_down(Key.ARROW_DOWN)

    def action_dismiss_suggestions(self) -> None:
        self.controller.handle_key_down(Key.ESCAPE)

    async def action_submit(self) -> None:
        """Enter commits the highlighted suggestion, or submits the raw text."""
        if self.controller.handle_key_down(Key.ENTER):
            return
        await super().action_submit()

    def _on_committed(self, event: Committed) -> None:
        self._applying_completion = True
        try:
            self.value = event.value
            self.cursor_position = len(event.value)
        finally:
            self._applying_completion = False
        logger.debug(f"Applied committed suggestion {event.value!r} to the input")
