"""
SuggestionsView - renders the controller's suggestion list.
"""

from rich.text import Text
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from typeahead.application import TypeaheadController
from typeahead.domain.events import ActiveIndexChanged, ResultsChanged, VisibilityChanged
from typeahead.logger import get_logger

logger = get_logger("suggestions_view")


class SuggestionsView(OptionList, can_focus=False):
    """
    Dropdown of suggestions.

    Never takes focus, so typing stays in the input; clicking a row commits
    that suggestion.
    """

    def __init__(self, controller: TypeaheadController, **kwargs):
        super().__init__(**kwargs)
        self.controller = controller
        self.display = False

        controller.subscribe(ResultsChanged, self._on_results_changed)
        controller.subscribe(ActiveIndexChanged, self._on_active_index_changed)
        controller.subscribe(VisibilityChanged, self._on_visibility_changed)

    def _on_results_changed(self, event: ResultsChanged) -> None:
        self.clear_options()
        if event.results:
            self.add_options([Option(Text(result)) for result in event.results])
        else:
            self.add_option(Option(Text("No suggestions", style="dim italic"), disabled=True))
        logger.debug(f"Rendering {len(event.results)} suggestion(s) for {event.query!r}")

    def _on_active_index_changed(self, event: ActiveIndexChanged) -> None:
        self.highlighted = event.index

    def _on_visibility_changed(self, event: VisibilityChanged) -> None:
        self.display = event.visible

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        self.controller.select(event.option_index)
