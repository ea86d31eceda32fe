"""Textual widgets bound to a TypeaheadController."""

from typeahead.presentation.widgets.suggestions_view import SuggestionsView
from typeahead.presentation.widgets.typeahead_input import TypeaheadInput

__all__ = ["SuggestionsView", "TypeaheadInput"]
