"""Textual demo application."""

from typeahead.presentation.tui.typeahead_app import TypeaheadApp

__all__ = ["TypeaheadApp"]
