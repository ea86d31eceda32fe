"""Application layer - the controller and its two stateful components."""

from typeahead.application.controller import TypeaheadController
from typeahead.application.query_pipeline import QueryPipeline
from typeahead.application.selection import SelectionController

__all__ = ["TypeaheadController", "QueryPipeline", "SelectionController"]
