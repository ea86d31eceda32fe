"""Presentation layer - Textual adapter for the typeahead controller."""
