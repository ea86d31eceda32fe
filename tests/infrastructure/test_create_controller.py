"""Tests for the controller wiring helpers."""

from unittest.mock import MagicMock

from typeahead.config import TypeaheadConfig
from typeahead.infrastructure import (
    StaticSuggestFetcher,
    YouTubeSuggestFetcher,
    create_controller,
    create_fetcher,
)


def test_create_fetcher_follows_the_provider_setting():
    assert isinstance(create_fetcher(TypeaheadConfig(provider="static")), StaticSuggestFetcher)
    assert isinstance(create_fetcher(TypeaheadConfig(provider="youtube")), YouTubeSuggestFetcher)


def test_create_controller_uses_the_configured_debounce():
    controller = create_controller(TypeaheadConfig(provider="static", debounce_ms=250))
    try:
        assert controller.pipeline.debounce_interval == 0.25
    finally:
        controller.close()


def test_controller_from_create_controller_releases_the_session():
    session = MagicMock()
    controller = create_controller(TypeaheadConfig(), fetcher=YouTubeSuggestFetcher(session=session))

    controller.close()

    session.close.assert_called_once()
