"""Pilot tests for the Textual adapter."""

import pytest

from typeahead.config import TypeaheadConfig
from typeahead.infrastructure import StaticSuggestFetcher, create_controller
from typeahead.presentation.tui import TypeaheadApp
from typeahead.presentation.widgets import SuggestionsView, TypeaheadInput

VOCABULARY = ["cats", "catsup", "category", "dogs"]


def make_app() -> TypeaheadApp:
    controller = create_controller(
        TypeaheadConfig(debounce_ms=10, provider="static"),
        fetcher=StaticSuggestFetcher(VOCABULARY),
    )
    return TypeaheadApp(controller)


async def type_text(pilot, text: str) -> None:
    await pilot.press(*text)
    await pilot.pause(0.1)


@pytest.mark.asyncio
async def test_typing_shows_suggestions():
    app = make_app()

    async with app.run_test() as pilot:
        await type_text(pilot, "cat")

        view = app.query_one(SuggestionsView)
        assert app.controller.state.visible
        assert app.controller.state.results == ("cats", "catsup", "category")
        assert view.display
        assert view.option_count == 3
        assert view.highlighted == 0


@pytest.mark.asyncio
async def test_arrows_move_the_highlight():
    app = make_app()

    async with app.run_test() as pilot:
        await type_text(pilot, "cat")
        await pilot.press("down", "down")
        await pilot.pause()

        assert app.controller.state.active_index == 2
        assert app.query_one(SuggestionsView).highlighted == 2

        await pilot.press("up")
        await pilot.pause()
        assert app.controller.state.active_index == 1


@pytest.mark.asyncio
async def test_enter_commits_into_the_input_without_requerying():
    app = make_app()

    async with app.run_test() as pilot:
        await type_text(pilot, "cat")
        await pilot.press("down", "enter")
        await pilot.pause(0.1)

        input_widget = app.query_one(TypeaheadInput)
        assert input_widget.value == "catsup"
        assert app.controller.state.committed_value == "catsup"
        assert app.controller.state.visible is False
        assert app.query_one(SuggestionsView).display is False
        assert app.controller.pipeline.last_query == "cat"


@pytest.mark.asyncio
async def test_escape_hides_suggestions():
    app = make_app()

    async with app.run_test() as pilot:
        await type_text(pilot, "cat")
        await pilot.press("escape")
        await pilot.pause()

        assert app.controller.state.visible is False
        assert app.query_one(SuggestionsView).display is False

