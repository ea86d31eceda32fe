"""Tests for the offline suggestion provider and the provider factory."""

import pytest

from typeahead.config import TypeaheadConfig
from typeahead.infrastructure import create_fetcher
from typeahead.infrastructure.suggest import StaticSuggestFetcher, YouTubeSuggestFetcher


@pytest.mark.asyncio
async def test_prefix_matches_come_before_substring_matches():
    fetcher = StaticSuggestFetcher(["concat", "cats", "Category", "dogs"])
    assert await fetcher.fetch("cat") == ["cats", "Category", "concat"]


@pytest.mark.asyncio
async def test_matching_is_case_insensitive_and_trimmed():
    fetcher = StaticSuggestFetcher(["Python asyncio"])
    assert await fetcher.fetch("  PYTHON ") == ["Python asyncio"]


@pytest.mark.asyncio
async def test_results_are_limited():
    fetcher = StaticSuggestFetcher([f"cat {i}" for i in range(20)], max_results=3)
    assert await fetcher.fetch("cat") == ["cat 0", "cat 1", "cat 2"]


@pytest.mark.asyncio
async def test_no_match_returns_empty_list():
    fetcher = StaticSuggestFetcher(["dogs"])
    assert await fetcher.fetch("zebra") == []


@pytest.mark.asyncio
async def test_latency_is_applied():
    fetcher = StaticSuggestFetcher(["cats"], latency=0.01)
    assert await fetcher.fetch("c") == ["cats"]


def test_create_fetcher_follows_provider_setting():
    assert isinstance(create_fetcher(TypeaheadConfig(provider="static")), StaticSuggestFetcher)
    assert isinstance(create_fetcher(TypeaheadConfig(provider="youtube", max_results=5)), YouTubeSuggestFetcher)
