"""Tests for AsyncioScheduler."""

import asyncio

import pytest

from typeahead.infrastructure.scheduler import AsyncioScheduler


@pytest.mark.asyncio
async def test_callback_runs_after_delay():
    fired = asyncio.Event()
    AsyncioScheduler().call_later(0.01, fired.set)

    await asyncio.wait_for(fired.wait(), timeout=1.0)


@pytest.mark.asyncio
async def test_cancelled_callback_never_runs():
    calls: list[int] = []
    handle = AsyncioScheduler().call_later(0.01, lambda: calls.append(1))
    handle.cancel()
    handle.cancel()

    await asyncio.sleep(0.05)
    assert calls == []


@pytest.mark.asyncio
async def test_real_scheduler_debounces_end_to_end():
    from typeahead.application.query_pipeline import QueryPipeline
    from typeahead.infrastructure.suggest import StaticSuggestFetcher

    results = []
    done = asyncio.Event()

    def on_results(result):
        results.append(result)
        done.set()

    pipeline = QueryPipeline(
        StaticSuggestFetcher(["cats", "catsup", "category"]),
        on_results=on_results,
        scheduler=AsyncioScheduler(),
        debounce_interval=0.02,
    )
    for text in ["c", "ca", "cat"]:
        pipeline.submit(text)

    await asyncio.wait_for(done.wait(), timeout=1.0)
    pipeline.close()

    assert [result.query for result in results] == ["cat"]
    assert results[0].suggestions == ("cats", "catsup", "category")
