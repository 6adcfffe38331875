"""
Property-based tests for the debounce timer.

These tests verify that bursts of scheduled calls collapse into a single
call carrying the last arguments, and that cancel() drops the pending call.
"""

import asyncio

import pytest
from hypothesis import given, settings, strategies as st

from tour_catalog.rate_limiting import Debouncer


WAIT_SECONDS = 0.05


@given(values=st.lists(st.text(max_size=8), min_size=1, max_size=10))
@settings(max_examples=25, deadline=None)
def test_burst_runs_only_last_call(values):
    """
    **Feature: tour-catalog, Property 14: Trailing debounce**

    For any burst of scheduled calls within the quiet period, exactly one
    call runs and it receives the arguments of the last schedule().
    """
    async def run_burst():
        debouncer = Debouncer(wait_seconds=WAIT_SECONDS)
        calls = []
        for value in values:
            debouncer.schedule(calls.append, value)
            assert debouncer.pending
        await asyncio.sleep(WAIT_SECONDS * 4)
        return debouncer, calls

    debouncer, calls = asyncio.run(run_burst())

    assert calls == [values[-1]]
    assert debouncer.fire_count == 1
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_call_waits_for_quiet_period():
    debouncer = Debouncer(wait_seconds=WAIT_SECONDS * 4)
    calls = []

    debouncer.schedule(calls.append, 'kayak')
    await asyncio.sleep(WAIT_SECONDS)

    assert calls == []
    assert debouncer.pending

    await asyncio.sleep(WAIT_SECONDS * 8)

    assert calls == ['kayak']


@pytest.mark.asyncio
async def test_spaced_calls_each_run():
    debouncer = Debouncer(wait_seconds=WAIT_SECONDS)
    calls = []

    debouncer.schedule(calls.append, 'first')
    await asyncio.sleep(WAIT_SECONDS * 4)
    debouncer.schedule(calls.append, 'second')
    await asyncio.sleep(WAIT_SECONDS * 4)

    assert calls == ['first', 'second']
    assert debouncer.fire_count == 2


@pytest.mark.asyncio
async def test_cancel_drops_pending_call():
    debouncer = Debouncer(wait_seconds=WAIT_SECONDS)
    calls = []

    debouncer.schedule(calls.append, 'kayak')
    debouncer.cancel()
    await asyncio.sleep(WAIT_SECONDS * 4)

    assert calls == []
    assert not debouncer.pending
    assert debouncer.fire_count == 0


def test_cancel_without_pending_call_is_noop():
    debouncer = Debouncer()

    debouncer.cancel()

    assert not debouncer.pending
    assert debouncer.wait_seconds == 0.3


def test_schedule_requires_running_loop():
    with pytest.raises(RuntimeError):
        Debouncer().schedule(print)
