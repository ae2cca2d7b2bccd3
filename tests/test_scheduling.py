"""Tests for the repeating task."""

from __future__ import annotations

import asyncio

import pytest

from manda.benchmarks.scheduling import RepeatingTask


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError, match="interval"):
        RepeatingTask(0, lambda: None)


@pytest.mark.asyncio
async def test_ticks_until_stopped():
    calls = []
    task = RepeatingTask(0.01, lambda: calls.append(1))
    task.start()
    assert task.running
    await asyncio.sleep(0.055)
    task.stop()
    count = len(calls)

    assert not task.running
    assert count >= 2
    await asyncio.sleep(0.03)
    assert len(calls) == count


@pytest.mark.asyncio
async def test_first_tick_after_one_interval():
    calls = []
    task = RepeatingTask(0.05, lambda: calls.append(1))
    task.start()
    await asyncio.sleep(0)
    assert calls == []
    task.stop()


@pytest.mark.asyncio
async def test_awaits_coroutine_callbacks():
    calls = []

    async def tick():
        calls.append(1)

    task = RepeatingTask(0.01, tick)
    task.start()
    await asyncio.sleep(0.035)
    task.stop()
    assert calls


@pytest.mark.asyncio
async def test_failing_tick_does_not_stop_schedule():
    def boom():
        raise RuntimeError("tick failed")

    task = RepeatingTask(0.01, boom)
    task.start()
    await asyncio.sleep(0.045)
    assert task.running
    assert task.ticks >= 2
    task.stop()


@pytest.mark.asyncio
async def test_start_is_idempotent():
    task = RepeatingTask(0.01, lambda: None)
    task.start()
    first = task._task
    task.start()
    assert task._task is first
    task.stop()
