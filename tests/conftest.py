"""Shared fixtures for zep tests."""

import asyncio

import pytest


class Recorder:
    """Callback that records the arguments of every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))


async def _simulate(zep, iterations, interval, *args):
    """Call ``zep.run(*args)`` ``iterations`` times, ``interval`` seconds apart."""
    for _ in range(iterations):
        await asyncio.sleep(interval)
        zep.run(*args)


@pytest.fixture
def recorder():
    return Recorder()


class Completion:
    """``on_completed`` handler that sets an event once the timer shuts down."""

    def __init__(self):
        self.event = asyncio.Event()
        self.count = 0

    def __call__(self, _zep):
        self.count += 1
        self.event.set()

    async def wait(self, timeout=2.0):
        await asyncio.wait_for(self.event.wait(), timeout=timeout)


@pytest.fixture
def completion():
    return Completion()


@pytest.fixture
def simulate():
    return _simulate
