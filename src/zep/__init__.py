"""Zep — debounce a callback onto a recurring timer.

Repeated ``run()`` calls within one period collapse into a single callback
execution using the latest arguments, with lifecycle hooks for
before/after each run, completion, cancellation, abort and errors.

Basic usage (debounced runs need a running event loop):

    import asyncio

    from zep import Zep

    async def main():
        zep = Zep(lambda value: print(value), 0.2)
        zep.on_completed(lambda z: z.write_stats())

        zep.run(1)
        zep.run(2)  # the timer prints 2
        await asyncio.sleep(0.5)

Decorator usage:

    from zep import debounce

    @debounce(period=0.2)
    def handle(event: str) -> None:
        ...
"""

from zep.config import ZepConfig
from zep.core import Zep, ZepStats
from zep.decorator import debounce
from zep.timer import RecurringTimer

__all__ = [
    "RecurringTimer",
    "Zep",
    "ZepConfig",
    "ZepStats",
    "debounce",
]

__version__ = "0.1.0"
