"""Configuration types for the zep library."""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ZepConfig:
    """Configuration for a Zep instance.

    Attributes:
        period: Timer period in seconds. The callback runs at most once per
                period with the latest arguments. ``None``, zero or a
                negative value disables debouncing and every ``run()``
                executes the callback immediately.
        cancel_skips_run: When False, a tick that observes a pending
                          ``cancel()`` still executes the callback after
                          firing ``on_cancelled``. When True that tick
                          ends without executing.
    """

    period: float | None = None
    cancel_skips_run: bool = False

    def __post_init__(self) -> None:
        if self.period is None:
            return

        if isinstance(self.period, bool) or not isinstance(self.period, (int, float)):
            raise TypeError(f"period must be a number or None, got {type(self.period).__name__}")

        if math.isnan(self.period):
            raise ValueError("period must not be NaN")

    @property
    def immediate(self) -> bool:
        return self.period is None or self.period <= 0
