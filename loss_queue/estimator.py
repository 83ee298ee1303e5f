"""Running estimate of the output stream rate.

The estimator keeps an explicit event counter and the time span covered, and
derives the rate only when it is read:

    rate = count / (last_time - origin_time)

This is the same quantity as the incremental update
`rate = (rate * elapsed_old + 1) / elapsed_new`, without folding the count
into a float at every step.

The origin event itself is not counted: the span starts at it.
"""

from __future__ import annotations


class OutputRateEstimator:
    def __init__(self, first_moment: float) -> None:
        self.origin_time = abs(float(first_moment))
        self.last_time = self.origin_time
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def elapsed(self) -> float:
        return self.last_time - self.origin_time

    def update(self, moment: float) -> None:
        """Record one output event at `moment`.

        Moments earlier than the last recorded one are ignored.
        """
        moment = abs(float(moment))
        if moment < self.last_time:
            return
        self._count += 1
        self.last_time = moment

    def value(self) -> float:
        """Events per unit time; 0.0 while no time has elapsed since the origin."""
        elapsed = self.elapsed
        if elapsed <= 0:
            return 0.0
        return self._count / elapsed
