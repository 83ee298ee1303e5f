"""Poisson arrival process.

For a Poisson arrival process with rate λ (requests per unit time):
- The number of arrivals in a time window follows a Poisson distribution.
- The *inter-arrival times* are i.i.d. Exponential(λ).

We simulate this by accumulating exponential gaps onto the current point.
"""

from __future__ import annotations

from .sampling import ExponentialSampler, coerce_rate


class ArrivalProcess:
    """Stateful generator of Poisson arrival moments."""

    def __init__(self, lam: float, start: float = 0.0, *, sampler: ExponentialSampler | None = None) -> None:
        """
        Args:
            lam: λ, the arrival intensity. Taken by absolute value; 0 becomes 1.
            start: time origin of the process (absolute value is used).
            sampler: exponential sampler; a fresh one (register 0) if omitted.
        """
        self.rate = coerce_rate(lam, what="intensity of Poisson point process")
        self.current_point = abs(float(start))
        self.sampler = sampler if sampler is not None else ExponentialSampler()

    def next_point(self) -> float:
        """Advance to the next arrival and return its moment."""
        self.current_point += self.sampler.sample(self.rate)
        return self.current_point
