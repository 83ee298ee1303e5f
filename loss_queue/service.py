from __future__ import annotations

# Single-server device with no waiting room.
#
# The device only remembers when it becomes free again (`release_time`):
# - a request arriving at or after that moment is admitted and occupies the
#   server for an Exponential(mu) duration starting at its arrival
# - a request arriving earlier is lost; the device state does not change

from .sampling import ExponentialSampler, coerce_rate


class ServiceDevice:
    """Admission control for a single-server loss system."""

    def __init__(self, mu: float, *, sampler: ExponentialSampler | None = None) -> None:
        self.rate = coerce_rate(mu, what="intensity of device")
        self.release_time = 0.0
        self.sampler = sampler if sampler is not None else ExponentialSampler()

    def is_busy(self, moment: float) -> bool:
        return moment < self.release_time

    def proceed_request(self, arrival_moment: float) -> bool:
        """Offer a request arriving at `arrival_moment`.

        Returns:
            True if the request was admitted (the release time moves forward),
            False if it was lost.
        """
        if self.is_busy(arrival_moment):
            return False
        self.release_time = arrival_moment + self.sampler.sample(self.rate)
        return True

    def release_moment(self) -> float:
        return self.release_time
