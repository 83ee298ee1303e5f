from __future__ import annotations

# Exponential sampling.
#
# Inverse transform on top of the uniform stream:
#   x = -ln(u) / rate,  u ~ U(0, 1]
#
# Rates are taken by absolute value; a zero rate is not fatal: it is replaced
# by 1.0 and a warning is written to stderr. A uniform draw of exactly 0 has
# no logarithm, so it is discarded and the stream is drawn again.

import math

from .errors import Diagnostic, warn
from .uniform import UniformStream


def coerce_rate(value: float, *, what: str = "rate") -> float:
    """Return |value|, or 1.0 (with a warning) when it is zero.

    Raises:
        ValueError: if the value is NaN or infinite.
    """
    rate = abs(float(value))
    if not math.isfinite(rate):
        raise ValueError(f"{what} must be finite, got {value!r}")
    if rate == 0:
        warn(Diagnostic("zero_rate", f"the {what} equals 0, it will be set to 1"))
        rate = 1.0
    return rate


class ExponentialSampler:
    """Exponential durations drawn from one `UniformStream`."""

    def __init__(self, stream: UniformStream | None = None) -> None:
        self.stream = stream if stream is not None else UniformStream()

    def sample(self, rate: float) -> float:
        rate = coerce_rate(rate, what="parameter of exponential distribution")
        u = self.stream.next()
        while u == 0.0:
            u = self.stream.next()
        return -math.log(u) / rate
