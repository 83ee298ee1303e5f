from __future__ import annotations

# Simulation driver.
#
# Event loop over the arrival stream:
# - pull the next arrival moment
# - offer it to the device
# - on admission, feed the new release moment to the output-rate estimator
# - stop at the first arrival at or beyond the horizon
#
# Run states: INIT -> RUNNING -> DONE, or INIT -> EMPTY when the very first
# arrival already lies beyond the horizon (no estimator is built then).

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .arrival import ArrivalProcess
from .estimator import OutputRateEstimator
from .sampling import ExponentialSampler
from .service import ServiceDevice
from .uniform import UniformStream

TraceHandler = Callable[[str], None]


class RunState(str, Enum):
    INIT = "init"
    RUNNING = "running"
    DONE = "done"
    EMPTY = "empty"


@dataclass(frozen=True)
class SimulationParams:
    """Inputs of one run. `seed` is the initial register of the uniform stream."""

    lam: float = 2.0
    mu: float = 5.0
    horizon: float = 100.0
    seed: int = 0


@dataclass(frozen=True)
class SimulationResult:
    state: RunState
    params: SimulationParams
    rate: float | None
    arrivals: int = 0
    accepted: int = 0

    @property
    def rejected(self) -> int:
        return self.arrivals - self.accepted

    @property
    def ok(self) -> bool:
        return self.state is RunState.DONE


class SimulationDriver:
    """One simulation run. Every driver owns a fresh random stream."""

    def __init__(self, params: SimulationParams | None = None, *, trace: TraceHandler | None = None) -> None:
        self.params = params or SimulationParams()
        self.state = RunState.INIT
        self._trace = trace

        sampler = ExponentialSampler(UniformStream(self.params.seed))
        self.arrivals = ArrivalProcess(self.params.lam, 0.0, sampler=sampler)
        self.device = ServiceDevice(self.params.mu, sampler=sampler)
        self.estimator: OutputRateEstimator | None = None

        self._offered = 0
        self._accepted = 0

    def _emit(self, line: str) -> None:
        if self._trace is not None:
            self._trace(f"[driver] {line}")

    def _next_arrival(self) -> float:
        moment = self.arrivals.next_point()
        self._emit(f"moment: {moment!r}")
        return moment

    def _offer(self, moment: float) -> bool:
        self._offered += 1
        if not self.device.proceed_request(moment):
            return False
        self._accepted += 1
        self._emit(f"request accepted, release moment: {self.device.release_moment()!r}")
        return True

    def run(self) -> SimulationResult:
        if self.state is not RunState.INIT:
            raise RuntimeError(f"driver already ran (state={self.state.value})")

        horizon = self.params.horizon
        moment = self._next_arrival()
        if moment >= horizon:
            self.state = RunState.EMPTY
            return self._result(rate=None)

        # The device starts idle at 0, so the first request is always admitted.
        self._offer(moment)
        self.estimator = OutputRateEstimator(self.device.release_moment())
        self.state = RunState.RUNNING

        moment = self._next_arrival()
        while moment < horizon:
            if self._offer(moment):
                self.estimator.update(self.device.release_moment())
            moment = self._next_arrival()

        self.state = RunState.DONE
        return self._result(rate=self.estimator.value())

    def _result(self, *, rate: float | None) -> SimulationResult:
        return SimulationResult(
            state=self.state,
            params=self.params,
            rate=rate,
            arrivals=self._offered,
            accepted=self._accepted,
        )


def run_simulation(params: SimulationParams | None = None, *, trace: TraceHandler | None = None) -> SimulationResult:
    return SimulationDriver(params, trace=trace).run()


def format_report(result: SimulationResult) -> str:
    """One-line summary of a finished run."""
    p = result.params
    head = f"Simulated loss queue with lambda = {p.lam:g}, mu = {p.mu:g}, T = {p.horizon:g}"
    if result.rate is None:
        return f"{head}: no arrivals before the horizon"
    return (
        f"{head}: output stream rate = {result.rate:.6g} "
        f"(arrivals={result.arrivals}, accepted={result.accepted}, lost={result.rejected})"
    )
