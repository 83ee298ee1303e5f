from __future__ import annotations

# Single-entrypoint runner.
#
#     python -m loss_queue.app [--lambda L] [--mu M] [--horizon T] [--seed S] [--trace]
#
# With no arguments the classic experiment runs: lambda = 2, mu = 5, T = 100,
# starting from register 0. The report goes to stdout, diagnostics and the
# optional event trace go to stderr.
#
# Exit status: 0 when the run completes, 1 when no arrival falls inside the
# horizon.

import argparse
import math
import sys

from .driver import SimulationParams, format_report, run_simulation
from .errors import Diagnostic, warn


def _trace_to_stderr(line: str) -> None:
    print(line, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    defaults = SimulationParams()
    parser = argparse.ArgumentParser(description="Single-server loss queue simulator - main entrypoint")
    parser.add_argument("--lambda", dest="lam", type=float, default=defaults.lam, help="arrival intensity λ")
    parser.add_argument("--mu", type=float, default=defaults.mu, help="service intensity μ")
    parser.add_argument("--horizon", type=float, default=defaults.horizon, help="simulated time bound T")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="initial register of the random stream")
    parser.add_argument("--trace", action="store_true", help="write every arrival/admission to stderr")
    args = parser.parse_args(argv)

    if not math.isfinite(args.horizon) or args.horizon < 0:
        parser.error("--horizon must be a finite non-negative number")
    for flag, value in (("--lambda", args.lam), ("--mu", args.mu)):
        if not math.isfinite(value):
            parser.error(f"{flag} must be finite")

    params = SimulationParams(lam=args.lam, mu=args.mu, horizon=args.horizon, seed=args.seed)
    result = run_simulation(params, trace=_trace_to_stderr if args.trace else None)

    if not result.ok:
        warn(Diagnostic("empty_run", f"first arrival is beyond the horizon T = {params.horizon:g}"))
        return 1

    print(format_report(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
