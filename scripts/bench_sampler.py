"""Time sampler construction and full runs on a few domain sizes."""
from __future__ import annotations

import argparse
import time

from bluenoise import Sampler


def _best_of(fn, repeat: int) -> float:
    best = float("inf")
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - t0)
    return best


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--repeat", type=int, default=3)
    ap.add_argument("--large", action="store_true", help="include 1000x1000 (~720k points)")
    args = ap.parse_args()

    sizes = [10, 100] + ([1000] if args.large else [])
    for n in sizes:
        t_init = _best_of(lambda: Sampler(n, n, 1.0, {"seed": 0}), args.repeat)
        counts = []

        def run():
            counts.append(len(Sampler(n, n, 1.0, {"seed": 0}).generate_all()))

        t_run = _best_of(run, args.repeat)
        print(f"{n}x{n}x1.0  init={t_init * 1e3:.3f} ms  run={t_run * 1e3:.1f} ms  points={counts[-1]}")


if __name__ == "__main__":
    main()
