"""Pull samples lazily and stop early."""

from itertools import islice

from bluenoise import Sampler


def main() -> None:
    sampler = Sampler(50.0, 50.0, 2.0, {"seed": 10, "rejection_limit": 10})
    for p in islice(sampler, 10):
        print(f"{p.x:.3f}, {p.y:.3f}")
    print("[incremental_sample] still active:", sampler.active_count)


if __name__ == "__main__":
    main()
