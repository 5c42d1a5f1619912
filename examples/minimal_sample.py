"""Minimal example: sample a 100x100 square and print a summary."""

from bluenoise import Sampler
from bluenoise.logging import init_logging
from bluenoise.metrics import summarize


def main() -> None:
    init_logging("info")
    sampler = Sampler(100.0, 100.0, 10.0, {"seed": 42})
    pts = sampler.generate_all()
    print("[minimal_sample]", summarize(pts, 100.0, 100.0, 10.0))


if __name__ == "__main__":
    main()
