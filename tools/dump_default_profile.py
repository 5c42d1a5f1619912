"""Dump the merged default sampler profile for inspection."""
from __future__ import annotations

import json

from bluenoise.config.loader import load_profile


def main() -> None:
    print(json.dumps(load_profile().model_dump(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
