# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, json, sys

from .config.loader import DEFAULT_CONFIG_PATH, load_profile
from .errors import BlueNoiseError
from .io import save_points
from .logging import init_logging
from .metrics import summarize
from .sampling import Sampler


def _overrides(args) -> dict:
    sampler = {}
    if args.k is not None:
        sampler["rejection_limit"] = args.k
    if args.max_points is not None:
        sampler["max_points"] = args.max_points
    if args.seed is not None:
        sampler["seed"] = args.seed
    domain = {
        key: val
        for key, val in (("width", args.width), ("height", args.height), ("radius", args.radius))
        if val is not None
    }
    out: dict = {}
    if sampler:
        out["sampler"] = sampler
    if domain:
        out["domain"] = domain
    if args.log_level is not None:
        out["log_level"] = args.log_level
    return out


def cmd_sample(args):
    try:
        profile = load_profile(args.config, _overrides(args))
    except (TypeError, ValueError) as exc:
        raise SystemExit(f"invalid configuration: {exc}")
    init_logging(profile.log_level)

    d = profile.domain
    if d is None:
        raise SystemExit(
            f"Cannot infer domain: no 'domain' in {args.config} (relative paths resolve against "
            "the current directory); pass --width/--height/--radius or --config."
        )
    try:
        sampler = Sampler(d.width, d.height, d.radius, profile.sampler)
    except BlueNoiseError as exc:
        raise SystemExit(str(exc))

    pts = sampler.generate_all()
    summary = summarize(pts, d.width, d.height, d.radius)
    summary.update(
        width=d.width,
        height=d.height,
        radius=d.radius,
        seed=profile.sampler.seed,
        rejection_limit=profile.sampler.rejection_limit,
    )

    if args.out:
        save_points(args.out, pts, meta=summary)
    if args.plot:
        from .viz import save_plot

        save_plot(args.plot, pts, d.width, d.height, r=d.radius, show_disks=args.disks)
    if args.print:
        print(json.dumps({"summary": summary, "points": [list(p) for p in pts]}, ensure_ascii=False, allow_nan=False))
    return 0


def make_parser():
    p = argparse.ArgumentParser(prog="bluenoise")
    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("sample", help="Generate a Poisson-disk point set")
    ps.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="YAML profile, relative to the current directory (missing file = defaults)",
    )
    ps.add_argument("--width", type=float, default=None)
    ps.add_argument("--height", type=float, default=None)
    ps.add_argument("--radius", "-r", type=float, default=None, help="minimum distance between points")
    ps.add_argument("--k", type=int, default=None, help="candidates tried per active point")
    ps.add_argument("--max-points", dest="max_points", type=int, default=None)
    ps.add_argument("--seed", type=int, default=None)
    ps.add_argument("--out", default=None, help="output file (.json, .csv or .npz)")
    ps.add_argument("--plot", default=None, help="optional image path for a scatter plot")
    ps.add_argument("--disks", action="store_true", help="draw r/2 disks in the plot")
    ps.add_argument("--log-level", dest="log_level", choices=["none", "info", "debug"], default=None)
    ps.add_argument("--print", action="store_true", help="print JSON result to stdout")
    ps.set_defaults(func=cmd_sample)

    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    ns = parser.parse_args(argv)
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
