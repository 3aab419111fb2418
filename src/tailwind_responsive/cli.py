"""Command line access to the breakpoint resolver.

Examples:
  tailwind-responsive breakpoints
  tailwind-responsive classify 320 640 1920 --json
  tailwind-responsive resolve 900 --initial 1 --sm 2 --lg 4
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import List, Optional, Sequence

from . import settings
from .responsive import list_breakpoints, classify, resolve

_TIERS = ("sm", "md", "lg", "xl", "xxl")


def _finite_width(text: str) -> float:
    try:
        width = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {text!r}") from None
    if not math.isfinite(width):
        raise argparse.ArgumentTypeError(f"width must be finite: {text!r}")
    return width


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tailwind-responsive", description="Tailwind-style breakpoint resolver"
    )
    p.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    p.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=settings.LOG_LEVELS,
        type=str.upper,
    )
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("breakpoints", help="List breakpoint names and thresholds")

    cp = sub.add_parser("classify", help="Print the breakpoint for each width")
    cp.add_argument("widths", nargs="+", type=_finite_width, metavar="WIDTH")

    rp = sub.add_parser("resolve", help="Select a value for WIDTH")
    rp.add_argument("width", type=_finite_width)
    rp.add_argument("--initial", required=True, help="Fallback value for the smallest screens")
    for tier in _TIERS:
        rp.add_argument(f"--{tier}", default=None)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "breakpoints":
        rows = [{"name": bp.name, "min_width": bp.min_width} for bp in list_breakpoints()]
        if args.json:
            print(json.dumps(rows))
        else:
            for row in rows:
                print(f"{row['name']}\t{row['min_width']:g}")
    elif args.command == "classify":
        results: List[dict] = [{"width": w, "breakpoint": classify(w)} for w in args.widths]
        if args.json:
            print(json.dumps(results))
        else:
            for r in results:
                print(f"{r['width']:g}\t{r['breakpoint']}")
    else:
        tiers = {tier: getattr(args, tier) for tier in _TIERS}
        value = resolve(args.width, args.initial, **tiers)
        if args.json:
            print(json.dumps({"width": args.width, "breakpoint": classify(args.width), "value": value}))
        else:
            print(value)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
