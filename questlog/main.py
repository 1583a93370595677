"""questlog entry point.

Usage examples:
  - Interactive goal tracker:
      questlog
      questlog play --file my_goals.txt
  - One-off activity summary:
      questlog activity running --minutes 30 --distance 3.0 --date 2022-11-03
      questlog activity swimming --minutes 40 --laps 64
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from typing import List, Optional

from pydantic import ValidationError

from questlog.cli.console import Console
from questlog.cli.menu import GoalMenu
from questlog.core.config import settings
from questlog.core.constants import LOG_LEVELS
from questlog.core.logging_setup import configure_logging
from questlog.core.time_utils import parse_day
from questlog.ledger import GoalLedger
from questlog.models.activity import Activity, ActivityKind, Cycling, Running, Swimming


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="questlog",
        description="Gamified goal tracker with levels, badges and a plain-text save file.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override QUESTLOG_LOG_LEVEL",
    )
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", help="Run the interactive goal menu (default).")
    play.add_argument("--file", default=None, help=f"Default save/load file (default: {settings.save_path})")

    act = sub.add_parser("activity", help="Print a distance/speed/pace summary for one session.")
    act.add_argument("kind", choices=[k.value for k in ActivityKind])
    act.add_argument("--minutes", type=int, required=True)
    act.add_argument("--date", default=None, help="Session day, e.g. 2022-11-03 (default: today)")
    act.add_argument("--distance", type=float, default=None, help="Miles (running)")
    act.add_argument("--speed", type=float, default=None, help="Average mph (cycling)")
    act.add_argument("--laps", type=int, default=None, help="50 m laps (swimming)")
    return parser


def build_activity(args: argparse.Namespace) -> Activity:
    day = parse_day(args.date) if args.date else date.today()
    kind = ActivityKind(args.kind)
    if kind is ActivityKind.running:
        if args.distance is None:
            raise ValueError("running needs --distance")
        return Running(date=day, minutes=args.minutes, distance_mi=args.distance)
    if kind is ActivityKind.cycling:
        if args.speed is None:
            raise ValueError("cycling needs --speed")
        return Cycling(date=day, minutes=args.minutes, speed_mph=args.speed)
    if args.laps is None:
        raise ValueError("swimming needs --laps")
    return Swimming(date=day, minutes=args.minutes, laps=args.laps)


def cmd_activity(args: argparse.Namespace) -> int:
    try:
        activity = build_activity(args)
    except (ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(activity.summary())
    return 0


def cmd_play(args: argparse.Namespace, console: Optional[Console] = None) -> int:
    console = console or Console.from_stdio(settings.output_encoding)
    GoalMenu(GoalLedger(), console, getattr(args, "file", None)).run()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "activity":
        return cmd_activity(args)
    return cmd_play(args)


if __name__ == "__main__":
    sys.exit(main())
