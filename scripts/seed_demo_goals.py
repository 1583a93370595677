#!/usr/bin/env python3
"""
Write a demo questlog save file with a few weeks of recorded events.

Goals created:
  - Simple:    Run a half marathon (1000 pts)
  - Eternal:   Read scriptures (100 pts per log)
  - Checklist: Attend the temple (50 pts each, 10 times, 500 bonus)
  - Negative:  Skip a workout (-75 per event)
  - Progress:  Run 100 miles (10 pts per mile, 1000 bonus)

Usage examples:
  - Default file from settings:
      python scripts/seed_demo_goals.py
  - Custom output and reproducible events:
      python scripts/seed_demo_goals.py --out demo.txt --seed 7 --weeks 12
  - Then play it:
      questlog play --file demo.txt
"""

from __future__ import annotations

import argparse
import random

from questlog.core.config import settings
from questlog.ledger import GoalLedger


DEMO_GOALS = [
    ("Simple", "Run a half marathon", "Finish 13.1 miles in one go", 1000),
    ("Eternal", "Read scriptures", "Any chapter counts", 100),
    ("Checklist", "Attend the temple", "Ten visits this season", 50, 10, 500),
    ("Negative", "Skip a workout", "Missed a planned session", 75),
    ("Progress", "Run 100 miles", "Cumulative miles | all runs", 10, 100, 1000),
]


def seed_week(ledger: GoalLedger, rng: random.Random) -> None:
    """Record one week of plausible events against the demo goals."""
    for _ in range(rng.randint(3, 6)):
        ledger.record_event(2)
    if rng.random() < 0.6:
        ledger.record_event(3)
    if rng.random() < 0.3:
        ledger.record_event(4)
    # Weekly mileage between 15 and 30
    ledger.record_event(5, units=rng.randint(15, 30))


def build_demo_ledger(weeks: int, seed: int | None = None) -> GoalLedger:
    rng = random.Random(seed)
    ledger = GoalLedger()
    for kind, name, description, *params in DEMO_GOALS:
        ledger.create_goal(kind, name, description, *params)
    for _ in range(weeks):
        seed_week(ledger, rng)
    # Race day closes out the block
    ledger.record_event(1)
    return ledger


def main() -> None:
    ap = argparse.ArgumentParser(description="Write a demo questlog save file")
    ap.add_argument("--out", default=settings.save_path, help=f"Output file (default: {settings.save_path})")
    ap.add_argument("--weeks", type=int, default=8, help="Weeks of events to simulate")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    args = ap.parse_args()

    ledger = build_demo_ledger(args.weeks, args.seed)
    ledger.save_file(args.out)

    p = ledger.profile
    print(f"Seed complete: {len(ledger)} goals, score {p.score} (level {p.level}) written to {args.out}.")


if __name__ == "__main__":
    main()
