"""Goal variants and their per-kind behaviour.

A goal is one of five pydantic models discriminated by ``kind``. Behaviour
lives in dispatch tables keyed by ``GoalKind`` (record, status, fields,
parse) instead of methods on a class hierarchy; every table must cover every
kind, which is checked when this module is imported.
"""

from enum import Enum
from typing import Annotated, Callable, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from questlog.core.codec import escape, join_fields, split_fields
from questlog.core.errors import FormatError, UnknownGoalKind


class GoalKind(str, Enum):
    simple = "Simple"
    eternal = "Eternal"
    checklist = "Checklist"
    negative = "Negative"
    progress = "Progress"


class GoalBase(BaseModel):
    name: str
    description: str = ""
    points: int  # basePoints; per-unit points for Progress, negative for Negative


class SimpleGoal(GoalBase):
    kind: Literal[GoalKind.simple] = GoalKind.simple
    done: bool = False


class EternalGoal(GoalBase):
    kind: Literal[GoalKind.eternal] = GoalKind.eternal
    times_logged: int = 0


class ChecklistGoal(GoalBase):
    kind: Literal[GoalKind.checklist] = GoalKind.checklist
    target: int = 1
    current: int = 0
    bonus: int = 0
    completed: bool = False

    @field_validator("target", mode="before")
    @classmethod
    def _target_min(cls, v):
        return max(1, int(v))

    @field_validator("current", "bonus", mode="before")
    @classmethod
    def _not_negative(cls, v):
        return max(0, int(v))


class NegativeGoal(GoalBase):
    kind: Literal[GoalKind.negative] = GoalKind.negative
    times: int = 0

    # Penalties are entered as positive numbers but always stored negative
    @field_validator("points", mode="before")
    @classmethod
    def _as_penalty(cls, v):
        return -abs(int(v))


class ProgressGoal(GoalBase):
    kind: Literal[GoalKind.progress] = GoalKind.progress
    target: int = 1
    units_done: int = 0
    bonus: int = 0
    completed: bool = False

    @field_validator("target", mode="before")
    @classmethod
    def _target_min(cls, v):
        return max(1, int(v))

    @field_validator("points", "units_done", "bonus", mode="before")
    @classmethod
    def _not_negative(cls, v):
        return max(0, int(v))


Goal = Annotated[
    Union[SimpleGoal, EternalGoal, ChecklistGoal, NegativeGoal, ProgressGoal],
    Field(discriminator="kind"),
]

GOAL_MODELS: Dict[GoalKind, type] = {
    GoalKind.simple: SimpleGoal,
    GoalKind.eternal: EternalGoal,
    GoalKind.checklist: ChecklistGoal,
    GoalKind.negative: NegativeGoal,
    GoalKind.progress: ProgressGoal,
}


# ---------------------------------------------------------------------------
# record_event
# ---------------------------------------------------------------------------

def _record_simple(goal: SimpleGoal, units: Optional[int]) -> int:
    if goal.done:
        return 0
    goal.done = True
    return goal.points


def _record_eternal(goal: EternalGoal, units: Optional[int]) -> int:
    goal.times_logged += 1
    return goal.points


def _record_checklist(goal: ChecklistGoal, units: Optional[int]) -> int:
    if goal.completed:
        return 0
    goal.current += 1
    gained = goal.points
    if goal.current >= goal.target:
        goal.completed = True
        gained += goal.bonus
    return gained


def _record_negative(goal: NegativeGoal, units: Optional[int]) -> int:
    goal.times += 1
    return goal.points


def _record_progress(goal: ProgressGoal, units: Optional[int]) -> int:
    # Missing, non-integer and non-positive advances record nothing
    if not isinstance(units, int) or isinstance(units, bool) or units <= 0:
        return 0
    before = goal.units_done
    goal.units_done = min(goal.target, goal.units_done + units)
    gained = (goal.units_done - before) * goal.points
    if not goal.completed and goal.units_done >= goal.target:
        goal.completed = True
        gained += goal.bonus
    return gained


_RECORDERS: Dict[GoalKind, Callable] = {
    GoalKind.simple: _record_simple,
    GoalKind.eternal: _record_eternal,
    GoalKind.checklist: _record_checklist,
    GoalKind.negative: _record_negative,
    GoalKind.progress: _record_progress,
}


# ---------------------------------------------------------------------------
# status
# ---------------------------------------------------------------------------

def _box(flag: bool) -> str:
    return "[X]" if flag else "[ ]"


_STATUS: Dict[GoalKind, Callable] = {
    GoalKind.simple: lambda g: f"{_box(g.done)} {g.name} — {g.description} ({g.points} pts)",
    GoalKind.eternal: lambda g: (
        f"[∞] {g.name} — {g.description} (+{g.points} per log, total {g.times_logged})"
    ),
    GoalKind.checklist: lambda g: (
        f"{_box(g.completed)} {g.name} — {g.description} "
        f"({g.current}/{g.target}, +{g.points} each, bonus {g.bonus} on completion)"
    ),
    GoalKind.negative: lambda g: (
        f"[!] {g.name} — {g.description} ({g.times} times, {g.points} per event)"
    ),
    GoalKind.progress: lambda g: (
        f"{_box(g.completed)} {g.name} — {g.description} "
        f"({g.units_done}/{g.target} units, +{g.points}/unit, bonus {g.bonus})"
    ),
}


_COMPLETE: Dict[GoalKind, Callable] = {
    GoalKind.simple: lambda g: g.done,
    GoalKind.eternal: lambda g: False,
    GoalKind.checklist: lambda g: g.completed,
    GoalKind.negative: lambda g: False,
    GoalKind.progress: lambda g: g.completed,
}


# ---------------------------------------------------------------------------
# serialize / deserialize
# ---------------------------------------------------------------------------

def _flag(value: bool) -> str:
    return "1" if value else "0"


# Kind-specific trailing fields, in file order
_FIELDS: Dict[GoalKind, Callable] = {
    GoalKind.simple: lambda g: [g.points, _flag(g.done)],
    GoalKind.eternal: lambda g: [g.points, g.times_logged],
    GoalKind.checklist: lambda g: [g.points, g.target, g.current, g.bonus, _flag(g.completed)],
    GoalKind.negative: lambda g: [g.points, g.times],
    GoalKind.progress: lambda g: [g.points, g.target, g.units_done, g.bonus, _flag(g.completed)],
}


def _optional(parts: List[str], i: int, default: str) -> str:
    return parts[i] if len(parts) > i else default


# parts: 0=kind 1=name 2=description 3..=kind-specific
_PARSERS: Dict[GoalKind, Callable] = {
    GoalKind.simple: lambda name, desc, p: SimpleGoal(
        name=name, description=desc, points=int(p[3]), done=_optional(p, 4, "0") == "1",
    ),
    GoalKind.eternal: lambda name, desc, p: EternalGoal(
        name=name, description=desc, points=int(p[3]), times_logged=int(_optional(p, 4, "0")),
    ),
    GoalKind.checklist: lambda name, desc, p: ChecklistGoal(
        name=name,
        description=desc,
        points=int(p[3]),
        target=int(p[4]),
        current=int(p[5]),
        bonus=int(p[6]),
        completed=_optional(p, 7, "0") == "1",
    ),
    GoalKind.negative: lambda name, desc, p: NegativeGoal(
        name=name, description=desc, points=int(p[3]), times=int(_optional(p, 4, "0")),
    ),
    GoalKind.progress: lambda name, desc, p: ProgressGoal(
        name=name,
        description=desc,
        points=int(p[3]),
        target=int(p[4]),
        units_done=int(p[5]),
        bonus=int(p[6]),
        completed=_optional(p, 7, "0") == "1",
    ),
}


def _check_exhaustive(**tables: Dict[GoalKind, Callable]) -> None:
    for table_name, table in tables.items():
        missing = set(GoalKind) - set(table)
        if missing:
            raise TypeError(f"{table_name} has no entry for {sorted(k.value for k in missing)}")


_check_exhaustive(
    models=GOAL_MODELS,
    record=_RECORDERS,
    status=_STATUS,
    complete=_COMPLETE,
    fields=_FIELDS,
    parse=_PARSERS,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def record_event(goal: Goal, units: Optional[int] = None) -> int:
    """Apply one progress event and return the points it earned (or cost).

    ``units`` is only read by Progress goals.
    """
    return _RECORDERS[goal.kind](goal, units)


def status(goal: Goal) -> str:
    return _STATUS[goal.kind](goal)


def is_complete(goal: Goal) -> bool:
    return _COMPLETE[goal.kind](goal)


def serialize(goal: Goal) -> str:
    """Render a goal as one ``|``-separated save-file record."""
    head = [goal.kind.value, escape(goal.name), escape(goal.description)]
    return join_fields(head + list(_FIELDS[goal.kind](goal)))


def deserialize(fields: List[str]) -> Goal:
    """Build a goal from already-split record fields.

    Raises UnknownGoalKind when the first field is not a kind tag and
    FormatError when the kind-specific fields are missing or not integers.
    """
    if not fields:
        raise UnknownGoalKind("")
    try:
        kind = GoalKind(fields[0])
    except ValueError:
        raise UnknownGoalKind(fields[0]) from None
    if len(fields) < 3:
        raise FormatError(f"{kind.value} record is missing name/description")
    try:
        return _PARSERS[kind](fields[1], fields[2], fields)
    except (IndexError, ValueError) as e:
        raise FormatError(f"Malformed {kind.value} record: {e}") from e


def parse_line(line: str) -> Goal:
    return deserialize(split_fields(line))
