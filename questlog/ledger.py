"""The goal ledger: an ordered list of goals plus the player profile.

Goals are addressed by their 1-based position, which is also the order they
are listed and saved in.
"""

import io
import logging
from typing import Iterator, List, NamedTuple, Optional, TextIO, Union

from pydantic import ValidationError

from questlog.core.codec import LineReader
from questlog.core.constants import CHECKLIST_BADGE, GOALS_MARKER, PROFILE_MARKER, SIMPLE_BADGE
from questlog.core.errors import FormatError, InvalidGoal, OutOfRange, UnknownGoalKind
from questlog.models import goal as goals
from questlog.models.goal import Goal, GoalKind
from questlog.models.profile import PlayerProfile
from questlog.schemas.goal import GoalCreate, resolve_kind


logger = logging.getLogger(__name__)

# Kinds that award a badge on the event that completes them
_BADGES = {
    GoalKind.simple: SIMPLE_BADGE,
    GoalKind.checklist: CHECKLIST_BADGE,
}


class GoalListing(NamedTuple):
    index: int
    status: str
    kind: GoalKind


class EventOutcome(NamedTuple):
    points: int
    score: int
    badge: Optional[str] = None


class GoalLedger:
    def __init__(self, profile: Optional[PlayerProfile] = None):
        self._goals: List[Goal] = []
        self.profile = profile or PlayerProfile()

    def __len__(self) -> int:
        return len(self._goals)

    @property
    def is_empty(self) -> bool:
        return not self._goals

    @property
    def goals(self) -> List[Goal]:
        return list(self._goals)

    def get(self, index: int) -> Goal:
        if not 1 <= index <= len(self._goals):
            raise OutOfRange(index, len(self._goals))
        return self._goals[index - 1]

    def create_goal(
        self,
        kind: Union[str, GoalKind],
        name: str,
        description: str = "",
        *params: int,
    ) -> Goal:
        """Validate and append a new goal.

        Raises UnknownGoalKind for an unrecognised kind and InvalidGoal for
        bad parameters; the ledger is unchanged in both cases.
        """
        resolved = resolve_kind(kind)
        try:
            request = GoalCreate(kind=resolved, name=name, description=description, params=list(params))
            goal = request.build()
        except ValidationError as e:
            raise InvalidGoal(str(e)) from e
        self._goals.append(goal)
        logger.info("Created %s goal %r", resolved.value, name)
        return goal

    def list_goals(self) -> Iterator[GoalListing]:
        for i, g in enumerate(self._goals, start=1):
            yield GoalListing(i, goals.status(g), g.kind)

    def record_event(self, index: int, units: Optional[int] = None) -> EventOutcome:
        """Record progress on goal ``index`` and apply it to the profile.

        ``units`` is the advance for Progress goals and ignored otherwise.
        """
        goal = self.get(index)
        was_complete = goals.is_complete(goal)
        points = goals.record_event(goal, units)
        score = self.profile.add_points(points)

        badge = None
        template = _BADGES.get(goal.kind)
        if template and not was_complete and goals.is_complete(goal):
            label = template.format(name=goal.name)
            if self.profile.award_badge(label):
                badge = label
                logger.info("Badge awarded: %s", label)

        logger.debug("Recorded event on goal %d (%s): %+d points", index, goal.name, points)
        return EventOutcome(points=points, score=score, badge=badge)

    # -- persistence ------------------------------------------------------

    def save(self, stream: TextIO) -> None:
        stream.write(PROFILE_MARKER + "\n")
        stream.write(self.profile.serialize() + "\n")
        stream.write(GOALS_MARKER + "\n")
        # One serialized line per goal
        for g in self._goals:
            stream.write(goals.serialize(g) + "\n")

    def load(self, stream: TextIO) -> int:
        """Replace the goals with the ones in ``stream`` and merge the profile.

        The stream is read in full first, so a read or decode error leaves
        the ledger untouched. Goals are cleared before parsing, so a
        FormatError leaves the ledger with no goals and an untouched profile.
        Returns the number of goals loaded.
        """
        text = stream.read()
        self._goals.clear()
        reader = LineReader(io.StringIO(text))

        if reader.readline() != PROFILE_MARKER:
            raise FormatError(f"Invalid format (missing {PROFILE_MARKER})")
        loaded_profile = PlayerProfile.deserialize(reader)

        if reader.readline() != GOALS_MARKER:
            raise FormatError(f"Invalid format (missing {GOALS_MARKER})")

        loaded: List[Goal] = []
        for lineno, line in enumerate(reader, start=1):
            if not line.strip():
                continue
            try:
                loaded.append(goals.parse_line(line))
            except UnknownGoalKind:
                continue
            except FormatError as e:
                logger.warning("Skipping goal record %d: %s", lineno, e)

        self._goals.extend(loaded)
        self.profile.merge(loaded_profile)
        return len(loaded)

    def save_file(self, path: str) -> None:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            self.save(f)
        logger.info("Saved %d goals to %s", len(self._goals), path)

    def load_file(self, path: str) -> int:
        with open(path, "r", encoding="utf-8") as f:
            count = self.load(f)
        logger.info("Loaded %d goals from %s", count, path)
        return count
