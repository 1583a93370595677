import logging
from typing import List, Optional

from questlog.cli.console import Console, parse_int
from questlog.core.config import settings
from questlog.core.constants import POINTS_PER_LEVEL
from questlog.core.errors import FormatError, InvalidGoal, OutOfRange
from questlog.ledger import GoalLedger
from questlog.models.goal import GoalKind


logger = logging.getLogger(__name__)

MENU = [
    "1) Create a new goal",
    "2) List goals",
    "3) Record event",
    "4) Show score",
    "5) Save to file",
    "6) Load from file",
    "7) Exit",
]

# (prompt, minimum) for each creation parameter, in GoalLedger.create_goal order
PARAM_PROMPTS: dict = {
    GoalKind.simple: [("Points on completion: ", 1)],
    GoalKind.eternal: [("Points per log: ", 1)],
    GoalKind.checklist: [
        ("Points per log: ", 1),
        ("How many times to complete?: ", 1),
        ("Completion bonus: ", 0),
    ],
    GoalKind.negative: [("Points to subtract per event (positive number): ", 1)],
    GoalKind.progress: [
        ("Points per progress unit: ", 1),
        ("Total target units: ", 1),
        ("Bonus on completion: ", 0),
    ],
}

KIND_CHOICES: List[GoalKind] = list(GoalKind)


class GoalMenu:
    """Interactive menu over a GoalLedger."""

    def __init__(self, ledger: GoalLedger, console: Console, default_path: Optional[str] = None):
        self.ledger = ledger
        self.console = console
        self.default_path = default_path or settings.save_path

    def run(self) -> None:
        actions = {
            "1": self.create_goal,
            "2": self.list_goals,
            "3": self.record_event,
            "4": self.show_score,
            "5": self.save,
            "6": self.load,
        }
        while True:
            self.print_header()
            choice = self.console.prompt("Choose an option: ").strip()
            self.console.write()
            if choice == "7" or self.console.eof:
                return
            action = actions.get(choice)
            if action is None:
                self.console.write("Invalid option.")
                continue
            action()

    def print_header(self) -> None:
        p = self.ledger.profile
        out = self.console
        out.write()
        out.write("=== ETERNAL QUEST ===")
        out.write(f"Level: {p.level}  Points: {p.score}  (missing {p.points_to_next} for the next level)")
        if p.badges:
            out.write("Badges: " + " | ".join(p.badges))
        out.write("------------------------------")
        for line in MENU:
            out.write(line)

    def _choose_kind(self) -> Optional[GoalKind]:
        types = "  ".join(f"{i}) {k.value}" for i, k in enumerate(KIND_CHOICES, start=1))
        raw = self.console.prompt(f"Types: {types}\nChoose a type: ").strip()
        number = parse_int(raw)
        if number is not None:
            return KIND_CHOICES[number - 1] if 1 <= number <= len(KIND_CHOICES) else None
        for kind in KIND_CHOICES:
            if kind.value.lower() == raw.lower():
                return kind
        return None

    def create_goal(self) -> None:
        kind = self._choose_kind()
        if kind is None:
            self.console.write("Invalid type. Goal not created.")
            return

        name = self.console.prompt("Name: ") or "(no name)"
        description = self.console.prompt("Description: ")
        params = [self.console.prompt_int(text, minimum) for text, minimum in PARAM_PROMPTS[kind]]

        try:
            self.ledger.create_goal(kind, name, description, *params)
        except InvalidGoal as e:
            logger.warning("Goal rejected: %s", e)
            self.console.write(f"Goal not created: {e}")
            return
        self.console.write(f"{kind.value} goal created.")

    def list_goals(self) -> None:
        if self.ledger.is_empty:
            self.console.write("There are no goals yet. Create one with option 1.")
            return
        self.console.write("--- Goals ---")
        for listing in self.ledger.list_goals():
            self.console.write(f"{listing.index}. {listing.status}  (type: {listing.kind.value})")

    def record_event(self) -> None:
        if self.ledger.is_empty:
            self.console.write("There are no goals to record.")
            return
        self.list_goals()
        index = parse_int(self.console.prompt("Select the goal number to record: "))
        if index is None:
            self.console.write("Invalid selection.")
            return

        units = None
        try:
            if self.ledger.get(index).kind is GoalKind.progress:
                units = self._prompt_units()
            outcome = self.ledger.record_event(index, units)
        except OutOfRange as e:
            logger.info("%s", e)
            self.console.write("Invalid selection.")
            return

        if outcome.points != 0:
            self.console.write(f"Points gained: {outcome.points}. Total score: {outcome.score}")
        else:
            self.console.write("No change in points.")
        if outcome.badge:
            self.console.write(f"New badge: {outcome.badge}")

    def _prompt_units(self) -> Optional[int]:
        units = parse_int(self.console.prompt("How many units did you advance? "))
        if units is None or units <= 0:
            self.console.write("Invalid input. No progress recorded.")
            return None
        return units

    def show_score(self) -> None:
        p = self.ledger.profile
        self.console.write(f"Score: {p.score}")
        self.console.write(
            f"Level: {p.level} — Level progress: {p.points_into_level}/{POINTS_PER_LEVEL} "
            f"(missing {p.points_to_next})"
        )
        if p.badges:
            self.console.write("Badges: " + " | ".join(p.badges))

    def _prompt_path(self, text: str) -> str:
        return self.console.prompt(text).strip() or self.default_path

    def save(self) -> None:
        path = self._prompt_path(f"File name (e.g., {self.default_path}): ")
        try:
            self.ledger.save_file(path)
        except OSError as e:
            logger.error("Save to %s failed: %s", path, e)
            self.console.write(f"Could not save to '{path}': {e.strerror or e}")
            return
        self.console.write(f"Saved to '{path}'.")

    def load(self) -> None:
        path = self._prompt_path("File to load: ")
        try:
            count = self.ledger.load_file(path)
        except FileNotFoundError:
            self.console.write("File does not exist.")
            return
        except FormatError as e:
            logger.error("Load of %s failed: %s", path, e)
            self.console.write(f"{e}.")
            return
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Load of %s failed: %s", path, e)
            self.console.write(f"Could not read '{path}'.")
            return
        self.console.write(f"Loaded {count} goals from '{path}'.")
