import io

import pytest

from questlog.core.errors import FormatError, InvalidGoal, OutOfRange, UnknownGoalKind
from questlog.ledger import GoalLedger
from questlog.models.goal import GoalKind


SAVED = """#PROFILE
SCORE:1250
BADGES:Completed: Run a half marathon
#GOALS
Simple|Run a half marathon|13.1 \\| no walking|1000|1
Eternal|Read|daily|100|12
Checklist|Temple||50|10|4|500|0
Negative|Skip workout||-75|2
Progress|Miles|cumulative|10|100|42|1000|0
"""


def make_ledger() -> GoalLedger:
    ledger = GoalLedger()
    ledger.create_goal("Simple", "Run", "a race", 1000)
    ledger.create_goal("eternal", "Read", "", 100)
    ledger.create_goal(GoalKind.checklist, "Temple", "", 50, 2, 500)
    ledger.create_goal("Negative", "Soda", "", 30)
    ledger.create_goal("Progress", "Miles", "", 10, 5, 100)
    return ledger


def test_checklist_scenario():
    ledger = GoalLedger()
    ledger.create_goal("Checklist", "Read Scriptures", "", 10, 3, 20)
    outcomes = [ledger.record_event(1) for _ in range(3)]
    assert [o.points for o in outcomes] == [10, 10, 30]
    assert ledger.profile.score == 50
    assert [o.badge for o in outcomes] == [None, None, "Checklist completed: Read Scriptures"]
    assert ledger.profile.badges == ["Checklist completed: Read Scriptures"]


def test_create_unknown_kind_leaves_ledger_unchanged():
    ledger = make_ledger()
    with pytest.raises(UnknownGoalKind):
        ledger.create_goal("Weekly", "x", "y", 1)
    assert len(ledger) == 5


def test_create_with_wrong_params_is_invalid():
    ledger = GoalLedger()
    with pytest.raises(InvalidGoal):
        ledger.create_goal("Checklist", "x", "y", 10)
    with pytest.raises(InvalidGoal):
        ledger.create_goal("Simple", "x", "y", "lots")
    assert ledger.is_empty


def test_list_goals_is_lazy_and_one_based():
    ledger = make_ledger()
    listing = ledger.list_goals()
    first = next(listing)
    assert first.index == 1
    assert first.kind is GoalKind.simple
    assert first.status == "[ ] Run — a race (1000 pts)"
    assert [item.index for item in listing] == [2, 3, 4, 5]


def test_empty_ledger():
    ledger = GoalLedger()
    assert ledger.is_empty
    assert list(ledger.list_goals()) == []


@pytest.mark.parametrize("index", [0, 6, -1])
def test_record_out_of_range(index):
    ledger = make_ledger()
    before = [g.model_copy() for g in ledger.goals]
    with pytest.raises(OutOfRange):
        ledger.record_event(index)
    assert ledger.goals == before
    assert ledger.profile.score == 0


def test_simple_badge_awarded_once_on_completion():
    ledger = make_ledger()
    first = ledger.record_event(1)
    again = ledger.record_event(1)
    assert first.badge == "Completed: Run"
    assert again.points == 0
    assert again.badge is None
    assert ledger.profile.badges == ["Completed: Run"]


def test_progress_completion_gives_no_badge():
    ledger = make_ledger()
    outcome = ledger.record_event(5, units=5)
    assert outcome.points == 10 * 5 + 100
    assert outcome.badge is None
    assert ledger.profile.badges == []


def test_negative_goal_clamps_score():
    ledger = make_ledger()
    ledger.record_event(2)
    outcome = ledger.record_event(4)
    assert outcome.points == -30
    assert outcome.score == 70
    for _ in range(5):
        ledger.record_event(4)
    assert ledger.profile.score == 0


def test_save_format():
    ledger = GoalLedger()
    ledger.create_goal("Checklist", "Read | study", "", 10, 3, 20)
    ledger.record_event(1)
    out = io.StringIO()
    ledger.save(out)
    assert out.getvalue() == (
        "#PROFILE\n"
        "SCORE:10\n"
        "BADGES:\n"
        "#GOALS\n"
        "Checklist|Read \\| study||10|3|1|20|0\n"
    )


def test_save_then_load_round_trip():
    ledger = make_ledger()
    ledger.record_event(1)
    ledger.record_event(3)
    ledger.record_event(5, units=2)
    buf = io.StringIO()
    ledger.save(buf)

    restored = GoalLedger()
    buf.seek(0)
    assert restored.load(buf) == 5
    assert [g.status for g in restored.list_goals()] == [g.status for g in ledger.list_goals()]
    assert restored.profile == ledger.profile


def test_load_parses_every_kind():
    ledger = GoalLedger()
    assert ledger.load(io.StringIO(SAVED)) == 5
    assert [g.kind for g in ledger.list_goals()] == list(GoalKind)
    assert ledger.goals[0].description == "13.1 | no walking"
    assert ledger.profile.score == 1250
    assert ledger.profile.level == 2


def test_load_replaces_goals_and_merges_profile():
    ledger = make_ledger()
    ledger.profile.add_points(3000)
    ledger.profile.award_badge("Local badge")
    ledger.load(io.StringIO(SAVED))
    assert len(ledger) == 5
    assert ledger.goals[0].name == "Run a half marathon"
    assert ledger.profile.score == 3000
    assert ledger.profile.badges == ["Local badge", "Completed: Run a half marathon"]


def test_loaded_complete_goal_does_not_award_badge_retroactively():
    ledger = GoalLedger()
    ledger.load(io.StringIO(SAVED.replace("BADGES:Completed: Run a half marathon", "BADGES:")))
    outcome = ledger.record_event(1)
    assert outcome.points == 0
    assert outcome.badge is None
    assert ledger.profile.badges == []


def test_load_missing_goals_marker():
    ledger = make_ledger()
    with pytest.raises(FormatError):
        ledger.load(io.StringIO("#PROFILE\nSCORE:900\nBADGES:X\nSimple|A|b|5|0\n"))
    assert ledger.is_empty
    assert ledger.profile.score == 0
    assert ledger.profile.badges == []


@pytest.mark.parametrize(
    "text",
    [
        "",
        "SCORE:10\nBADGES:\n#GOALS\n",
        "#GOALS\n#PROFILE\nSCORE:10\nBADGES:\n",
    ],
)
def test_load_missing_or_misordered_profile_marker(text):
    ledger = GoalLedger()
    with pytest.raises(FormatError):
        ledger.load(io.StringIO(text))


def test_load_skips_unknown_blank_and_malformed_lines(caplog):
    text = (
        "#PROFILE\nSCORE:0\nBADGES:\n#GOALS\n"
        "Simple|A|a|5|0\n"
        "\n"
        "Weekly|B|b|5\n"
        "Checklist|C|c|ten|3|0|0|0\n"
        "Eternal|D|d|2|1\n"
    )
    ledger = GoalLedger()
    with caplog.at_level("WARNING", logger="questlog"):
        assert ledger.load(io.StringIO(text)) == 2
    assert [g.name for g in ledger.goals] == ["A", "D"]
    assert "Skipping goal record" in caplog.text


def test_load_without_badges_line():
    ledger = GoalLedger()
    ledger.load(io.StringIO("#PROFILE\nSCORE:15\n#GOALS\nEternal|D|d|2|1\n"))
    assert ledger.profile.score == 15
    assert len(ledger) == 1


def test_save_file_and_load_file(tmp_path):
    path = tmp_path / "goals.txt"
    ledger = make_ledger()
    ledger.record_event(3)
    ledger.save_file(str(path))
    assert path.read_text(encoding="utf-8").startswith("#PROFILE\nSCORE:50\n")

    restored = GoalLedger()
    assert restored.load_file(str(path)) == 5
    assert restored.profile.score == 50


def test_load_file_missing_leaves_state(tmp_path):
    ledger = make_ledger()
    ledger.record_event(1)
    with pytest.raises(FileNotFoundError):
        ledger.load_file(str(tmp_path / "nope.txt"))
    assert len(ledger) == 5
    assert ledger.profile.score == 1000


def test_load_file_with_undecodable_bytes_keeps_goals(tmp_path):
    path = tmp_path / "garbled.txt"
    path.write_bytes(b"#PROFILE\nSCORE:5\nBADGES:\n#GOALS\nSimple|\xff\xfe|d|5|0\n")
    ledger = GoalLedger()
    ledger.create_goal("Eternal", "Read", "", 10)
    ledger.record_event(1)
    with pytest.raises(UnicodeDecodeError):
        ledger.load_file(str(path))
    assert [g.name for g in ledger.goals] == ["Read"]
    assert ledger.profile.score == 10
