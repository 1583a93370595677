"""Domain errors raised by the goal ledger.

Callers (the console menu) catch ``LedgerError`` and report it; none of these
conditions is fatal to the process.
"""


class LedgerError(Exception):
    """Base class for every error the ledger reports."""


class OutOfRange(LedgerError, IndexError):
    """A goal index outside ``[1, goal count]`` was requested."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Goal {index} is out of range (1..{count})")


class FormatError(LedgerError, ValueError):
    """A saved ledger file could not be parsed."""


class InvalidGoal(LedgerError, ValueError):
    """Goal creation was rejected; the ledger is unchanged."""


class UnknownGoalKind(InvalidGoal):
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unknown goal kind: {kind!r}")
