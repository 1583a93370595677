"""Helpers for the line-oriented save format.

Names and descriptions may contain the field delimiter; it is written as
``\\|``. Only that pair is an escape, every other backslash is literal, so a
value that ends in a backslash cannot be told apart from an escaped
delimiter. That case is a known limitation of the format.
"""

from typing import Iterable, List, Optional, TextIO

from questlog.core.constants import ESCAPE_CHAR, FIELD_DELIMITER

_ESCAPED_DELIMITER = ESCAPE_CHAR + FIELD_DELIMITER


def escape(value: str) -> str:
    """Escape the delimiter inside a free-text field."""
    return value.replace(FIELD_DELIMITER, _ESCAPED_DELIMITER)


def join_fields(fields: Iterable[object]) -> str:
    return FIELD_DELIMITER.join(str(f) for f in fields)


def split_fields(line: str) -> List[str]:
    """Split a record on unescaped delimiters, unescaping ``\\|`` as we go.

    Example: 'Simple|a\\|b|desc|5|0' -> ['Simple', 'a|b', 'desc', '5', '0']
    """
    fields: List[str] = []
    current: List[str] = []
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == ESCAPE_CHAR and line[i + 1:i + 2] == FIELD_DELIMITER:
            current.append(FIELD_DELIMITER)
            i += 2
            continue
        if ch == FIELD_DELIMITER:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current))
    return fields


class LineReader:
    """Reads lines from a text stream with one line of lookahead.

    Lines come back without their trailing newline; ``None`` marks the end.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pending: Optional[str] = None
        self._has_pending = False

    def _read(self) -> Optional[str]:
        raw = self._stream.readline()
        if raw == "":
            return None
        return raw.rstrip("\r\n")

    def peek(self) -> Optional[str]:
        if not self._has_pending:
            self._pending = self._read()
            self._has_pending = True
        return self._pending

    def readline(self) -> Optional[str]:
        if self._has_pending:
            self._has_pending = False
            return self._pending
        return self._read()

    def __iter__(self):
        while True:
            line = self.readline()
            if line is None:
                return
            yield line
