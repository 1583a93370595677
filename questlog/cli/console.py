"""Console I/O passed explicitly into the menu.

Keeps stream and encoding choices out of global interpreter state so the
menu can be driven from any pair of text streams.
"""

import sys
from typing import Optional, TextIO


class Console:
    def __init__(self, stdin: TextIO, stdout: TextIO):
        self.stdin = stdin
        self.stdout = stdout
        self.eof = False

    @classmethod
    def from_stdio(cls, encoding: str = "utf-8") -> "Console":
        # Own handle on fd 1 with the configured encoding; sys.stdout is left alone
        out = open(sys.stdout.fileno(), "w", encoding=encoding, errors="replace", buffering=1, closefd=False)
        return cls(sys.stdin, out)

    def write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def prompt(self, text: str) -> str:
        """Show `text` and read one line. Returns '' (and sets eof) at end of input."""
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            self.eof = True
            return ""
        return line.rstrip("\r\n")

    def prompt_int(self, text: str, minimum: int) -> int:
        """Read an integer, falling back to `minimum` when invalid or too small."""
        value = parse_int(self.prompt(text))
        if value is None or value < minimum:
            self.write(f"Using default value: {minimum}")
            return minimum
        return value


def parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except (ValueError, AttributeError):
        return None
