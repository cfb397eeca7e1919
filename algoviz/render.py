"""Terminal rendering helpers and the step trace used by every algorithm."""

from __future__ import annotations

from typing import Iterable, TextIO

RED = "\033[31m"
GREEN = "\x1b[32m"
MAGENTA = "\x1b[35m"
RESET = "\033[0m"


def red(text: object) -> str:
    """Wrap ``text`` in the red terminal colour."""
    return f"{RED}{text}{RESET}"


def green(text: object) -> str:
    """Wrap ``text`` in the green terminal colour."""
    return f"{GREEN}{text}{RESET}"


def magenta(text: object) -> str:
    """Wrap ``text`` in the magenta terminal colour."""
    return f"{MAGENTA}{text}{RESET}"


def join_values(values: Iterable[object]) -> str:
    """Render values the way the step listings show them: each followed by a space."""
    return "".join(f"{value} " for value in values)


class Trace:
    """Collects the textual steps of an algorithm, optionally echoing them to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._parts: list[str] = []
        self._stream = stream

    def write(self, text: str) -> None:
        """Append ``text`` as is."""
        self._parts.append(text)
        if self._stream is not None:
            self._stream.write(text)

    def line(self, text: str = "") -> None:
        """Append ``text`` followed by a newline."""
        self.write(f"{text}\n")

    def text(self) -> str:
        """Everything written so far."""
        return "".join(self._parts)