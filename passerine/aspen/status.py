"""Coloured status messages written to standard error."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

_TAG_WIDTH = 12


class AspenError(Exception):
    """A command failed; the message is shown to the user as fatal."""


class Kind(Enum):
    """The severity of a status message, with its ANSI colour code."""

    INFO = 34
    SUCCESS = 32
    WARN = 33
    FATAL = 31


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


@dataclass(frozen=True)
class Status:
    """A tagged message such as ``Warning`` or ``Fatal``."""

    kind: Kind
    label: str

    @classmethod
    def info(cls) -> Status:
        return cls(Kind.INFO, "Info")

    @classmethod
    def success(cls) -> Status:
        return cls(Kind.SUCCESS, "Success")

    @classmethod
    def warn(cls) -> Status:
        return cls(Kind.WARN, "Warning")

    @classmethod
    def fatal(cls) -> Status:
        return cls(Kind.FATAL, "Fatal")

    def _tag(self, colour: bool) -> str:
        if colour:
            return f"\x1b[1;{self.kind.value}m{self.label}\x1b[0m"
        return self.label

    def log(self, message: str, stream: TextIO | None = None) -> None:
        """Write ``message`` under this status's tag.

        Single-line messages get a right-aligned tag; messages spanning
        several lines are set off by blank lines. Colour is used only when
        the stream is a terminal.
        """
        out = sys.stderr if stream is None else stream
        tag = self._tag(_is_terminal(out))
        lines = message.splitlines()

        if len(lines) > 1:
            out.write(f"\n{tag} ")
            for line in lines:
                out.write(f"{line}\n")
            out.write("\n")
        else:
            padding = " " * max(_TAG_WIDTH - len(self.label), 0)
            out.write(f"{padding}{tag} {message}\n")