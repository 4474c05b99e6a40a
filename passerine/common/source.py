"""Literal source code paired with the path it came from."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PATH = "./source"


@dataclass(frozen=True)
class Source:
    """Source text and a path naming it.

    Sources that were not read from disk point at ``./source``.
    """

    contents: str
    path: str = DEFAULT_PATH

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> Source:
        """Read a file from disk into a new source."""
        with open(path, encoding="utf-8") as handle:
            contents = handle.read()
        return cls(contents, os.fspath(path))

    @classmethod
    def from_string(cls, contents: str) -> Source:
        """Wrap a plain string as a source."""
        return cls(contents, DEFAULT_PATH)