"""A tree of source files rooted at a directory's entry point."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from passerine.common.source import Source

ENTRY_POINT = "main"
EXTENSION = "pn"
ENTRY_POINT_NAME = f"{ENTRY_POINT}.{EXTENSION}"


class ModuleError(Exception):
    """Raised when a module directory cannot be loaded."""


@dataclass
class Module:
    """A source file together with the modules nested beneath it."""

    source: Source
    children: list[Module] = field(default_factory=list)

    @classmethod
    def from_dir(cls, path: str | os.PathLike[str]) -> Module:
        """Load the module rooted at directory ``path``.

        The directory must hold ``main.pn``; other ``.pn`` files become
        leaf children and subdirectories holding ``main.pn`` become nested
        modules. Everything else is ignored.
        """
        root = Path(path)
        try:
            entries = sorted(root.iterdir())
        except OSError as error:
            raise ModuleError(
                f"The path `{root}` could not be read as a directory"
            ) from error

        entry: Source | None = None
        children: list[Module] = []

        for child in entries:
            if child.is_dir():
                if (child / ENTRY_POINT_NAME).exists():
                    children.append(cls.from_dir(child))
                continue
            if not (child.is_file() and child.suffix == f".{EXTENSION}"):
                continue

            try:
                source = Source.from_path(child)
            except (OSError, UnicodeDecodeError) as error:
                raise ModuleError(f"Could not read source file `{child}`") from error

            if child.stem == ENTRY_POINT:
                if entry is not None:
                    raise ModuleError(
                        f"Two potential entry points (`{entry.path}` and `{child}`) "
                        "for a single module"
                    )
                entry = source
            else:
                children.append(cls(source))

        if entry is None:
            raise ModuleError(
                f"No entry point (e.g. `{ENTRY_POINT_NAME}`) in the directory "
                f"for the module `{root}`"
            )
        return cls(entry, children)