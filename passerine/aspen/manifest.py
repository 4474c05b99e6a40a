"""The package manifest and where packages keep their files."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from passerine.aspen.status import AspenError

MANIFEST = "aspen.toml"
SOURCE = "src"
ENTRYPOINT = "main.pn"

_OPTIONAL_KEYS = ("readme", "license", "repository", "documentation")


class ManifestError(AspenError):
    """Raised when a manifest cannot be found, read or parsed."""


@dataclass
class PackageInfo:
    """The ``[package]`` table of a manifest."""

    name: str
    version: str
    authors: list[str] = field(default_factory=list)
    readme: str | None = None
    license: str | None = None
    repository: str | None = None
    documentation: str | None = None

    def to_dict(self) -> dict[str, Any]:
        table: dict[str, Any] = {
            "name": self.name,
            "version": self.version,
            "authors": list(self.authors),
        }
        for key in _OPTIONAL_KEYS:
            value = getattr(self, key)
            if value is not None:
                table[key] = value
        return table


def _parse_package(table: Any) -> PackageInfo:
    if not isinstance(table, dict):
        raise ValueError("missing package table")
    name = table.get("name")
    version = table.get("version")
    authors = table.get("authors")
    if not isinstance(name, str) or not isinstance(version, str):
        raise ValueError("package name and version must be strings")
    if not isinstance(authors, list) or not all(isinstance(a, str) for a in authors):
        raise ValueError("package authors must be a list of strings")
    optional = {}
    for key in _OPTIONAL_KEYS:
        value = table.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"package {key} must be a string")
        optional[key] = value
    return PackageInfo(name, version, list(authors), **optional)


@dataclass
class Manifest:
    """A package description together with its dependencies."""

    package: PackageInfo
    dependencies: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_name(cls, name: str) -> Manifest:
        """A fresh manifest for a new package at version 0.0.0."""
        return cls(PackageInfo(name=name, version="0.0.0"))

    @classmethod
    def parse(cls, source: str) -> Manifest:
        """Parse manifest TOML, raising ``ManifestError`` if malformed."""
        try:
            document = tomllib.loads(source)
            package = _parse_package(document.get("package"))
            dependencies = document.get("dependencies")
            if not isinstance(dependencies, dict):
                raise ValueError("missing dependencies table")
        except (tomllib.TOMLDecodeError, ValueError) as error:
            raise ManifestError("Could not parse the manifest file") from error
        return cls(package, dict(dependencies))

    @classmethod
    def find(cls, path: str | os.PathLike[str]) -> tuple[Manifest, Path]:
        """Search ``path`` and its parents for a manifest.

        Returns the parsed manifest and the directory that holds it.
        """
        directory = Path(path)
        while not (directory / MANIFEST).is_file():
            parent = directory.parent
            if parent == directory:
                raise ManifestError("The manifest file could not be found")
            directory = parent

        try:
            source = (directory / MANIFEST).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            raise ManifestError("The manifest file could not be read") from error
        return cls.parse(source), directory

    def to_toml(self) -> str:
        """Render the manifest as TOML."""
        return tomli_w.dumps(
            {"package": self.package.to_dict(), "dependencies": self.dependencies}
        )