"""Creation of new packages."""

from __future__ import annotations

import os
from pathlib import Path

from passerine.aspen.manifest import ENTRYPOINT, MANIFEST, SOURCE, Manifest
from passerine.aspen.status import AspenError, Kind, Status

HELLO = 'println "Hello, Passerine!"\n'


def new_package(path: str | os.PathLike[str]) -> None:
    """Create a package at ``path``, named after its directory.

    Files that already exist are left alone with a warning.
    """
    package = Path(path)
    name = package.name
    if name in ("", ".", ".."):
        raise AspenError("Can not determine directory name")

    try:
        package.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise AspenError("Unable to create package directory") from error

    manifest_path = package / MANIFEST
    if manifest_path.is_file():
        Status.warn().log(f"The manifest file ({MANIFEST}) has already been created")
    else:
        try:
            manifest_path.write_text(Manifest.for_name(name).to_toml(), encoding="utf-8")
        except OSError as error:
            raise AspenError("Could not write manifest file") from error

    source_dir = package / SOURCE
    if source_dir.is_dir():
        Status.warn().log(f"The source directory ({SOURCE}/) has already been created")
    else:
        try:
            source_dir.mkdir()
        except OSError as error:
            raise AspenError("Could not create source directory") from error

    entry = source_dir / ENTRYPOINT
    if entry.is_file():
        Status.warn().log(
            f"The source entrypoint ({SOURCE}/{ENTRYPOINT}) has already been created"
        )
    else:
        try:
            entry.write_text(HELLO, encoding="utf-8")
        except OSError as error:
            raise AspenError("Could not create source entrypoint") from error

    Status(Kind.SUCCESS, "Finished").log(
        f"The package '{name}' was created successfully"
    )