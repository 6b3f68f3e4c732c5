"""Helpers for turning fixture file locations into relative paths and routes."""

import os
from pathlib import Path, PurePath

from hlsfixtures.constants import ROUTE_PREFIX
from hlsfixtures.services.fixtures.models import FixtureFile


def resolve_path(base: str | Path, *parts: str | Path) -> Path:
    """Join parts onto base and normalise the result without following symlinks.

    A leading slash on a part does not discard base, "/low.m3u8" under a stream is still inside the stream.
    """
    relative_parts = [str(part).lstrip("/") for part in parts]
    return Path(os.path.abspath(os.path.join(base, *relative_parts)))  # noqa: PTH100, PTH118 Path.resolve() follows symlinks


def fixture_file(root_dir: Path, path: Path) -> FixtureFile:
    """Build the FixtureFile for a path below (or escaping) the fixture root."""
    relative_path = PurePath(os.path.relpath(path, resolve_path(root_dir))).as_posix()
    return FixtureFile(relative_path=relative_path, route=ROUTE_PREFIX + relative_path)
