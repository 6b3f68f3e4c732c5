"""Errors raised while loading fixture streams.

I/O errors (missing files, permissions, bad encoding) are never wrapped, they reach the caller as-is.
"""

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path
else:
    Path = object


class FixtureErrorKind(StrEnum):
    NOT_A_MASTER_PLAYLIST = "not_a_master_playlist"
    NOT_A_MEDIA_PLAYLIST = "not_a_media_playlist"


class FixtureLoadError(Exception):
    """A fixture file was read and parsed, but is not what the fixture layout expects."""

    def __init__(self, msg: str, kind: FixtureErrorKind, path: Path, uri: str | None = None) -> None:
        super().__init__(msg)
        self.kind = kind
        self.path = path
        self.uri = uri


class NotAMasterPlaylistError(FixtureLoadError):
    """The stream entry playlist is not a multivariant playlist."""

    def __init__(self, path: Path, found_kind: str) -> None:
        msg = f"File at {path} was not a multivariant playlist, found a {found_kind} playlist"
        super().__init__(msg, kind=FixtureErrorKind.NOT_A_MASTER_PLAYLIST, path=path)
        self.found_kind = found_kind


class NotAMediaPlaylistError(FixtureLoadError):
    """A variant uri points at something other than a media playlist."""

    def __init__(self, path: Path, uri: str, found_kind: str) -> None:
        msg = f"File at {uri} was not a media playlist, found a {found_kind} playlist"
        super().__init__(msg, kind=FixtureErrorKind.NOT_A_MEDIA_PLAYLIST, path=path, uri=uri)
        self.found_kind = found_kind
