"""Load on-disk HLS streams as test fixtures."""

from hlsfixtures.services.fixtures.errors import (
    FixtureErrorKind,
    FixtureLoadError,
    NotAMasterPlaylistError,
    NotAMediaPlaylistError,
)
from hlsfixtures.services.fixtures.loader import load_fixture_stream, parse_fixture_stream, parse_media_playlist
from hlsfixtures.services.fixtures.models import FixtureFile, FixtureMediaPlaylist, FixtureSegment, FixtureStream

__all__ = [
    "FixtureErrorKind",
    "FixtureFile",
    "FixtureLoadError",
    "FixtureMediaPlaylist",
    "FixtureSegment",
    "FixtureStream",
    "NotAMasterPlaylistError",
    "NotAMediaPlaylistError",
    "load_fixture_stream",
    "parse_fixture_stream",
    "parse_media_playlist",
]
