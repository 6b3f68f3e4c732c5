"""Load fixture streams from a fixture root directory.

Layout: <root_dir>/<stream name>/stream.m3u8, with media playlists and segments referenced by relative uris.
Nothing here is cached or retried, every call reads its files fresh and fails on the first error.
"""

import asyncio
from typing import TYPE_CHECKING

import aiofiles

from hlsfixtures.constants import STREAM_ENTRY_FILENAME
from hlsfixtures.services.fixtures.errors import NotAMasterPlaylistError, NotAMediaPlaylistError
from hlsfixtures.services.fixtures.models import FixtureMediaPlaylist, FixtureSegment, FixtureStream
from hlsfixtures.services.playlist.parser import MasterPlaylist, MediaPlaylist, Playlist, parse_playlist
from hlsfixtures.utils.logger import get_logger
from hlsfixtures.utils.paths import fixture_file, resolve_path

if TYPE_CHECKING:
    from pathlib import Path
else:
    Path = object

logger = get_logger(__name__)


async def _read_playlist(path: Path, uri: str) -> Playlist:
    async with aiofiles.open(path, encoding="utf-8") as f:
        content = await f.read()

    return parse_playlist(content, uri=uri)


async def parse_fixture_stream(name: str, root_dir: Path) -> FixtureStream:
    """Load the fixture stream `name`, along with every variant's media playlist."""
    stream_path = resolve_path(root_dir, name, STREAM_ENTRY_FILENAME)
    logger.debug("Loading fixture stream %s from %s", name, stream_path)

    playlist = await _read_playlist(stream_path, uri=STREAM_ENTRY_FILENAME)
    match playlist:
        case MasterPlaylist():
            master_playlist = playlist
        case MediaPlaylist():
            raise NotAMasterPlaylistError(path=stream_path, found_kind=playlist.kind)

    tasks = [parse_media_playlist(root_dir, name, variant.uri) for variant in master_playlist.variants]
    variants = await asyncio.gather(*tasks)

    logger.debug("Loaded fixture stream %s with %d variants", name, len(variants))
    return FixtureStream(
        stream_name=name,
        playlist_file=fixture_file(root_dir, stream_path),
        master_playlist=master_playlist,
        variants=tuple(variants),
    )


async def parse_media_playlist(root_dir: Path, stream_name: str, uri: str) -> FixtureMediaPlaylist:
    """Load the media playlist at `uri`, relative to the stream's directory."""
    playlist_path = resolve_path(root_dir, stream_name, uri)
    logger.debug("Loading media playlist %s", playlist_path)

    playlist = await _read_playlist(playlist_path, uri=uri)
    match playlist:
        case MediaPlaylist():
            media_playlist = playlist
        case MasterPlaylist():
            raise NotAMediaPlaylistError(path=playlist_path, uri=uri, found_kind=playlist.kind)

    # Segment uris are relative to the media playlist, not the stream directory
    segments = []
    for segment in media_playlist.segments:
        segment_path = resolve_path(playlist_path.parent, segment.uri)
        logger.trace("Segment %s -> %s", segment.uri, segment_path)
        segments.append(FixtureSegment(segment_file=fixture_file(root_dir, segment_path), media_segment=segment))

    return FixtureMediaPlaylist(
        playlist_file=fixture_file(root_dir, playlist_path),
        media_playlist=media_playlist,
        segments=tuple(segments),
    )


def load_fixture_stream(name: str, root_dir: Path) -> FixtureStream:
    """Blocking version of parse_fixture_stream, for tests without an event loop."""
    return asyncio.run(parse_fixture_stream(name, root_dir))
