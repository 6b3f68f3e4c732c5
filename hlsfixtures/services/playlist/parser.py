"""Tagged playlist types returned from the m3u8 parsing boundary."""

from typing import Literal

import m3u8
from m3u8.model import M3U8, PlaylistList, SegmentList
from pydantic import BaseModel, ConfigDict

from hlsfixtures.utils.logger import get_logger

logger = get_logger(__name__)


class _ParsedPlaylist(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    document: M3U8
    uri: str | None = None


class MasterPlaylist(_ParsedPlaylist):
    """A multivariant playlist, listing one media playlist per variant stream."""

    kind: Literal["master"] = "master"

    @property
    def variants(self) -> PlaylistList:
        """Variant streams in playlist order, each with the uri of its media playlist."""
        return self.document.playlists


class MediaPlaylist(_ParsedPlaylist):
    """A media playlist, the ordered segments of one rendition."""

    kind: Literal["media"] = "media"

    @property
    def segments(self) -> SegmentList:
        """The parser's own segment list, the same objects on every access."""
        return self.document.segments

    @property
    def start_offset(self) -> float | None:
        """TIME-OFFSET of EXT-X-START, if the playlist has one."""
        if self.document.start is None:
            return None
        return self.document.start.time_offset


Playlist = MasterPlaylist | MediaPlaylist


def parse_playlist(content: str, uri: str | None = None) -> Playlist:
    """Parse playlist text, tagging the result as master or media.

    The uri is only kept for error messages and logging, segment uris are left as written.
    """
    document = m3u8.loads(content)

    if document.is_variant:
        logger.trace("Parsed %s as a master playlist with %d variants", uri, len(document.playlists))
        return MasterPlaylist(document=document, uri=uri)

    logger.trace("Parsed %s as a media playlist with %d segments", uri, len(document.segments))
    return MediaPlaylist(document=document, uri=uri)
