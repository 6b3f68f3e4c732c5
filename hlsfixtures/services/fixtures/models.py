"""Fixture wrappers around parsed playlists, with timeline lookups."""

import math
import os
from collections.abc import Iterator
from pathlib import Path

from m3u8.model import Segment
from pydantic import BaseModel, ConfigDict

from hlsfixtures.services.playlist.parser import MasterPlaylist, MediaPlaylist


class FixtureFile(BaseModel):
    """Location of a fixture file, relative to the fixture root, and the route it is served on."""

    model_config = ConfigDict(frozen=True)

    relative_path: str
    route: str

    def absolute_path(self, root_dir: Path) -> Path:
        """Where this file lives under a given fixture root."""
        return Path(os.path.abspath(root_dir / self.relative_path))  # noqa: PTH100 Keep symlinks as-is


class FixtureSegment(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    segment_file: FixtureFile
    media_segment: Segment


class FixtureMediaPlaylist(BaseModel):
    """A loaded media playlist.

    segments[i].media_segment is media_playlist.segments[i], one fixture segment per parsed segment.
    """

    model_config = ConfigDict(frozen=True)

    playlist_file: FixtureFile
    media_playlist: MediaPlaylist
    segments: tuple[FixtureSegment, ...]

    @property
    def duration(self) -> float:
        """Total duration of all segments, in seconds."""
        return sum(segment.media_segment.duration for segment in self.segments)

    def segment_index(self, seconds: float) -> int | None:
        """Index of the segment playing at `seconds`, None if past the end of the playlist."""
        start = self.media_playlist.start_offset or 0
        cur_time = start
        for i, segment in enumerate(self.segments):
            duration = segment.media_segment.duration
            # Rounds up, 10s into 5s segments is the start of the third segment
            if seconds < cur_time + duration:
                return i
            cur_time += duration

        return None

    def segment_at_time(self, seconds: float) -> FixtureSegment | None:
        index = self.segment_index(seconds)
        if index is None:
            return None
        return self.segments[index]

    def segments_in_time_range(self, start_sec: float, end_sec: float | None = None) -> list[FixtureSegment]:
        """Segments from the one playing at start_sec, up to but excluding the one playing at end_sec.

        With no end_sec, or an end_sec past the end of the playlist, runs to the last segment.
        """
        start_idx = self.segment_index(start_sec)
        if start_idx is None:
            return []

        end_idx = self.segment_index(end_sec if end_sec is not None else math.inf)
        if end_idx is None:
            return list(self.segments[start_idx:])

        return list(self.segments[start_idx:end_idx])


class FixtureStream(BaseModel):
    """A named fixture stream: its multivariant playlist and one media playlist per variant."""

    model_config = ConfigDict(frozen=True)

    stream_name: str
    playlist_file: FixtureFile
    master_playlist: MasterPlaylist
    variants: tuple[FixtureMediaPlaylist, ...]

    def files(self) -> Iterator[FixtureFile]:
        """Every file in the stream, master first, then each variant followed by its segments."""
        yield self.playlist_file
        for variant in self.variants:
            yield variant.playlist_file
            for segment in variant.segments:
                yield segment.segment_file

    def route_map(self, root_dir: Path) -> dict[str, Path]:
        """Route to file mapping, for a mock server serving this stream."""
        return {fixture_file.route: fixture_file.absolute_path(root_dir) for fixture_file in self.files()}
