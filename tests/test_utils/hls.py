from hlsfixtures.services.fixtures.models import FixtureFile, FixtureMediaPlaylist, FixtureSegment
from hlsfixtures.services.playlist.parser import MediaPlaylist, parse_playlist


def generate_media_m3u8(durations: list[float], start_offset: float | None = None) -> str:
    """Generate a simple VOD media playlist for testing."""
    content = """#EXTM3U
#EXT-X-VERSION:3
#EXT-X-TARGETDURATION:10
#EXT-X-MEDIA-SEQUENCE:0"""
    if start_offset is not None:
        content += f"\n#EXT-X-START:TIME-OFFSET={start_offset}"
    for i, duration in enumerate(durations):
        content += f"""
#EXTINF:{duration},
segment{i}.ts"""
    return content + "\n#EXT-X-ENDLIST\n"


def generate_master_m3u8(uris: list[str]) -> str:
    """Generate a multivariant playlist with one variant per uri."""
    content = "#EXTM3U"
    for i, uri in enumerate(uris):
        content += f"""
#EXT-X-STREAM-INF:BANDWIDTH={(i + 1) * 100000}
{uri}"""
    return content + "\n"


def build_fixture_media_playlist(durations: list[float], start_offset: float | None = None) -> FixtureMediaPlaylist:
    """Build a FixtureMediaPlaylist without touching the filesystem."""
    media_playlist = parse_playlist(generate_media_m3u8(durations, start_offset), uri="test/playlist.m3u8")
    assert isinstance(media_playlist, MediaPlaylist)

    segments = tuple(
        FixtureSegment(
            segment_file=FixtureFile(relative_path=f"test/{segment.uri}", route=f"/test/{segment.uri}"),
            media_segment=segment,
        )
        for segment in media_playlist.segments
    )
    return FixtureMediaPlaylist(
        playlist_file=FixtureFile(relative_path="test/playlist.m3u8", route="/test/playlist.m3u8"),
        media_playlist=media_playlist,
        segments=segments,
    )
