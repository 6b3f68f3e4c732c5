from hlsfixtures.services.playlist.parser import MasterPlaylist, MediaPlaylist, parse_playlist
from tests.test_utils.hls import generate_master_m3u8, generate_media_m3u8


def test_parse_master_playlist() -> None:
    playlist = parse_playlist(generate_master_m3u8(["low.m3u8", "high.m3u8"]), uri="stream.m3u8")

    assert isinstance(playlist, MasterPlaylist)
    assert playlist.kind == "master"
    assert playlist.uri == "stream.m3u8"
    assert [variant.uri for variant in playlist.variants] == ["low.m3u8", "high.m3u8"]


def test_parse_media_playlist() -> None:
    playlist = parse_playlist(generate_media_m3u8([5.0, 2.5]))

    assert isinstance(playlist, MediaPlaylist)
    assert playlist.kind == "media"
    assert [segment.duration for segment in playlist.segments] == [5.0, 2.5]
    assert [segment.uri for segment in playlist.segments] == ["segment0.ts", "segment1.ts"]
    assert playlist.start_offset is None


def test_media_playlist_start_offset() -> None:
    playlist = parse_playlist(generate_media_m3u8([5.0], start_offset=1.5))

    assert isinstance(playlist, MediaPlaylist)
    assert playlist.start_offset == 1.5  # noqa: PLR2004


def test_segments_are_stable() -> None:
    playlist = parse_playlist(generate_media_m3u8([5.0, 5.0]))

    assert isinstance(playlist, MediaPlaylist)
    assert playlist.segments[0] is playlist.segments[0]
