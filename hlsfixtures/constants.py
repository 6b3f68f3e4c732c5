"""Constants used through the package."""

from pathlib import Path

# Fixture layout
STREAM_ENTRY_FILENAME = "stream.m3u8"
DEFAULT_FIXTURE_ROOT = Path("tests") / "fixtures" / "files"  # Relative to the working directory when the config is built

# Routes
ROUTE_PREFIX = "/"
