"""The conftest.py file serves as a means of providing fixtures for an entire directory.

Fixtures defined in a conftest.py can be used by any test in that package without needing to import them.
"""

from pathlib import Path

import pytest

from hlsfixtures.core.config import FixtureConf

FIXTURE_ROOT = Path(__file__).parent / "fixtures" / "files"


@pytest.fixture
def fixture_root() -> Path:
    """The checked in fixture streams."""
    return FIXTURE_ROOT


@pytest.fixture
def fixture_conf(fixture_root: Path) -> FixtureConf:
    return FixtureConf(root_dir=fixture_root)


@pytest.fixture
def write_stream(tmp_path: Path):
    """Function returns a function, which is how it needs to be.

    Writes a stream's files under tmp_path, keyed by path relative to the stream directory.
    """

    def _write_stream(name: str, files: dict[str, str | bytes]) -> Path:
        stream_dir = tmp_path / name
        for relative_path, content in files.items():
            file_path = stream_dir / relative_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                file_path.write_bytes(content)
            else:
                file_path.write_text(content, encoding="utf-8")
        return tmp_path

    return _write_stream
