"""Config loading, validating, writing."""

import json
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hlsfixtures.constants import DEFAULT_FIXTURE_ROOT
from hlsfixtures.services.fixtures.loader import parse_fixture_stream
from hlsfixtures.services.fixtures.models import FixtureStream
from hlsfixtures.utils.logger import LoggingConf, get_logger, setup_logger

logger = get_logger(__name__)


class FixtureConf(BaseModel):
    """Settings Definition."""

    model_config = ConfigDict(extra="ignore")

    root_dir: Path = Field(default=DEFAULT_FIXTURE_ROOT, validate_default=True)
    logging: LoggingConf = LoggingConf()

    @field_validator("root_dir", mode="before")
    @classmethod
    def validate_root_dir(cls, value: str | Path) -> Path:
        """Expand the user directory and anchor relative roots to the current working directory.

        An empty value means the default root.
        """
        if isinstance(value, str):
            value = value.strip()
            if value == "":
                value = DEFAULT_FIXTURE_ROOT

        return Path(value).expanduser().absolute()

    def setup_logging(self) -> None:
        """Apply this config's logging settings to the root logger."""
        setup_logger(self.logging)

    async def load_stream(self, name: str) -> FixtureStream:
        """Load a fixture stream from this config's fixture root."""
        return await parse_fixture_stream(name, self.root_dir)

    def write_config(self, config_path: Path) -> None:
        """Write the current settings to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        logger.info("Writing config to %s", config_path)
        with config_path.open("w") as f:
            f.write(self.model_dump_json(indent=2, exclude_none=False))

    @classmethod
    def load_config(cls, config_path: Path) -> Self:
        """Load the configuration file, defaults if it does not exist."""
        if not config_path.exists() or not config_path.is_file():
            logger.warning(
                "Config file %s does not exist, loading defaults",
                config_path.absolute(),
            )
            return cls()

        logger.info("Loading config from %s", config_path.absolute())
        with config_path.open("r") as f:
            config = json.load(f)

        return cls(**config)
