"""Read and write the per-repository atm.json file.

The file is a single JSON object at the root of the working directory,
pretty-printed with 2-space indentation and a trailing newline:

    {
      "defaultCommitMessage": "save"
    }

Its presence is the only signal that a directory has been initialized.
Unknown keys are tolerated and ignored.
"""

import json
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from atm.config.settings import CONFIG_FILENAME
from atm.exceptions import ConfigurationError, NotInitializedError

log = structlog.get_logger(__name__)

DEFAULT_COMMIT_MESSAGE = "save"


class AtmConfig(BaseModel):
    """Configuration record stored in atm.json."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    default_commit_message: str | None = Field(
        default=None,
        alias="defaultCommitMessage",
        description="Commit message used by 'atm s' when none is given",
    )


class ConfigStore:
    """atm.json access for one explicit directory.

    Attributes:
        directory: Directory holding the configuration file
        path: Full path to the configuration file
    """

    def __init__(self, directory: Path, filename: str = CONFIG_FILENAME) -> None:
        self.directory = directory
        self.path = directory / filename

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> AtmConfig:
        """Load and validate the configuration record.

        Raises:
            NotInitializedError: If the file does not exist
            ConfigurationError: If the file is unreadable, not valid JSON, not
                a JSON object, or has a non-string defaultCommitMessage
        """
        if not self.exists():
            raise NotInitializedError(str(self.directory))

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {self.path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"{self.path} must contain a JSON object")

        try:
            config = AtmConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {self.path}: {e}") from e

        log.debug("config_loaded", path=str(self.path))
        return config

    def write(self, config: AtmConfig) -> None:
        """Write the record as 2-space indented JSON with a trailing newline."""
        payload = config.model_dump(by_alias=True, exclude_none=True)
        self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        log.debug("config_written", path=str(self.path))
