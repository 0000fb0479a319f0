"""
Settings for topic derivation.
Loaded from a JSON file in the data directory.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hashtopic.topics.domain.topic_deriver import TopicDeriver
from hashtopic.topics.infrastructure.hashlib_hasher import DEFAULT_ALGORITHM, HashlibHasher
from hashtopic.utils.paths import ensure_path_absolute_or_relative_to, home_dir

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"


def default_data_dir() -> Path:
    """
    Get the default data directory (~/.hashtopic).

    Falls back to a relative .hashtopic directory when no home is known.
    """
    home = home_dir()
    if not home:
        return Path(".hashtopic")
    return Path(home) / ".hashtopic"


class HashTopicSettings(BaseModel):
    """
    Runtime settings.
    Every field has a default, so an empty JSON object is a valid config.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hash_algorithm: str = Field(
        default=DEFAULT_ALGORITHM,
        description="hashlib algorithm topics are derived from",
        examples=["sha3_256", "blake2b", "sha256"],
    )
    data_dir: Path = Field(
        default_factory=default_data_dir,
        description="Directory relative paths are resolved against",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level",
        examples=["DEBUG", "INFO", "WARNING"],
    )

    @field_validator("hash_algorithm")
    @classmethod
    def _validate_hash_algorithm(cls, value: str) -> str:
        # Raises ValueError for unknown or variable-length algorithms
        HashlibHasher(value)
        return value

    @field_validator("data_dir")
    @classmethod
    def _expand_data_dir(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'")
        return level

    def resolve_path(self, filename: str | Path) -> Path:
        """
        Resolve a file name against the data directory.

        Args:
            filename: Absolute or relative file name.

        Returns:
            The absolute filename unchanged, or data_dir / filename.
        """
        return ensure_path_absolute_or_relative_to(self.data_dir, filename)

    def build_deriver(self) -> TopicDeriver:
        """Create a topic deriver using the configured hash algorithm."""
        return TopicDeriver(HashlibHasher(self.hash_algorithm))


def load_settings(path: str | Path | None = None) -> HashTopicSettings:
    """
    Load settings from a JSON file.

    Args:
        path: Config file. Relative paths are resolved against the default
              data directory. When omitted, <data_dir>/config.json is used if
              it exists and defaults otherwise.

    Returns:
        The loaded settings.

    Raises:
        FileNotFoundError: If an explicitly given config file does not exist.
        pydantic.ValidationError: If the file content is invalid.
    """
    if path is None:
        config_path = default_data_dir() / CONFIG_FILENAME
        if not config_path.exists():
            logger.debug(f"No config file at {config_path}, using defaults")
            return HashTopicSettings()
    else:
        config_path = ensure_path_absolute_or_relative_to(default_data_dir(), path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    settings = HashTopicSettings.model_validate_json(config_path.read_text(encoding="utf-8"))
    logger.info(f"Loaded settings from {config_path}")
    return settings


def configure_logging(settings: HashTopicSettings) -> None:
    """Configure root logging from the settings."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        force=True,
    )
