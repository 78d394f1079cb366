"""Configuration management for pr-title-check."""
from pathlib import Path
from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
import tomli
import tomli_w
import os
import re

from .exceptions import ConfigError
from .title.rules import MAX_DESCRIPTION_LENGTH

DEFAULT_CONFIG_FILENAME = ".prtitlecheck.toml"
CONFIG_SECTION = "prtitlecheck"

TRUE_VALUES = ('true', '1', 'yes', 'on')
FALSE_VALUES = ('false', '0', 'no', 'off')

# Later entries win when several variables set the same field.
ENV_MAPPING = (
    ('INPUT_STRICT', 'strict'),
    ('INPUT_MAX_LENGTH', 'max_description_length'),
    ('PR_TITLE_CHECK_STRICT', 'strict'),
    ('PR_TITLE_CHECK_MAX_LENGTH', 'max_description_length'),
    ('PR_TITLE_CHECK_ALWAYS_LOG', 'always_log'),
    ('PR_TITLE_CHECK_LOG_FILE', 'log_file'),
)


def parse_bool(name: str, value: str) -> bool:
    """Parse a boolean setting given as a string."""
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be 'true' or 'false', got {value!r}")


def parse_max_length(name: str, value: str) -> int:
    """Parse a maximum description length given as a string."""
    try:
        length = int(value.strip())
    except ValueError:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}") from None
    if length <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    return length


class Config(BaseModel):
    """Configuration settings for pr-title-check.

    Values come from, in increasing priority: defaults, environment
    variables, the config file and keyword arguments (command line).
    """

    strict: bool = Field(
        default=True,
        description="Enforce lowercase, no trailing period and imperative mood in descriptions"
    )

    max_description_length: int = Field(
        default=MAX_DESCRIPTION_LENGTH,
        description="Maximum number of characters allowed in the description"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always write a timestamped log file"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    @field_validator('max_description_length')
    @classmethod
    def check_max_length(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive integer")
        return value

    def __init__(self, **data):
        """Initialize config with environment variable support."""
        env_data: Dict[str, Any] = {}

        for env_var, field_name in ENV_MAPPING:
            if env_var not in os.environ:
                continue
            value = os.environ[env_var]
            if not value.strip():
                continue

            if field_name in ('strict', 'always_log'):
                env_data[field_name] = parse_bool(env_var, value)
            elif field_name == 'max_description_length':
                env_data[field_name] = parse_max_length(env_var, value)
            else:
                env_data[field_name] = self._sanitize_string(value)

        merged_data = {**env_data, **data}

        try:
            super().__init__(**merged_data)
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters from a string setting."""
        if not value:
            return value
        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)
        return value.strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (relative, no traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @classmethod
    def load(cls, repo_path: Path, **overrides) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Directory holding the config file
            overrides: Values that take precedence over the file

        Returns:
            Config: Configuration object with values from file or defaults

        Raises:
            ConfigError: If the file holds a value that cannot be used
        """
        config_path = Path(repo_path) / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls(**overrides)

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)
        except (OSError, tomli.TOMLDecodeError) as e:
            print(f"Warning: Error reading config file: {e}")
            return cls(**overrides)

        file_data = config_data.get(CONFIG_SECTION, config_data)
        if not isinstance(file_data, dict):
            raise ConfigError(f"[{CONFIG_SECTION}] in {config_path} must be a table")
        file_data = {k: v for k, v in file_data.items() if k in cls.model_fields}

        log_file = file_data.get('log_file')
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError(f"log_file must be a string, got {log_file!r}")
        if log_file and not cls._is_safe_path(log_file):
            print(f"Warning: Unsafe log file path '{file_data['log_file']}', using default")
            file_data['log_file'] = None

        return cls(**{**file_data, **overrides})

    def save(self, repo_path: Path) -> Path:
        """Save configuration to the config file.

        Args:
            repo_path: Directory to write the config file into

        Returns:
            Path: Location of the written file
        """
        config_path = Path(repo_path) / DEFAULT_CONFIG_FILENAME

        config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

        if config_dict.get('log_file') and not self._is_safe_path(config_dict['log_file']):
            print(f"Warning: Unsafe log file path '{config_dict['log_file']}', not saving")
            del config_dict['log_file']

        with config_path.open('wb') as f:
            tomli_w.dump({CONFIG_SECTION: config_dict}, f)
        return config_path

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"ptc_log-{timestamp}.log")
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            else:
                print(f"Warning: Unsafe log file path '{self.log_file}', using default")
                return None
        return None
