"""Configuration management for git-commit-audit."""
from pathlib import Path
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, PrivateAttr, ValidationError
import tomli
import tomli_w
import os
import re

from .errors import ConfigError
from .models import Severity, Validation
from .validation import ValidationConfig

DEFAULT_CONFIG_FILENAME = ".gitcommitaudit.toml"
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_SECTION = "git-commit-audit"

ENV_MAPPING = {
    'GIT_COMMIT_AUDIT_THRESHOLD': 'threshold',
    'GIT_COMMIT_AUDIT_STRICT': 'strict',
    'GIT_COMMIT_AUDIT_ALWAYS_LOG': 'always_log',
    'GIT_COMMIT_AUDIT_LOG_FILE': 'log_file',
}

BOOLEAN_FIELDS = ('strict', 'always_log')


class Config(BaseModel):
    """Configuration settings for git-commit-audit.

    This class defines all options that can be set either via a settings
    file (``.gitcommitaudit.toml`` or ``[tool.git-commit-audit]`` in
    ``pyproject.toml``), environment variables or command line arguments.
    """

    threshold: Optional[int] = Field(
        default=None,
        ge=0,
        description="Minimum subject length in characters"
    )

    strict: bool = Field(
        default=False,
        description="Treat warnings as errors"
    )

    disable: List[str] = Field(
        default_factory=list,
        description="Validations to skip entirely (e.g. 'format', 'reference')"
    )

    severity: Dict[str, str] = Field(
        default_factory=dict,
        description="Severity overrides keyed by validation name"
    )

    branches: List[str] = Field(
        default_factory=list,
        description="Glob patterns of branches to analyze (empty for all)"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    _source: Optional[Path] = PrivateAttr(default=None)

    def __init__(self, **data):
        """Initialize config with environment variable support."""
        env_data = {}

        for env_var, field_name in ENV_MAPPING.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if field_name == 'log_file':
                    value = self._sanitize_string(value)

                # Convert boolean values
                if field_name in BOOLEAN_FIELDS:
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        # Explicit values win over the environment
        merged_data = {**env_data, **data}

        super().__init__(**merged_data)

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Remove control characters and cap the length."""
        if not value:
            return value
        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)
        return value[:1000].strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a log path stays inside the working directory."""
        if not path:
            return False
        if '..' in Path(path).parts or os.path.isabs(path) or '\\' in path:
            return False
        return True

    @property
    def source(self) -> Optional[Path]:
        """The file this configuration was loaded from, if any."""
        return self._source

    @staticmethod
    def find_config_file(start_dir: Path) -> Optional[Path]:
        """Find a settings file by walking up from ``start_dir``.

        A dedicated ``.gitcommitaudit.toml`` wins over ``pyproject.toml``
        in the same directory.
        """
        start = Path(start_dir).resolve()
        for directory in (start, *start.parents):
            dedicated = directory / DEFAULT_CONFIG_FILENAME
            if dedicated.exists():
                return dedicated
            pyproject = directory / PYPROJECT_FILENAME
            if pyproject.exists():
                return pyproject
        return None

    @classmethod
    def from_file(cls, config_path: Path) -> 'Config':
        """Load configuration from a dedicated file or pyproject.toml.

        Raises:
            ConfigError: If the file cannot be read or holds invalid values
        """
        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)
        except OSError as e:
            raise ConfigError(f"failed to read config file: {e}") from e
        except tomli.TOMLDecodeError as e:
            raise ConfigError(f"invalid TOML syntax in {config_path}: {e}") from e

        if config_path.name == PYPROJECT_FILENAME:
            config_data = config_data.get('tool', {}).get(PYPROJECT_SECTION, {})

        try:
            config = cls(**config_data)
        except ValidationError as e:
            raise ConfigError(f"invalid configuration in {config_path}: {e}") from e
        config._source = config_path
        return config

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration for a repository.

        Args:
            repo_path: Path to the git repository

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = cls.find_config_file(repo_path)
        if config_path is None:
            return cls()
        return cls.from_file(config_path)

    def save(self, repo_path: Path) -> Path:
        """Save configuration to the dedicated config file.

        Args:
            repo_path: Path to the git repository

        Returns:
            Path: The written file
        """
        config_path = Path(repo_path) / DEFAULT_CONFIG_FILENAME

        # Convert to dict and remove None values
        config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

        if config_dict.get('log_file') and not self._is_safe_path(config_dict['log_file']):
            del config_dict['log_file']

        try:
            with config_path.open('wb') as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            raise ConfigError(f"failed to write config file: {e}") from e
        return config_path

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set and safe.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"gca_log-{timestamp}.log")
        elif self.log_file and self._is_safe_path(self.log_file):
            return Path(self.log_file)
        return None

    def to_validation_config(self) -> ValidationConfig:
        """Build the ValidationConfig described by these settings.

        Disabled validations are applied before severity overrides.

        Raises:
            InvalidValidationError: For an unknown validation name
            InvalidSeverityError: For an unknown severity name
        """
        config = ValidationConfig()
        if self.threshold is not None:
            config.threshold = self.threshold
        for name in self.disable:
            config.disable(Validation.parse(name))
        for name, severity in self.severity.items():
            config.set_severity(Validation.parse(name), Severity.parse(severity))
        return config
