"""Configuration management for committable."""
from pathlib import Path
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
import tomli
import tomli_w
import os
import re
import sys

DEFAULT_CONFIG_FILENAME = ".committable.toml"

OUTPUT_FORMATS = ("pretty", "json")

class Config(BaseModel):
    """Configuration settings for committable.

    Only output and logging are configurable. The rules and their
    limits are fixed.
    """

    output_format: str = Field(
        default="pretty",
        description="How failures are reported (pretty or json)"
    )

    color: bool = Field(
        default=True,
        description="Whether to use colors in terminal output"
    )

    quiet: bool = Field(
        default=False,
        description="Whether to suppress the success message"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters and shell metacharacters from a setting."""
        if not value:
            return value

        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)
        value = re.split(r'[;&|`$()]', value)[0]

        if len(value) > 1000:
            value = value[:1000]

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
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Directory holding the config file

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            for key in ['output_format', 'log_file']:
                if key in config_data and isinstance(config_data[key], str):
                    config_data[key] = cls._sanitize_string(config_data[key])

            if config_data.get('log_file') and not cls._is_safe_path(config_data['log_file']):
                print(f"Warning: Unsafe log file path '{config_data['log_file']}', using default", file=sys.stderr)
                config_data['log_file'] = None

            if config_data.get('output_format', 'pretty') not in OUTPUT_FORMATS:
                print(f"Warning: Unknown output format '{config_data['output_format']}', using default", file=sys.stderr)
                config_data.pop('output_format')

            return cls(**config_data)
        except Exception as e:
            # If there's any error reading the config, use defaults
            print(f"Warning: Error reading config file: {e}", file=sys.stderr)
            return cls()

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Directory to write the config file into
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        try:
            config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

            if config_dict.get('log_file') and not self._is_safe_path(config_dict['log_file']):
                print(f"Warning: Unsafe log file path '{config_dict['log_file']}', not saving", file=sys.stderr)
                del config_dict['log_file']

            with config_path.open('wb') as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            print(f"Error saving config file: {e}", file=sys.stderr)

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"committable-{timestamp}.log")
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            else:
                print(f"Warning: Unsafe log file path '{self.log_file}', using default", file=sys.stderr)
                return None
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        env_data = {}

        env_mapping = {
            'COMMITTABLE_OUTPUT_FORMAT': 'output_format',
            'COMMITTABLE_COLOR': 'color',
            'COMMITTABLE_QUIET': 'quiet',
            'COMMITTABLE_ALWAYS_LOG': 'always_log',
            'COMMITTABLE_LOG_FILE': 'log_file',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if field_name in ['output_format', 'log_file']:
                    value = self._sanitize_string(value)

                if field_name in ['color', 'quiet', 'always_log']:
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        # Explicit values win over the environment
        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
