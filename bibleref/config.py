"""
bibleref - Configuration

Settings for the command-line wrapper and logging. Uses environment
variables with sensible defaults; a ``.env`` file in the working
directory is loaded first. The parsing core itself takes no settings.
"""
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError
from .observability.logging import LoggingConfig

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Deployment environments."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class OutputFormat(str, Enum):
    """How the CLI prints a parsed reference."""
    TABLE = "table"
    JSON = "json"
    TEXT = "text"


def _environment_from_env() -> Environment:
    raw = os.getenv("BIBLEREF_ENV", "development").lower()
    try:
        return Environment(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown environment '{raw}'",
            config_key="BIBLEREF_ENV",
            actual_value=raw,
            cause=e,
        ) from e


@dataclass
class Config:
    """Main configuration class."""
    env: Environment = field(default_factory=_environment_from_env)
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    # Default CLI output; kept as the raw string so validate() can report it.
    output: str = field(default_factory=lambda: os.getenv("BIBLEREF_OUTPUT", "table").lower())

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == Environment.PRODUCTION

    @property
    def output_format(self) -> OutputFormat:
        try:
            return OutputFormat(self.output)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown output format '{self.output}'",
                config_key="BIBLEREF_OUTPUT",
                actual_value=self.output,
                cause=e,
            ) from e

    def validate(self) -> List[str]:
        """Return a list of configuration problems (empty if valid)."""
        problems = []
        if self.output not in {f.value for f in OutputFormat}:
            problems.append(f"BIBLEREF_OUTPUT must be one of table, json, text (got '{self.output}')")
        if not isinstance(logging.getLevelName(self.logging.level), int):
            problems.append(f"LOG_LEVEL '{self.logging.level}' is not a logging level")
        if self.logging.max_file_size <= 0:
            problems.append("Log file size must be positive")
        return problems

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "env": self.env.value,
            "debug": self.debug,
            "output": self.output,
            "logging": {
                "level": self.logging.level,
                "json_format": self.logging.json_format,
                "log_to_file": self.logging.log_to_file,
                "log_file_path": str(self.logging.log_file_path),
            },
        }


# Singleton configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create configuration singleton."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config() -> Config:
    """Reload configuration from environment."""
    global _config
    load_dotenv(override=True)
    _config = Config()
    return _config
