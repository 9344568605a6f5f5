"""
Configuration management for ipsetparse.

Loads settings from environment variables or a .env file.
"""

import os
from pathlib import Path
from dataclasses import dataclass

from dotenv import load_dotenv

# Check common locations for .env
env_locations = [
    Path.home() / ".ipsetparse" / ".env",
    Path.home() / ".config" / "ipsetparse" / ".env",
    Path.cwd() / ".env",
]
for env_path in env_locations:
    if env_path.exists():
        load_dotenv(env_path)
        break


@dataclass
class ParserConfig:
    """Settings for command line sessions."""

    # Logging
    log_level: str = "WARNING"
    log_file: str = ""

    # Initial session state
    output_mode: str = "plain"
    family: str = ""

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Load configuration from environment variables."""
        return cls(
            log_level=os.getenv("IPSETPARSE_LOG_LEVEL", "WARNING"),
            log_file=os.getenv("IPSETPARSE_LOG_FILE", ""),
            output_mode=os.getenv("IPSETPARSE_OUTPUT", "plain"),
            family=os.getenv("IPSETPARSE_FAMILY", ""),
        )


# Global config instance
_config: ParserConfig | None = None


def get_config() -> ParserConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ParserConfig.from_env()
    return _config


def set_config(config: ParserConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
