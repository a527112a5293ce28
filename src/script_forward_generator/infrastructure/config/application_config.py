"""Run configuration for the ScriptForward generator."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ...exceptions import ConfigError
from .generator_config import GeneratorSettings, get_settings

_TRUE_VALUES = ("true", "1", "yes", "on")


@dataclass
class Config:
    """Configuration for one generator invocation."""

    header_path: Optional[Path] = None
    output_dir: Path = Path(".")
    verbose: bool = False
    log_dir: Path = Path("logs")
    file_logging: bool = False
    settings: GeneratorSettings = field(default_factory=GeneratorSettings)

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or a .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        return cls(
            output_dir=Path(os.getenv("SCRIPT_FORWARD_OUTPUT_DIR", ".")),
            verbose=os.getenv("SCRIPT_FORWARD_VERBOSE", "false").lower() in _TRUE_VALUES,
            log_dir=Path(os.getenv("SCRIPT_FORWARD_LOG_DIR", "logs")),
            file_logging=os.getenv("SCRIPT_FORWARD_FILE_LOGGING", "false").lower()
            in _TRUE_VALUES,
            settings=get_settings(),
        )

    @classmethod
    def from_args(
        cls,
        header_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        verbose: Optional[bool] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from command line values, falling back to environment.

        Args:
            header_path: Root C++ header to generate the forward class for
            output_dir: Output directory (overrides env)
            verbose: Enable verbose output (overrides env)
            env_path: Optional .env file

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        if header_path is not None:
            config.header_path = header_path
        if output_dir is not None:
            config.output_dir = output_dir
        if verbose:
            config.verbose = True

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ConfigError: If configuration is invalid
        """
        if self.header_path is None:
            raise ConfigError("No header file given")

        if not self.header_path.exists():
            raise ConfigError(f"Header file not found: {self.header_path}")

        if not self.header_path.is_file():
            raise ConfigError(f"Not a file: {self.header_path}")

        if self.output_dir.exists() and not self.output_dir.is_dir():
            raise ConfigError(f"Output path is not a directory: {self.output_dir}")

    def ensure_output_dir(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
