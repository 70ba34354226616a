#!/usr/bin/env python3

"""Configuration management for the API utilities command line."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Config:
    """Configuration for the API dump inspector."""

    dump_file_path: Path
    verbose: bool = False
    log_dir: Optional[Path] = None

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

        dump_file_path_str = os.getenv("API_DUMP_PATH", "API-Dump.json")
        verbose_str = os.getenv("VERBOSE", "false").lower()
        log_dir_str = os.getenv("LOG_DIR")

        return cls(
            dump_file_path=Path(dump_file_path_str),
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(log_dir_str) if log_dir_str else None,
        )

    @classmethod
    def from_args(
        cls,
        dump_file_path: Optional[Path] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            dump_file_path: Path to the JSON API dump (overrides env)
            verbose: Enable verbose output (overrides env)
            log_dir: Directory for log files (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if dump_file_path is not None:
            config.dump_file_path = dump_file_path
        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate configuration.

        Raises:
            FileNotFoundError: If the dump file does not exist
            ValueError: If the dump path is not a file
        """
        if not self.dump_file_path.exists():
            raise FileNotFoundError(f"API dump not found: {self.dump_file_path}")

        if not self.dump_file_path.is_file():
            raise ValueError(f"API dump path is not a file: {self.dump_file_path}")
