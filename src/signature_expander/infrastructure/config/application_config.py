"""Configuration management for the signature expander."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_STRING_MARKER = "string:"
DEFAULT_CLASS_SPEC = "NUMBER,ARRAY"


@dataclass
class Config:
    """Configuration for the signature expander."""

    string_marker: str = DEFAULT_STRING_MARKER
    class_spec: str = DEFAULT_CLASS_SPEC
    verbose: bool = False
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        string_marker = os.getenv("SIGNATURE_STRING_MARKER", DEFAULT_STRING_MARKER)
        class_spec = os.getenv("SIGNATURE_CLASS_SPEC", DEFAULT_CLASS_SPEC)
        verbose_str = os.getenv("SIGNATURE_VERBOSE", "false").lower()
        log_dir_str = os.getenv("SIGNATURE_LOG_DIR", "logs")

        return cls(
            string_marker=string_marker,
            class_spec=class_spec,
            verbose=verbose_str in ("true", "1", "yes", "on"),
            log_dir=Path(log_dir_str),
        )

    @classmethod
    def from_args(
        cls,
        string_marker: Optional[str] = None,
        class_spec: Optional[str] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            string_marker: Tag marking string parameters (overrides env)
            class_spec: Comma-separated class directives (overrides env)
            verbose: Enable verbose output (overrides env)
            log_dir: Directory for log files (overrides env)
            env_path: Optional path to .env file

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        if string_marker is not None:
            config.string_marker = string_marker
        if class_spec is not None:
            config.class_spec = class_spec
        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        from ...domain.models.signature import ClassSpec

        marker = self.string_marker
        if not marker or not marker.endswith(":") or not marker[:-1].isidentifier():
            raise ValueError(f"String marker must be an identifier followed by ':': {marker!r}")

        # Directive errors are ValueError subclasses
        ClassSpec.parse(self.class_spec)

    def ensure_log_dir(self) -> None:
        """Create the log directory if it doesn't exist."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
