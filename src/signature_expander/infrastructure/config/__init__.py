"""Infrastructure configuration module."""

from .application_config import DEFAULT_CLASS_SPEC, DEFAULT_STRING_MARKER, Config

__all__ = ["Config", "DEFAULT_CLASS_SPEC", "DEFAULT_STRING_MARKER"]
