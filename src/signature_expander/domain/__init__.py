#!/usr/bin/env python3

"""Domain layer containing the signature model and engine services."""

from . import exceptions, models, services

__all__ = [
    "exceptions",
    "models",
    "services",
]
