#!/usr/bin/env python3

"""Domain services layer."""

from . import generation, parsing

__all__ = [
    "generation",
    "parsing",
]
