#!/usr/bin/env python3

"""Domain models."""

from . import signature

__all__ = ["signature"]
