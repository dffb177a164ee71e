#!/usr/bin/env python3

"""Application layer orchestrating the domain services."""

from .expanders import SignatureExpander

__all__ = ["SignatureExpander"]
