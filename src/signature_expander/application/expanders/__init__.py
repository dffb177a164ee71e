#!/usr/bin/env python3

"""Application-level expanders."""

from .signature_expander import SignatureExpander

__all__ = ["SignatureExpander"]
