#!/usr/bin/env python3

"""Generation services: dispatch table, expansion engine and renderer."""

from .accumulators import DeclarationAccumulator, TextAccumulator
from .dispatch_table import DispatchTable, Hook, Template
from .expansion_engine import ExpansionEngine
from .renderer import Renderer, render
from .stock_templates import identity_table, rebuild_table

__all__ = [
    "DeclarationAccumulator",
    "DispatchTable",
    "ExpansionEngine",
    "Hook",
    "Renderer",
    "Template",
    "TextAccumulator",
    "identity_table",
    "rebuild_table",
    "render",
]
