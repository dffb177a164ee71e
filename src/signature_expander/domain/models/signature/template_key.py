#!/usr/bin/env python3

"""Dispatch table key model."""

from collections.abc import Iterable
from dataclasses import dataclass

from .parameter_class import Modifier, ParameterClass


@dataclass(frozen=True)
class TemplateKey:
    """Exact lookup key: a parameter class plus an unordered modifier set."""

    parameter_class: ParameterClass
    modifiers: frozenset[Modifier] = frozenset()

    @classmethod
    def of(cls, parameter_class: ParameterClass, modifiers: Iterable[Modifier] = ()) -> "TemplateKey":
        return cls(parameter_class, frozenset(modifiers))

    @property
    def directive(self) -> str:
        """Directive spelling, modifiers in canonical order (``ARRAY_CST_MUL``)."""
        parts = [self.parameter_class.name]
        parts.extend(m.value for m in sorted(self.modifiers, key=lambda m: m.value))
        return "_".join(parts)

    def __str__(self) -> str:
        return self.directive
