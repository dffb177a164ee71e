#!/usr/bin/env python3

"""Renderer: turns a final accumulator into output text."""

import dataclasses
from collections.abc import Callable, Mapping
from typing import Any


class Renderer:
    """Formats a final accumulator; performs no classification or dispatch.

    Rendering precedence:
    1. an explicit ``formatter`` callable;
    2. a ``pattern`` interpolated with the accumulator's fields;
    3. the accumulator's own ``render()`` method;
    4. a plain string accumulator, returned as-is.
    """

    def __init__(
        self,
        pattern: str | None = None,
        formatter: Callable[[Any], str] | None = None,
    ):
        self.pattern = pattern
        self.formatter = formatter

    def render(self, accumulator: Any) -> str:
        """Render a final accumulator.

        Raises:
            TypeError: The accumulator has no textual form
            KeyError: The pattern names a field the accumulator lacks
        """
        if self.formatter is not None:
            return self.formatter(accumulator)
        if self.pattern is not None:
            return self.pattern.format_map(self._fields(accumulator))
        if callable(getattr(accumulator, "render", None)):
            return accumulator.render()
        if isinstance(accumulator, str):
            return accumulator
        raise TypeError(f"Cannot render accumulator of type {type(accumulator).__name__}")

    @staticmethod
    def _fields(accumulator: Any) -> Mapping[str, Any]:
        if isinstance(accumulator, Mapping):
            return accumulator
        if dataclasses.is_dataclass(accumulator) and not isinstance(accumulator, type):
            return {f.name: getattr(accumulator, f.name) for f in dataclasses.fields(accumulator)}
        if hasattr(accumulator, "__dict__"):
            return vars(accumulator)
        raise TypeError(f"Cannot interpolate accumulator of type {type(accumulator).__name__}")


def render(accumulator: Any) -> str:
    """Render an accumulator with the default precedence."""
    return Renderer().render(accumulator)
