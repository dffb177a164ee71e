#!/usr/bin/env python3

"""Function declaration model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """A function declaration split around its parameter list.

    ``text`` is the declaration exactly as given; ``parameters`` is the
    verbatim text between the outer parentheses.
    """

    text: str
    name: str
    parameters: str
    qualifiers: tuple[str, ...] = ()
    tag: str | None = None
    suffix: str = ""

    @property
    def head(self) -> str:
        """Everything before the opening parenthesis, e.g. ``stock Float:Mix``."""
        parts = [*self.qualifiers, f"{self.tag or ''}{self.name}"]
        return " ".join(parts)

    def with_parameters(self, parameters: str) -> str:
        """Declaration text with its parameter list replaced."""
        return f"{self.head}({parameters}){self.suffix}"
