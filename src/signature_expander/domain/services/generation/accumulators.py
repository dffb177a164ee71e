#!/usr/bin/env python3

"""Stock accumulators threaded through the expansion fold.

Both are immutable: every update returns a new instance, so a template
can never observe state written by a later template.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from ...models.signature import Declaration


@dataclass(frozen=True)
class TextAccumulator:
    """Running list of text pieces joined with a separator.

    ``source`` holds the parameter list the fold runs over, so an empty
    hook can still reproduce a blank list verbatim.
    """

    parts: tuple[str, ...] = ()
    separator: str = ""
    source: str = ""

    def append(self, text: str) -> "TextAccumulator":
        return replace(self, parts=(*self.parts, text))

    def render(self) -> str:
        return self.separator.join(self.parts)


@dataclass(frozen=True)
class DeclarationAccumulator:
    """Generated content around a declaration plus named running values.

    Renders as ``prologue + declaration text + epilogue``, so the original
    declaration is kept verbatim unless a template replaces it.
    """

    declaration: Declaration
    prologue: tuple[str, ...] = ()
    epilogue: tuple[str, ...] = ()
    values: dict[str, Any] = field(default_factory=dict)
    body: str | None = None  # Replacement for the declaration text

    @classmethod
    def seed(cls, declaration: Declaration) -> "DeclarationAccumulator":
        return cls(declaration=declaration)

    def add_prologue(self, text: str) -> "DeclarationAccumulator":
        return replace(self, prologue=(*self.prologue, text))

    def add_epilogue(self, text: str) -> "DeclarationAccumulator":
        return replace(self, epilogue=(*self.epilogue, text))

    def rewrite(self, text: str) -> "DeclarationAccumulator":
        """Replace the declaration text in the rendered output."""
        return replace(self, body=text)

    def with_value(self, name: str, value: Any) -> "DeclarationAccumulator":
        return replace(self, values={**self.values, name: value})

    def value(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def render(self) -> str:
        body = self.declaration.text if self.body is None else self.body
        return "".join(self.prologue) + body + "".join(self.epilogue)
