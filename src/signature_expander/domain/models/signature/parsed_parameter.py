#!/usr/bin/env python3

"""Classified parameter model."""

from dataclasses import dataclass

from .parameter_class import Modifier, ParameterClass
from .template_key import TemplateKey


@dataclass(frozen=True)
class ParsedParameter:
    """Classification result for one parameter fragment.

    Only the parts requested by the decomposition profile are split out;
    anything left undecomposed stays in ``leading`` / ``trailing`` so the
    fragment can still be re-emitted faithfully.
    """

    parameter_class: ParameterClass
    name: str
    is_const: bool = False
    tag: str | None = None
    dimensions: tuple[str, ...] = ()  # "" for an unsized pair
    default: str | None = None
    modifiers: frozenset[Modifier] = frozenset()
    text: str = ""  # Verbatim fragment text
    leading: str = ""
    trailing: str = ""

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def dimension_count(self) -> int:
        return len(self.dimensions)

    @property
    def is_multi_dimensional(self) -> bool:
        return len(self.dimensions) > 1

    @property
    def template_key(self) -> TemplateKey:
        return TemplateKey(self.parameter_class, self.modifiers)

    def rebuild(self, string_marker: str = "string:") -> str:
        """Re-emit the parameter from its decomposed fields.

        Whitespace is normalized; undecomposed text is carried over as-is.

        Args:
            string_marker: Marker restored in front of string parameters

        Returns:
            Canonical parameter text, e.g. ``const Float:v[3] = {0, 0, 0}``
        """
        parts = []
        if self.parameter_class is ParameterClass.REFERENCE:
            parts.append("&")
        if self.is_const:
            parts.append("const ")
        parts.append(self.leading)
        if self.parameter_class is ParameterClass.STRING:
            parts.append(string_marker)
        elif self.tag:
            parts.append(self.tag)
        parts.append(self.name)
        if self.parameter_class is ParameterClass.VARARG:
            parts.append("...")
        parts.extend(f"[{size}]" for size in self.dimensions)
        parts.append(self.trailing)
        if self.default is not None:
            parts.append(f" = {self.default}")
        return "".join(parts)
