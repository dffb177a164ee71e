#!/usr/bin/env python3

"""Parameter fragment classifier.

A fragment is read left to right in two passes. The first pass finds its
structure::

    [&] [const] [tag:] name [...] {[size]} [= default]

and yields the structural class. The second pass decomposes the structure
according to a decomposition profile: requested parts become fields of the
``ParsedParameter``, everything else is kept verbatim in its ``leading`` or
``trailing`` text.
"""

import re
from dataclasses import dataclass, field

from ....infrastructure.logging import get_logger
from ...exceptions import ModifierMismatchError, SignatureSyntaxError
from ...models.signature import (
    ClassSpec,
    DecompositionProfile,
    DetectionFlag,
    Modifier,
    ParameterClass,
    ParameterFragment,
    ParsedParameter,
)
from ...models.signature.class_spec import SHAPE_RESTRICTIONS
from ...models.signature.decomposition_profile import MODIFIER_FLAGS
from .tokenizer import CLOSERS, OPENERS, QUOTES, find_matching_delimiter, skip_quoted

logger = get_logger(__name__)

IDENTIFIER = re.compile(r"[A-Za-z_@][A-Za-z0-9_@]*")
CONST_KEYWORD = re.compile(r"const\b")
NAMED_TAG = re.compile(r"([A-Za-z_@][A-Za-z0-9_@]*)\s*:(?!:)")
VARARG_MARKER = "..."

CONST_CAPABLE = frozenset([ParameterClass.NUMBER, ParameterClass.ARRAY, ParameterClass.STRING])


@dataclass
class _Shape:
    """Structural pieces of a fragment, found before any decomposition."""

    text: str
    is_reference: bool = False
    is_const: bool = False
    tag: str | None = None
    name: str = ""
    is_vararg: bool = False
    brackets: list[tuple[str, str]] = field(default_factory=list)  # (raw, interior)
    default: str | None = None
    default_raw: str = ""

    def structural_class(self, profile: DecompositionProfile) -> ParameterClass:
        if self.is_reference:
            return ParameterClass.REFERENCE
        if self.is_vararg:
            return ParameterClass.VARARG
        if not self.brackets:
            return ParameterClass.NUMBER
        if profile.detect_strings and self.tag == profile.string_marker:
            return ParameterClass.STRING
        return ParameterClass.ARRAY


class ParameterClassifier:
    """Classifies parameter fragments into ``ParsedParameter`` records.

    Stateless; a single instance can classify any number of fragments.
    """

    def classify(
        self,
        fragment: ParameterFragment | str,
        profile: DecompositionProfile | None = None,
    ) -> ParsedParameter:
        """Classify a fragment under an explicit decomposition profile.

        The fragment's class is its structural class; the template key uses
        the profile's own modifiers.

        Args:
            fragment: Fragment (or raw text) of one parameter
            profile: Requested decompositions; detects nothing if omitted

        Returns:
            Classified parameter

        Raises:
            SignatureSyntaxError: Malformed fragment
            ModifierMismatchError: The profile requests a decomposition the
                fragment's class cannot support
        """
        profile = profile or DecompositionProfile()
        shape = self._scan(self._text_of(fragment))
        parameter_class = shape.structural_class(profile)

        unsupported = profile.flags & SHAPE_RESTRICTIONS[parameter_class]
        if unsupported:
            modifier = next(m for m, flag in MODIFIER_FLAGS.items() if unsupported & flag)
            raise ModifierMismatchError(parameter_class, modifier, shape.text)

        return self._decompose(shape, parameter_class, parameter_class, profile, profile.modifiers)

    def classify_for(self, fragment: ParameterFragment | str, class_spec: ClassSpec) -> ParsedParameter:
        """Classify a fragment against a registered class specification.

        Unregistered structural classes collapse along the specification's
        collapse chain and use the resolved class's profile.

        Args:
            fragment: Fragment (or raw text) of one parameter
            class_spec: Registered classes and modifiers

        Returns:
            Classified parameter keyed for the dispatch table
        """
        shape = self._scan(self._text_of(fragment))
        probe = DecompositionProfile(
            detect_strings=class_spec.detects_strings,
            string_marker=class_spec.string_marker,
        )
        structural_class = shape.structural_class(probe)
        entry = class_spec.entry_for(structural_class)
        profile = class_spec.profile_for(structural_class)

        if entry.parameter_class is not structural_class:
            logger.debug(
                f"{structural_class.name} parameter {shape.name!r} collapsed into "
                f"{entry.parameter_class.name}"
            )

        return self._decompose(
            shape, structural_class, entry.parameter_class, profile, entry.modifiers
        )

    @staticmethod
    def _text_of(fragment: ParameterFragment | str) -> str:
        if isinstance(fragment, ParameterFragment):
            return fragment.text
        return fragment

    def _scan(self, raw: str) -> _Shape:
        text = raw.strip()
        shape = _Shape(text=raw)
        pos = 0

        def skip_space(at: int) -> int:
            while at < len(text) and text[at].isspace():
                at += 1
            return at

        if text.startswith("&"):
            shape.is_reference = True
            pos = skip_space(1)

        match = CONST_KEYWORD.match(text, pos)
        if match:
            shape.is_const = True
            pos = skip_space(match.end())

        pos = self._scan_tag(shape, text, pos)
        pos = skip_space(pos)

        match = IDENTIFIER.match(text, pos)
        if not match:
            raise SignatureSyntaxError("Expected a parameter name", text, pos)
        shape.name = match.group()
        pos = skip_space(match.end())

        if text.startswith(VARARG_MARKER, pos):
            shape.is_vararg = True
            pos = skip_space(pos + len(VARARG_MARKER))

        while pos < len(text) and text[pos] == "[":
            close = find_matching_delimiter(text, pos)
            shape.brackets.append((text[pos : close + 1], text[pos + 1 : close].strip()))
            pos = skip_space(close + 1)

        if pos < len(text) and text[pos] == "=":
            default = text[pos + 1 :].strip()
            if not default:
                raise SignatureSyntaxError("Missing default value", text, pos)
            self._check_balanced(default, text)
            shape.default = default
            shape.default_raw = text[pos:]
            pos = len(text)

        if pos < len(text):
            raise SignatureSyntaxError(f"Unexpected {text[pos:]!r}", text, pos)

        if shape.brackets and (shape.is_reference or shape.is_vararg):
            kind = "Reference" if shape.is_reference else "Variadic"
            raise SignatureSyntaxError(f"{kind} parameter cannot be an array", text)
        if shape.is_vararg and shape.default is not None:
            raise SignatureSyntaxError("Variadic parameter cannot have a default", text)

        return shape

    @staticmethod
    def _scan_tag(shape: _Shape, text: str, pos: int) -> int:
        # Tag group, e.g. {Float, _}:
        if text.startswith("{", pos):
            close = find_matching_delimiter(text, pos)
            if not text.startswith(":", close + 1):
                raise SignatureSyntaxError("Tag group must end with ':'", text, close)
            shape.tag = text[pos : close + 2]
            return close + 2

        match = NAMED_TAG.match(text, pos)
        if match:
            shape.tag = f"{match.group(1)}:"
            return match.end()
        return pos

    @staticmethod
    def _check_balanced(expression: str, text: str) -> None:
        pos = 0
        while pos < len(expression):
            char = expression[pos]
            if char in QUOTES:
                pos = skip_quoted(expression, pos)
            elif char in OPENERS:
                pos = find_matching_delimiter(expression, pos) + 1
            elif char in CLOSERS:
                raise SignatureSyntaxError(f"Unmatched {char!r}", text)
            else:
                pos += 1

    def _decompose(
        self,
        shape: _Shape,
        structural_class: ParameterClass,
        parameter_class: ParameterClass,
        profile: DecompositionProfile,
        modifiers: frozenset[Modifier],
    ) -> ParsedParameter:
        leading: list[str] = []
        trailing: list[str] = []

        if shape.is_reference and parameter_class is not ParameterClass.REFERENCE:
            leading.append("&")

        is_const = False
        if shape.is_const:
            if profile.requests(DetectionFlag.CONST) and parameter_class in CONST_CAPABLE:
                is_const = True
            else:
                leading.append("const ")

        tag = None
        if structural_class is not ParameterClass.STRING and shape.tag is not None:
            if profile.requests(DetectionFlag.TAG):
                tag = shape.tag
            else:
                leading.append(shape.tag)

        if shape.is_vararg and parameter_class is not ParameterClass.VARARG:
            trailing.append(VARARG_MARKER)

        dimensions: tuple[str, ...] = ()
        if parameter_class in (ParameterClass.ARRAY, ParameterClass.STRING):
            decomposed = 1
            if parameter_class is ParameterClass.ARRAY and profile.requests(
                DetectionFlag.MULTI_DIMENSIONAL
            ):
                decomposed = len(shape.brackets)
            dimensions = tuple(interior for _, interior in shape.brackets[:decomposed])
            trailing.extend(raw for raw, _ in shape.brackets[decomposed:])
        else:
            trailing.extend(raw for raw, _ in shape.brackets)

        default = None
        if shape.default is not None:
            if profile.requests(DetectionFlag.DEFAULT):
                default = shape.default
            else:
                trailing.append(f" {shape.default_raw}")

        return ParsedParameter(
            parameter_class=parameter_class,
            name=shape.name,
            is_const=is_const,
            tag=tag,
            dimensions=dimensions,
            default=default,
            modifiers=modifiers,
            text=shape.text,
            leading="".join(leading),
            trailing="".join(trailing),
        )


def classify(
    fragment: ParameterFragment | str, profile: DecompositionProfile | None = None
) -> ParsedParameter:
    """Classify a fragment with a default classifier."""
    return ParameterClassifier().classify(fragment, profile)
