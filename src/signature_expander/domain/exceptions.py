#!/usr/bin/env python3

"""Classified errors raised while parsing and expanding a signature.

All of them abort the pass for the current declaration; the engine never
emits partial output.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.signature import Modifier, ParameterClass, TemplateKey


class SignatureEngineError(ValueError):
    """Base class for every error raised by the engine."""


class SignatureSyntaxError(SignatureEngineError):
    """Malformed parameter list, fragment or declaration."""

    def __init__(self, message: str, text: str = "", position: int | None = None):
        self.text = text
        self.position = position
        if position is not None:
            message = f"{message} (at offset {position} in {text!r})"
        elif text:
            message = f"{message} (in {text!r})"
        super().__init__(message)


class ModifierMismatchError(SignatureEngineError):
    """A decomposition was requested that the parameter class cannot support."""

    def __init__(self, parameter_class: "ParameterClass", modifier: "Modifier", text: str = ""):
        self.parameter_class = parameter_class
        self.modifier = modifier
        self.text = text
        message = f"{parameter_class.name} parameters do not support {modifier.name}"
        if text:
            message = f"{message} (in {text!r})"
        super().__init__(message)


class UnregisteredTemplateError(SignatureEngineError):
    """No template is registered for a (class, modifier set) key."""

    def __init__(self, key: "TemplateKey | str"):
        self.key = key
        super().__init__(f"No template registered for {key}")
