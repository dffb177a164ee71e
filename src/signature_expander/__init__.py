"""Signature Expander - parameter-list classification and template expansion."""

from .application import SignatureExpander
from .domain.exceptions import (
    ModifierMismatchError,
    SignatureEngineError,
    SignatureSyntaxError,
    UnregisteredTemplateError,
)
from .domain.models.signature import ClassSpec, Modifier, ParameterClass, ParsedParameter
from .domain.services.generation import DispatchTable, Renderer
from .infrastructure.config import Config

__all__ = [
    "ClassSpec",
    "Config",
    "DispatchTable",
    "Modifier",
    "ModifierMismatchError",
    "ParameterClass",
    "ParsedParameter",
    "Renderer",
    "SignatureEngineError",
    "SignatureExpander",
    "SignatureSyntaxError",
    "UnregisteredTemplateError",
]
