#!/usr/bin/env python3

"""Signature models: parameter classes, fragments and classification results."""

from .class_spec import ClassEntry, ClassSpec
from .declaration import Declaration
from .decomposition_profile import DecompositionProfile, DetectionFlag
from .parameter_class import Modifier, ParameterClass
from .parameter_fragment import ParameterFragment
from .parsed_parameter import ParsedParameter
from .template_key import TemplateKey

__all__ = [
    "ClassEntry",
    "ClassSpec",
    "Declaration",
    "DecompositionProfile",
    "DetectionFlag",
    "Modifier",
    "ParameterClass",
    "ParameterFragment",
    "ParsedParameter",
    "TemplateKey",
]
