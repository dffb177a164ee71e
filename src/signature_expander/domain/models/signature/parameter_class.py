#!/usr/bin/env python3

"""Parameter classes and the modifiers a caller can request for them."""

from enum import Enum


class ParameterClass(Enum):
    """Syntactic category of a parameter."""

    NUMBER = "number"
    ARRAY = "array"
    STRING = "string"
    REFERENCE = "reference"
    VARARG = "vararg"


class Modifier(Enum):
    """Optional decomposition a class directive can request.

    Values are the directive spellings (``NUMBER_TAG_DEF``).
    """

    TAG = "TAG"
    MUL = "MUL"
    CST = "CST"
    DEF = "DEF"


# Directive spellings accepted for each class
CLASS_ALIASES: dict[str, ParameterClass] = {
    "NUMBER": ParameterClass.NUMBER,
    "NUM": ParameterClass.NUMBER,
    "ARRAY": ParameterClass.ARRAY,
    "ARR": ParameterClass.ARRAY,
    "STRING": ParameterClass.STRING,
    "STR": ParameterClass.STRING,
    "REFERENCE": ParameterClass.REFERENCE,
    "REF": ParameterClass.REFERENCE,
    "VARARG": ParameterClass.VARARG,
    "EXT": ParameterClass.VARARG,
}

# Modifiers each class can never carry; MUL is simply inert on scalars and strings
UNSUPPORTED_MODIFIERS: dict[ParameterClass, frozenset[Modifier]] = {
    ParameterClass.NUMBER: frozenset(),
    ParameterClass.ARRAY: frozenset(),
    ParameterClass.STRING: frozenset([Modifier.TAG]),
    ParameterClass.REFERENCE: frozenset([Modifier.CST]),
    ParameterClass.VARARG: frozenset([Modifier.CST, Modifier.DEF]),
}

# Class a structural class resolves to when it is not registered
COLLAPSE_TARGETS: dict[ParameterClass, ParameterClass] = {
    ParameterClass.STRING: ParameterClass.ARRAY,
    ParameterClass.ARRAY: ParameterClass.NUMBER,
    ParameterClass.REFERENCE: ParameterClass.NUMBER,
    ParameterClass.VARARG: ParameterClass.NUMBER,
}

CATCH_ALL_CLASS = ParameterClass.NUMBER
