#!/usr/bin/env python3

"""Parsing services: tokenizer, classifier and declaration parser."""

from .classifier import ParameterClassifier, classify
from .declaration_parser import parse_declaration
from .tokenizer import ParameterTokenizer, split_parameters

__all__ = [
    "ParameterClassifier",
    "ParameterTokenizer",
    "classify",
    "parse_declaration",
    "split_parameters",
]
