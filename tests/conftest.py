"""Pytest configuration and shared fixtures."""

import sys
from collections import Counter
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from signature_expander.domain.models.signature import ClassSpec, ParsedParameter
from signature_expander.domain.services.generation import DispatchTable
from signature_expander.domain.services.parsing import ParameterClassifier, ParameterTokenizer

# Parameter list shared by the class-count scenarios
SCENARIO_PARAMETERS = 'a, b[], c, const d[], &e = 6, string:f[] = "hi"'


@pytest.fixture(scope="session")
def scenario_parameters() -> str:
    """Return the mixed parameter list used by the counting scenarios."""
    return SCENARIO_PARAMETERS


@pytest.fixture
def tokenizer() -> ParameterTokenizer:
    return ParameterTokenizer()


@pytest.fixture
def classifier() -> ParameterClassifier:
    return ParameterClassifier()


@pytest.fixture
def full_class_spec() -> ClassSpec:
    """Every class registered, with every modifier each class supports."""
    return ClassSpec.parse(
        [
            "NUMBER_TAG_CST_DEF",
            "ARRAY_TAG_CST_DEF_MUL",
            "STRING_CST_DEF",
            "REFERENCE_TAG_DEF",
            "VARARG_TAG",
        ]
    )


def build_counting_table(class_spec: ClassSpec) -> DispatchTable:
    """Table counting parameters per class into a ``Counter`` accumulator."""
    table = DispatchTable(prefix="count")

    def count(parameter: ParsedParameter, accumulator: Counter) -> Counter:
        return accumulator + Counter({parameter.parameter_class: 1})

    for key in class_spec.keys():
        table.register(key.parameter_class, key.modifiers, count)
    table.set_empty_hook(lambda accumulator: accumulator)
    table.set_end_hook(lambda accumulator: accumulator)
    return table


@pytest.fixture
def counting_table():
    """Factory building a per-class counting table for a class specification."""
    return build_counting_table
