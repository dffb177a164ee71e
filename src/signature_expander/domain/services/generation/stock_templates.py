#!/usr/bin/env python3

"""Stock dispatch tables built for a class specification."""

from typing import Any

from ...models.signature import ClassSpec, ParsedParameter
from .accumulators import TextAccumulator
from .dispatch_table import DispatchTable, Hook, Template


def _identity(accumulator: Any) -> Any:
    return accumulator


def _emit_source(accumulator: Any) -> Any:
    # A blank list has no fragments; its whitespace lives only in the source
    if isinstance(accumulator, TextAccumulator) and accumulator.source:
        return accumulator.append(accumulator.source)
    return accumulator


def _table_for(
    class_spec: ClassSpec, template: Template, prefix: str, empty_hook: Hook = _identity
) -> DispatchTable:
    table = DispatchTable(prefix=prefix)
    for key in class_spec.keys():
        table.register(key.parameter_class, key.modifiers, template)
    table.set_empty_hook(empty_hook)
    table.set_end_hook(_identity)
    return table


def identity_table(class_spec: ClassSpec) -> DispatchTable:
    """Table re-emitting every fragment verbatim.

    Folded over the default ``TextAccumulator`` of
    ``SignatureExpander.expand_parameters`` it reproduces the original
    parameter list byte for byte, blank lists included.
    """

    def emit(parameter: ParsedParameter, accumulator: TextAccumulator) -> TextAccumulator:
        return accumulator.append(parameter.text)

    return _table_for(class_spec, emit, "identity", empty_hook=_emit_source)


def rebuild_table(class_spec: ClassSpec) -> DispatchTable:
    """Table re-emitting every parameter canonically from its decomposed fields."""

    def emit(parameter: ParsedParameter, accumulator: TextAccumulator) -> TextAccumulator:
        return accumulator.append(parameter.rebuild(class_spec.string_marker))

    return _table_for(class_spec, emit, "rebuild")
