#!/usr/bin/env python3

"""Expansion engine: a left fold of templates over classified parameters."""

from collections.abc import Iterable
from typing import Any

from ....infrastructure.logging import get_logger
from ...models.signature import ParsedParameter
from .dispatch_table import DispatchTable

logger = get_logger(__name__)


class ExpansionEngine:
    """Drives a dispatch table over a classified parameter sequence.

    The fold is strictly sequential: each template sees only the
    accumulator left by its predecessor. For an empty sequence only the
    empty hook runs; otherwise the begin hook, one template per parameter
    and the end hook run, each exactly once.
    """

    def run(
        self,
        parameters: Iterable[ParsedParameter],
        table: DispatchTable,
        seed: Any = None,
    ) -> Any:
        """Fold the table's templates over the parameters.

        Args:
            parameters: Classified parameters in source order
            table: Templates and hooks to apply
            seed: Initial accumulator

        Returns:
            Final accumulator

        Raises:
            UnregisteredTemplateError: A parameter's key or a mandatory hook
                is not registered; raised before any template runs
            TypeError: A template or hook returned None for a non-None accumulator
        """
        # Snapshot; the fold is bounded by this length whatever templates do
        sequence = tuple(parameters)
        empty_hook, end_hook = table.empty_hook, table.end_hook

        if not sequence:
            logger.debug("Empty parameter list, running empty hook only")
            return self._checked(empty_hook(seed), seed, "empty hook")

        # Resolve every template up front so a missing one aborts the pass cleanly
        templates = [table.lookup_key(parameter.template_key) for parameter in sequence]

        accumulator = self._checked(table.begin_hook(seed), seed, "begin hook")
        for parameter, template in zip(sequence, templates):
            accumulator = self._checked(
                template(parameter, accumulator), accumulator, str(parameter.template_key)
            )

        accumulator = self._checked(end_hook(accumulator), accumulator, "end hook")
        logger.debug(f"Folded {len(sequence)} parameters")
        return accumulator

    @staticmethod
    def _checked(result: Any, previous: Any, label: str) -> Any:
        if result is None and previous is not None:
            raise TypeError(f"{label} returned None instead of an accumulator")
        return result
