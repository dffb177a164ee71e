#!/usr/bin/env python3

"""Signature expander orchestrator (Application Layer).

Wires the pipeline together for one class specification and one dispatch
table:

    parameter text -> ParameterTokenizer -> fragments
                   -> ParameterClassifier -> classified parameters
                   -> ExpansionEngine (DispatchTable) -> accumulator
                   -> Renderer -> output text
"""

from collections.abc import Callable, Iterable
from typing import Any

from ...domain.exceptions import SignatureEngineError
from ...domain.models.signature import ClassSpec, Declaration, ParsedParameter
from ...domain.services.generation import (
    DeclarationAccumulator,
    DispatchTable,
    ExpansionEngine,
    Renderer,
    TextAccumulator,
)
from ...domain.services.parsing import ParameterClassifier, ParameterTokenizer, parse_declaration
from ...infrastructure.config import Config
from ...infrastructure.logging import ProgressTracker, get_logger, log_timing

logger = get_logger(__name__)

SeedFactory = Callable[[Declaration], Any]


class SignatureExpander:
    """Classifies parameter lists and expands registered templates over them.

    The class specification and dispatch table are fixed at construction
    and only read afterwards, so one expander can serve any number of
    independent declarations.
    """

    def __init__(
        self,
        class_spec: ClassSpec,
        table: DispatchTable,
        renderer: Renderer | None = None,
        template_prefix: str | None = None,
    ):
        """Initialize the expander and validate its registrations.

        Args:
            class_spec: Parameter classes to detect
            table: Templates for every key the class specification produces
            renderer: Output formatting; defaults to the accumulator's own rendering
            template_prefix: Name grouping this expander's templates in logs

        Raises:
            UnregisteredTemplateError: The table is missing a template or hook
        """
        table.validate(class_spec)
        self.class_spec = class_spec
        self.table = table
        self.renderer = renderer or Renderer()
        self.template_prefix = template_prefix or table.prefix or "expander"
        self.tokenizer = ParameterTokenizer()
        self.classifier = ParameterClassifier()
        self.engine = ExpansionEngine()
        logger.debug(
            f"[{self.template_prefix}] Initialized with {class_spec!r} "
            f"and {len(table)} templates"
        )

    @classmethod
    def from_config(
        cls,
        config: Config,
        table: DispatchTable,
        renderer: Renderer | None = None,
    ) -> "SignatureExpander":
        """Build an expander from the configured class specification and string marker."""
        class_spec = ClassSpec.parse(config.class_spec, string_marker=config.string_marker)
        return cls(class_spec, table, renderer=renderer)

    def classify(self, parameter_text: str) -> tuple[ParsedParameter, ...]:
        """Split and classify a parameter list.

        Args:
            parameter_text: Parameter list without its enclosing parentheses

        Returns:
            Classified parameters in source order
        """
        fragments = self.tokenizer.split(parameter_text)
        return tuple(self.classifier.classify_for(f, self.class_spec) for f in fragments)

    @log_timing
    def expand_parameters(self, parameter_text: str, seed: Any = None) -> str:
        """Expand the templates over a bare parameter list.

        Args:
            parameter_text: Parameter list without its enclosing parentheses
            seed: Initial accumulator; defaults to a ``TextAccumulator`` joining
                with ``","`` and holding ``parameter_text`` as its source

        Returns:
            Rendered output
        """
        if seed is None:
            seed = TextAccumulator(separator=",", source=parameter_text)
        parameters = self.classify(parameter_text)
        accumulator = self.engine.run(parameters, self.table, seed)
        return self.renderer.render(accumulator)

    @log_timing
    def expand_declaration(
        self,
        declaration_text: str,
        seed_factory: SeedFactory | None = None,
    ) -> str:
        """Expand the templates over a whole declaration.

        Args:
            declaration_text: Declaration such as ``stock Mix(a, b[])``
            seed_factory: Builds the initial accumulator from the parsed
                declaration; defaults to ``DeclarationAccumulator.seed``

        Returns:
            Rendered output replacing the declaration
        """
        output, _ = self._expand_declaration(declaration_text, seed_factory)
        return output

    def _expand_declaration(
        self, declaration_text: str, seed_factory: SeedFactory | None
    ) -> tuple[str, int]:
        declaration = parse_declaration(declaration_text)
        seed = (seed_factory or DeclarationAccumulator.seed)(declaration)
        parameters = self.classify(declaration.parameters)
        logger.debug(
            f"[{self.template_prefix}] {declaration.name}: "
            + ", ".join(p.template_key.directive for p in parameters)
        )
        accumulator = self.engine.run(parameters, self.table, seed)
        return self.renderer.render(accumulator), len(parameters)

    def expand_all(
        self,
        declarations: Iterable[str],
        seed_factory: SeedFactory | None = None,
        continue_on_error: bool = False,
    ) -> list[str | None]:
        """Expand a batch of independent declarations.

        Args:
            declarations: Declaration texts
            seed_factory: Passed to ``expand_declaration``
            continue_on_error: Record failed declarations as None instead of raising

        Returns:
            One output per declaration, in input order
        """
        tracker = ProgressTracker(logger)
        results: list[str | None] = []

        with tracker.track_operation(f"{self.template_prefix} batch"):
            for declaration_text in declarations:
                try:
                    with tracker.track_declaration(declaration_text):
                        output, count = self._expand_declaration(declaration_text, seed_factory)
                        tracker.count_parameters(count)
                except SignatureEngineError as e:
                    if not continue_on_error:
                        raise
                    logger.warning(f"[{tracker.get_current_context()}] Skipped {declaration_text!r}: {e}")
                    results.append(None)
                    continue
                results.append(output)

        tracker.report_summary()
        tracker.log_memory_usage()
        return results
