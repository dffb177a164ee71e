#!/usr/bin/env python3

"""Dispatch table mapping (class, modifier set) keys to templates."""

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ....infrastructure.logging import get_logger
from ...exceptions import UnregisteredTemplateError
from ...models.signature import ClassEntry, ClassSpec, Modifier, ParameterClass, ParsedParameter, TemplateKey

logger = get_logger(__name__)

Template = Callable[[ParsedParameter, Any], Any]
Hook = Callable[[Any], Any]

EMPTY_HOOK = "empty hook"
END_HOOK = "end hook"


def _identity(accumulator: Any) -> Any:
    return accumulator


class DispatchTable:
    """Registry of per-parameter templates and list hooks.

    Lookup is by exact key: a class plus an unordered modifier set. There is
    no fallback to a less specific template; a missing key is a
    configuration error reported as ``UnregisteredTemplateError``.

    Besides per-parameter templates the table holds two mandatory hooks:
    the empty hook, run instead of everything else for an empty parameter
    list, and the end hook, run once after the last parameter. An optional
    begin hook runs once before the first parameter.
    """

    def __init__(self, prefix: str = ""):
        """Create an empty table.

        Args:
            prefix: Name grouping the templates of one expander, used in logs
        """
        self.prefix = prefix
        self._templates: dict[TemplateKey, Template] = {}
        self._empty_hook: Hook | None = None
        self._end_hook: Hook | None = None
        self._begin_hook: Hook = _identity

    def register(
        self,
        parameter_class: ParameterClass,
        modifiers: Iterable[Modifier] = (),
        template: Template | None = None,
        *,
        replace: bool = False,
    ) -> Any:
        """Register a template for a class and modifier set.

        Can be used directly or as a decorator::

            @table.register(ParameterClass.ARRAY, {Modifier.MUL})
            def array(parameter, accumulator): ...

        Raises:
            ValueError: The key is already registered and ``replace`` is false
        """
        key = TemplateKey.of(parameter_class, modifiers)

        def decorator(func: Template) -> Template:
            if key in self._templates and not replace:
                raise ValueError(f"Template already registered for {key}")
            self._templates[key] = func
            logger.debug(f"[{self.prefix or 'templates'}] Registered {key}")
            return func

        if template is None:
            return decorator
        return decorator(template)

    def register_directive(self, directive: str, template: Template | None = None, *, replace: bool = False) -> Any:
        """Register a template by directive spelling, e.g. ``"ARRAY_MUL_CST"``."""
        entry = ClassEntry.parse(directive)
        return self.register(entry.parameter_class, entry.modifiers, template, replace=replace)

    def lookup(self, parameter_class: ParameterClass, modifiers: Iterable[Modifier] = ()) -> Template:
        """Find the template registered for exactly this class and modifier set."""
        return self.lookup_key(TemplateKey.of(parameter_class, modifiers))

    def lookup_key(self, key: TemplateKey) -> Template:
        try:
            return self._templates[key]
        except KeyError:
            raise UnregisteredTemplateError(key) from None

    def set_empty_hook(self, hook: Hook) -> Hook:
        self._empty_hook = hook
        return hook

    def set_end_hook(self, hook: Hook) -> Hook:
        self._end_hook = hook
        return hook

    def set_begin_hook(self, hook: Hook) -> Hook:
        self._begin_hook = hook
        return hook

    @property
    def empty_hook(self) -> Hook:
        if self._empty_hook is None:
            raise UnregisteredTemplateError(EMPTY_HOOK)
        return self._empty_hook

    @property
    def end_hook(self) -> Hook:
        if self._end_hook is None:
            raise UnregisteredTemplateError(END_HOOK)
        return self._end_hook

    @property
    def begin_hook(self) -> Hook:
        return self._begin_hook

    def validate(self, class_spec: ClassSpec) -> None:
        """Check that every key the class specification can produce is registered.

        Raises:
            UnregisteredTemplateError: A template or a mandatory hook is missing
        """
        _ = self.empty_hook, self.end_hook
        for key in class_spec.keys():
            self.lookup_key(key)

    def keys(self) -> list[TemplateKey]:
        return list(self._templates)

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __iter__(self) -> Iterator[TemplateKey]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)
