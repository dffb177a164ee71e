#!/usr/bin/env python3

"""Declaration parser: locates the name and parameter list of a declaration."""

import re

from ....infrastructure.logging import get_logger
from ...exceptions import SignatureSyntaxError
from ...models.signature import Declaration
from .tokenizer import find_matching_delimiter

logger = get_logger(__name__)

QUALIFIERS = frozenset(["stock", "public", "static", "forward", "native", "const"])
HEAD = re.compile(
    r"^\s*(?P<words>(?:[A-Za-z_@][A-Za-z0-9_@]*\s+)*)"
    r"(?:(?P<tag>[A-Za-z_@][A-Za-z0-9_@]*)\s*:(?!:)\s*)?"
    r"(?P<name>[A-Za-z_@][A-Za-z0-9_@]*)\s*\($"
)


def parse_declaration(text: str) -> Declaration:
    """Split a declaration into qualifiers, return tag, name and parameters.

    Args:
        text: Declaration such as ``stock Float:Mix(a, b[] = {1, 2});``

    Returns:
        Declaration with the verbatim parameter list

    Raises:
        SignatureSyntaxError: No parameter list, unbalanced parentheses,
            an unknown qualifier or a missing name
    """
    open_pos = text.find("(")
    if open_pos < 0:
        raise SignatureSyntaxError("Declaration has no parameter list", text)

    close_pos = find_matching_delimiter(text, open_pos)

    match = HEAD.match(text[: open_pos + 1])
    if not match or match.group("name") in QUALIFIERS:
        raise SignatureSyntaxError("Expected a function name before '('", text, open_pos)

    qualifiers = tuple(match.group("words").split())
    unknown = [word for word in qualifiers if word not in QUALIFIERS]
    if unknown:
        raise SignatureSyntaxError(f"Unknown qualifier {unknown[0]!r}", text)

    tag = match.group("tag")
    declaration = Declaration(
        text=text,
        name=match.group("name"),
        parameters=text[open_pos + 1 : close_pos],
        qualifiers=qualifiers,
        tag=f"{tag}:" if tag else None,
        suffix=text[close_pos + 1 :],
    )
    logger.debug(f"Parsed declaration {declaration.name!r} ({len(qualifiers)} qualifiers)")
    return declaration
