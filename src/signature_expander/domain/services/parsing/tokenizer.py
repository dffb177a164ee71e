#!/usr/bin/env python3

"""Parameter list tokenizer.

Splits a raw parameter list into fragments on top-level commas only, so
commas inside default values (``a[] = {1, 2}``, ``s[] = "x,y"``,
``v = f(1, 2)``) never cause a false split.
"""

from ....infrastructure.logging import get_logger
from ...exceptions import SignatureSyntaxError
from ...models.signature import ParameterFragment

logger = get_logger(__name__)

OPENERS = {"(": ")", "[": "]", "{": "}"}
CLOSERS = {")": "(", "]": "[", "}": "{"}
QUOTES = frozenset("\"'")
ESCAPE = "\\"


def skip_quoted(text: str, start: int) -> int:
    """Return the offset just past the quoted literal opening at ``start``."""
    quote = text[start]
    pos = start + 1
    while pos < len(text):
        char = text[pos]
        if char == ESCAPE:
            pos += 2
            continue
        if char == quote:
            return pos + 1
        pos += 1
    raise SignatureSyntaxError("Unterminated quote", text, start)


def find_matching_delimiter(text: str, open_pos: int) -> int:
    """Find the closing delimiter matching the opener at ``open_pos``.

    Nested brackets and quoted literals are skipped.

    Args:
        text: Text to scan
        open_pos: Offset of ``(``, ``[`` or ``{``

    Returns:
        Offset of the matching closer

    Raises:
        SignatureSyntaxError: Mismatched, unbalanced or unterminated input
    """
    stack = [text[open_pos]]
    pos = open_pos + 1
    while pos < len(text):
        char = text[pos]
        if char in QUOTES:
            pos = skip_quoted(text, pos)
            continue
        if char in OPENERS:
            stack.append(char)
        elif char in CLOSERS:
            if stack[-1] != CLOSERS[char]:
                raise SignatureSyntaxError(f"Mismatched {char!r}", text, pos)
            stack.pop()
            if not stack:
                return pos
        pos += 1
    raise SignatureSyntaxError(f"Unbalanced {stack[-1]!r}", text, open_pos)


class ParameterTokenizer:
    """Splits a parameter list into verbatim fragments."""

    def split(self, text: str) -> tuple[ParameterFragment, ...]:
        """Split a parameter list on top-level commas.

        Args:
            text: Parameter list without its enclosing parentheses

        Returns:
            Fragments in source order; empty for a blank list

        Raises:
            SignatureSyntaxError: Unbalanced delimiters, unterminated quote
                or an empty fragment
        """
        if not text.strip():
            logger.debug("Empty parameter list")
            return ()

        fragments: list[ParameterFragment] = []
        stack: list[tuple[str, int]] = []
        start = 0
        pos = 0

        while pos < len(text):
            char = text[pos]
            if char in QUOTES:
                pos = skip_quoted(text, pos)
                continue
            if char in OPENERS:
                stack.append((char, pos))
            elif char in CLOSERS:
                if not stack:
                    raise SignatureSyntaxError(f"Unmatched {char!r}", text, pos)
                opener, _ = stack.pop()
                if opener != CLOSERS[char]:
                    raise SignatureSyntaxError(f"Mismatched {char!r}", text, pos)
            elif char == "," and not stack:
                fragments.append(self._fragment(text, start, pos, len(fragments)))
                start = pos + 1
            pos += 1

        if stack:
            opener, opened_at = stack[-1]
            raise SignatureSyntaxError(f"Unbalanced {opener!r}", text, opened_at)

        fragments.append(self._fragment(text, start, len(text), len(fragments)))
        logger.debug(f"Split parameter list into {len(fragments)} fragments")
        return tuple(fragments)

    @staticmethod
    def _fragment(text: str, start: int, end: int, index: int) -> ParameterFragment:
        fragment_text = text[start:end]
        if not fragment_text.strip():
            raise SignatureSyntaxError(f"Empty parameter #{index + 1}", text, start)
        return ParameterFragment(fragment_text, index=index, start=start, end=end)


def split_parameters(text: str) -> tuple[ParameterFragment, ...]:
    """Split a parameter list with a default tokenizer."""
    return ParameterTokenizer().split(text)
