#!/usr/bin/env python3

"""Parameter fragment model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParameterFragment:
    """Verbatim text of one parameter between top-level commas."""

    text: str
    index: int = 0
    start: int = 0  # Offset of the fragment in the parameter list text
    end: int = 0

    @property
    def stripped(self) -> str:
        return self.text.strip()
