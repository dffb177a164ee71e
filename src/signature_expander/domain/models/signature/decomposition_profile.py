#!/usr/bin/env python3

"""Decomposition profile: which modifiers the classifier splits out."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Flag, auto

from .parameter_class import Modifier

DEFAULT_STRING_MARKER = "string:"


class DetectionFlag(Flag):
    """Independently requestable decompositions."""

    NONE = 0
    TAG = auto()
    CONST = auto()
    DEFAULT = auto()
    MULTI_DIMENSIONAL = auto()


MODIFIER_FLAGS: dict[Modifier, DetectionFlag] = {
    Modifier.TAG: DetectionFlag.TAG,
    Modifier.CST: DetectionFlag.CONST,
    Modifier.DEF: DetectionFlag.DEFAULT,
    Modifier.MUL: DetectionFlag.MULTI_DIMENSIONAL,
}


@dataclass(frozen=True)
class DecompositionProfile:
    """How aggressively a fragment is decomposed.

    Attributes:
        flags: Requested decompositions
        detect_strings: Whether the string marker turns arrays into strings
        string_marker: Tag text marking a string parameter
    """

    flags: DetectionFlag = DetectionFlag.NONE
    detect_strings: bool = False
    string_marker: str = DEFAULT_STRING_MARKER

    @classmethod
    def from_modifiers(
        cls,
        modifiers: Iterable[Modifier],
        detect_strings: bool = False,
        string_marker: str = DEFAULT_STRING_MARKER,
    ) -> "DecompositionProfile":
        flags = DetectionFlag.NONE
        for modifier in modifiers:
            flags |= MODIFIER_FLAGS[modifier]
        return cls(flags=flags, detect_strings=detect_strings, string_marker=string_marker)

    def requests(self, flag: DetectionFlag) -> bool:
        """Check whether a decomposition is requested."""
        return bool(self.flags & flag)

    def without(self, flags: DetectionFlag) -> "DecompositionProfile":
        """Return a copy with the given decompositions removed."""
        return DecompositionProfile(
            flags=self.flags & ~flags,
            detect_strings=self.detect_strings,
            string_marker=self.string_marker,
        )

    @property
    def modifiers(self) -> frozenset[Modifier]:
        """Modifier spelling of the requested flags."""
        return frozenset(m for m, flag in MODIFIER_FLAGS.items() if self.flags & flag)
