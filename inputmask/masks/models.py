"""Data models for caret-aware text, matching steps, and mask results."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inputmask.masks.states import State


@dataclass(frozen=True)
class CaretString:
    """Text paired with a caret offset.

    Rules:
    - caret_position counts characters from the start of string.
    - 0 <= caret_position <= len(string).
    """

    string: str
    caret_position: int

    def __post_init__(self) -> None:
        if not 0 <= self.caret_position <= len(self.string):
            raise ValueError(
                f"Caret position {self.caret_position} is outside text of length "
                f"{len(self.string)}"
            )

    @classmethod
    def at_end(cls, string: str) -> CaretString:
        return cls(string=string, caret_position=len(string))

    def iter_characters(self) -> Iterator[tuple[str, bool]]:
        """Yield (character, before_caret) pairs from left to right.

        before_caret is True when the character's index is strictly less than
        the caret position.
        """

        for index, character in enumerate(self.string):
            yield character, index < self.caret_position


@dataclass(frozen=True)
class Next:
    """Outcome of offering one character to a state."""

    state: State
    insert: str | None
    consumed: bool
    value: str | None


@dataclass(frozen=True)
class Result:
    """Output of one mask application."""

    formatted_text: CaretString
    extracted_value: str
    affinity: int
    complete: bool

    def __str__(self) -> str:
        return (
            f"FORMATTED TEXT: {self.formatted_text.string}\n"
            f"CARET POSITION: {self.formatted_text.caret_position}\n"
            f"EXTRACTED VALUE: {self.extracted_value}\n"
            f"AFFINITY: {self.affinity}\n"
            f"COMPLETE: {self.complete}"
        )
