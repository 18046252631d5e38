"""Compiled mask states and their per-character acceptance rules.

A compiled mask is a singly linked chain of immutable ``State`` nodes. Every
variant lives in the one ``State`` type and is told apart by ``kind``; the
acceptance table below is the whole matching policy:

- FIXED / FREE never reject. They either consume a matching character or emit
  their own literal without consuming, and the caller re-offers the character.
- VALUE is the only variant that rejects, which drops the input character.
- OPTIONAL_VALUE passes through without consuming when the class differs.
- END_OF_LINE accepts nothing.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from inputmask.masks.models import Next


class CharacterClass(str, Enum):
    """Character classes a value position can accept."""

    NUMERIC = "numeric"
    LETTER = "letter"
    ALPHANUMERIC = "alphanumeric"

    def accepts(self, character: str) -> bool:
        if self is CharacterClass.NUMERIC:
            return character.isdecimal()
        if self is CharacterClass.LETTER:
            return character.isalpha()
        return character.isalnum()

    @property
    def placeholder(self) -> str:
        return _PLACEHOLDER_CHARACTERS[self]

    @property
    def mandatory_symbol(self) -> str:
        return _MANDATORY_SYMBOLS[self]

    @property
    def optional_symbol(self) -> str:
        return _OPTIONAL_SYMBOLS[self]


_PLACEHOLDER_CHARACTERS = {
    CharacterClass.NUMERIC: "0",
    CharacterClass.LETTER: "a",
    CharacterClass.ALPHANUMERIC: "-",
}
_MANDATORY_SYMBOLS = {
    CharacterClass.NUMERIC: "0",
    CharacterClass.LETTER: "A",
    CharacterClass.ALPHANUMERIC: "_",
}
_OPTIONAL_SYMBOLS = {
    CharacterClass.NUMERIC: "9",
    CharacterClass.LETTER: "a",
    CharacterClass.ALPHANUMERIC: "-",
}


class StateKind(str, Enum):
    FIXED = "fixed"
    FREE = "free"
    VALUE = "value"
    OPTIONAL_VALUE = "optional_value"
    END_OF_LINE = "end_of_line"


@dataclass(frozen=True)
class State:
    """One position of a compiled mask."""

    kind: StateKind
    child: State | None = field(default=None, repr=False)
    literal: str | None = None
    character_class: CharacterClass | None = None
    elliptical: bool = False

    @classmethod
    def fixed(cls, literal: str, child: State) -> State:
        return cls(kind=StateKind.FIXED, child=child, literal=literal)

    @classmethod
    def free(cls, literal: str, child: State) -> State:
        return cls(kind=StateKind.FREE, child=child, literal=literal)

    @classmethod
    def value(cls, character_class: CharacterClass, child: State) -> State:
        return cls(kind=StateKind.VALUE, child=child, character_class=character_class)

    @classmethod
    def ellipsis(cls, character_class: CharacterClass) -> State:
        """Mandatory value state that loops on itself and has no child."""

        return cls(kind=StateKind.VALUE, character_class=character_class, elliptical=True)

    @classmethod
    def optional_value(cls, character_class: CharacterClass, child: State) -> State:
        return cls(kind=StateKind.OPTIONAL_VALUE, child=child, character_class=character_class)

    @classmethod
    def end_of_line(cls) -> State:
        return cls(kind=StateKind.END_OF_LINE)

    @property
    def successor(self) -> State:
        """State reached after this one produced a character."""

        if self.elliptical:
            return self
        if self.child is None:
            raise ValueError(f"{self.kind.value} state has no successor")
        return self.child

    @property
    def value_class(self) -> CharacterClass:
        """Character class accepted by a value or optional value state."""

        if self.character_class is None:
            raise ValueError(f"{self.kind.value} state has no character class")
        return self.character_class

    def accept(self, character: str) -> Next | None:
        """Offer one input character to this state."""

        if self.kind is StateKind.FIXED:
            consumed = character == self.literal
            return Next(
                state=self.successor,
                insert=self.literal,
                consumed=consumed,
                value=self.literal,
            )

        if self.kind is StateKind.FREE:
            consumed = character == self.literal
            return Next(state=self.successor, insert=self.literal, consumed=consumed, value=None)

        if self.kind is StateKind.VALUE:
            if not self.value_class.accepts(character):
                return None
            return Next(state=self.successor, insert=character, consumed=True, value=character)

        if self.kind is StateKind.OPTIONAL_VALUE:
            if self.value_class.accepts(character):
                return Next(
                    state=self.successor,
                    insert=character,
                    consumed=True,
                    value=character,
                )
            return Next(state=self.successor, insert=None, consumed=False, value=None)

        return None

    def autocomplete(self) -> Next | None:
        """Emit this state's literal without user input, if it has one."""

        if self.kind is StateKind.FIXED:
            return Next(
                state=self.successor,
                insert=self.literal,
                consumed=False,
                value=self.literal,
            )
        if self.kind is StateKind.FREE:
            return Next(state=self.successor, insert=self.literal, consumed=False, value=None)
        return None

    @property
    def symbol(self) -> str:
        """Short notation of this state, as it would appear in a format."""

        if self.kind is StateKind.FIXED:
            return f"{{{self.literal}}}"
        if self.kind is StateKind.FREE:
            return str(self.literal)
        if self.kind is StateKind.END_OF_LINE:
            return "EOL"
        if self.elliptical:
            return "[…]"
        if self.kind is StateKind.VALUE:
            return f"[{self.value_class.mandatory_symbol}]"
        return f"[{self.value_class.optional_symbol}]"


def iter_chain(head: State) -> Iterator[State]:
    """Yield states from head up to, not including, END_OF_LINE.

    An elliptical state is yielded once; its self-loop ends the walk.
    """

    state: State | None = head
    while state is not None and state.kind is not StateKind.END_OF_LINE:
        yield state
        state = state.child
