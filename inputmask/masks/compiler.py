"""Compiler from mask format strings to state chains.

For instance ``[09]{.}[09]{.}19[00]`` compiles to::

    [0] -> [9] -> {.} -> [0] -> [9] -> {.} -> 1 -> 9 -> [0] -> [0] -> EOL

- characters in ``[]`` become value and optional value states,
- characters in ``{}`` become fixed states,
- other characters become free states,
- the end of the format becomes the end-of-line state.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from functools import partial
from typing import NamedTuple

from inputmask.masks.sanitizer import sanitize
from inputmask.masks.states import CharacterClass, State
from inputmask.utils.errors import FormatError

_ESCAPE = "\\"
_ELLIPSIS = "…"

_Builder = Callable[[State], State]

_MANDATORY_SYMBOLS = {
    "0": CharacterClass.NUMERIC,
    "A": CharacterClass.LETTER,
    "_": CharacterClass.ALPHANUMERIC,
}
_OPTIONAL_SYMBOLS = {
    "9": CharacterClass.NUMERIC,
    "a": CharacterClass.LETTER,
    "-": CharacterClass.ALPHANUMERIC,
}
_INHERITED_CLASSES = {
    "0": CharacterClass.NUMERIC,
    "9": CharacterClass.NUMERIC,
    "A": CharacterClass.LETTER,
    "a": CharacterClass.LETTER,
    "_": CharacterClass.ALPHANUMERIC,
    "-": CharacterClass.ALPHANUMERIC,
    _ELLIPSIS: CharacterClass.ALPHANUMERIC,
    "[": CharacterClass.ALPHANUMERIC,
}


class _Bracket(Enum):
    NONE = "none"
    VALUE = "value"
    FIXED = "fixed"


class _Context(NamedTuple):
    bracket: _Bracket
    previous: str | None


_BRACKET_TRANSITIONS = {
    "[": _Bracket.VALUE,
    "{": _Bracket.FIXED,
    "]": _Bracket.NONE,
    "}": _Bracket.NONE,
}


def compile_format(pattern: str) -> State:
    """Sanitize and compile a mask format into the head of its state chain.

    Raises:
        FormatError: when the format is malformed. No partial chain is built.
    """

    sanitized = sanitize(pattern)
    builders, tail = _scan(sanitized, pattern)

    state = tail
    for build in reversed(builders):
        state = build(state)
    return state


def _scan(sanitized: str, pattern: str) -> tuple[list[_Builder], State]:
    """Walk the format once, collecting one builder per state and the final state."""

    builders: list[_Builder] = []
    context = _Context(bracket=_Bracket.NONE, previous=None)

    for char in sanitized:
        escaped = context.previous == _ESCAPE

        if not escaped and char in _BRACKET_TRANSITIONS:
            context = _Context(bracket=_BRACKET_TRANSITIONS[char], previous=char)
            continue
        if not escaped and char == _ESCAPE:
            context = _Context(bracket=context.bracket, previous=char)
            continue

        if context.bracket is _Bracket.VALUE:
            if char == _ELLIPSIS:
                return builders, State.ellipsis(_inherited_class(context.previous, pattern))
            builders.append(_value_builder(char, pattern))
        elif context.bracket is _Bracket.FIXED:
            builders.append(partial(State.fixed, char))
        else:
            builders.append(partial(State.free, char))

        # An escaped backslash is a literal and must not escape what follows it.
        previous = None if escaped and char == _ESCAPE else char
        context = _Context(bracket=context.bracket, previous=previous)

    return builders, State.end_of_line()


def _value_builder(char: str, pattern: str) -> _Builder:
    if char in _MANDATORY_SYMBOLS:
        return partial(State.value, _MANDATORY_SYMBOLS[char])
    if char in _OPTIONAL_SYMBOLS:
        return partial(State.optional_value, _OPTIONAL_SYMBOLS[char])
    raise FormatError(f"Unsupported symbol '{char}' in value group", pattern=pattern)


def _inherited_class(previous: str | None, pattern: str) -> CharacterClass:
    if previous is None or previous not in _INHERITED_CLASSES:
        raise FormatError(
            "Ellipsis must follow a value symbol or open a value group",
            pattern=pattern,
        )
    return _INHERITED_CLASSES[previous]
