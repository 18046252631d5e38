"""Placeholder generation and length metrics computed from a state chain."""

from __future__ import annotations

from inputmask.masks.states import State, StateKind, iter_chain

_TEXT_MANDATORY = frozenset({StateKind.FIXED, StateKind.FREE, StateKind.VALUE})
_TEXT_ALL = _TEXT_MANDATORY | {StateKind.OPTIONAL_VALUE}
_VALUE_MANDATORY = frozenset({StateKind.FIXED, StateKind.VALUE})
_VALUE_ALL = _VALUE_MANDATORY | {StateKind.OPTIONAL_VALUE}


def build_placeholder(head: State) -> str:
    """Render the mask as text: literals as-is, value positions as class fillers.

    Generation stops at an ellipsis, which has no fixed width.
    """

    chunks: list[str] = []
    for state in iter_chain(head):
        if state.elliptical:
            break
        if state.character_class is not None:
            chunks.append(state.character_class.placeholder)
        else:
            chunks.append(str(state.literal))
    return "".join(chunks)


def min_text_length(head: State) -> int:
    return _count_states(head, _TEXT_MANDATORY)


def max_text_length(head: State) -> int:
    return _count_states(head, _TEXT_ALL)


def min_value_length(head: State) -> int:
    return _count_states(head, _VALUE_MANDATORY)


def max_value_length(head: State) -> int:
    return _count_states(head, _VALUE_ALL)


def describe_chain(head: State) -> str:
    """Render the chain as arrows; an ellipsis loops on itself and ends it."""

    states = list(iter_chain(head))
    symbols = [state.symbol for state in states]
    if not states or not states[-1].elliptical:
        symbols.append("EOL")
    return " -> ".join(symbols)


def _count_states(head: State, kinds: frozenset[StateKind]) -> int:
    # The ellipsis matches zero or more characters and adds no fixed width.
    return sum(1 for state in iter_chain(head) if state.kind in kinds and not state.elliptical)
