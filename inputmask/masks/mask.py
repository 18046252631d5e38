"""Mask: applies a compiled state chain to caret-aware user input."""

from __future__ import annotations

from inputmask.masks import metrics
from inputmask.masks.compiler import compile_format
from inputmask.masks.models import CaretString, Result
from inputmask.masks.states import State, StateKind
from inputmask.policy.models import AffinityWeights


class Mask:
    """Formats input, extracts its value, and scores it against one format.

    The state chain is compiled once in the constructor and never mutated, so
    one instance can serve any number of concurrent ``apply`` calls.
    """

    def __init__(self, format: str, *, affinity: AffinityWeights | None = None) -> None:
        self.format = format
        self.affinity_weights = affinity or AffinityWeights()
        self.initial_state: State = compile_format(format)

    def apply(self, text: CaretString, autocomplete: bool = False) -> Result:
        """Apply the mask to user input with its current caret position.

        Rules:
        - A consumed character advances the input.
        - A character that is not consumed is offered again to the next state;
          a literal inserted before the caret shifts the caret right.
        - A rejected character is dropped; dropping before the caret shifts
          the caret left.
        - Trailing literals are autocompleted only when requested and the last
          input character sits before the caret.
        """

        weights = self.affinity_weights
        state = self.initial_state
        affinity = 0
        formatted: list[str] = []
        extracted: list[str] = []
        caret_position = text.caret_position

        characters = text.iter_characters()
        current = next(characters, None)
        before_caret = True

        while current is not None:
            character, before_caret = current
            step = state.accept(character)

            if step is None:
                if before_caret:
                    caret_position -= 1
                affinity += weights.dropped
                current = next(characters, None)
                continue

            state = step.state
            if step.insert is not None:
                formatted.append(step.insert)
            if step.value is not None:
                extracted.append(step.value)

            if step.consumed:
                affinity += weights.consumed
                current = next(characters, None)
            else:
                if before_caret and step.insert is not None:
                    caret_position += 1
                affinity += weights.not_consumed

        if autocomplete and before_caret:
            step = state.autocomplete()
            while step is not None:
                state = step.state
                if step.insert is not None:
                    formatted.append(step.insert)
                    caret_position += 1
                if step.value is not None:
                    extracted.append(step.value)
                step = state.autocomplete()

        return Result(
            formatted_text=CaretString(string="".join(formatted), caret_position=caret_position),
            extracted_value="".join(extracted),
            affinity=affinity,
            complete=_no_mandatory_states_left(state),
        )

    @property
    def placeholder(self) -> str:
        return metrics.build_placeholder(self.initial_state)

    @property
    def min_text_length(self) -> int:
        """Text length needed to fill every mandatory position."""

        return metrics.min_text_length(self.initial_state)

    @property
    def max_text_length(self) -> int:
        """Text length with every mandatory and optional position filled."""

        return metrics.max_text_length(self.initial_state)

    @property
    def min_value_length(self) -> int:
        return metrics.min_value_length(self.initial_state)

    @property
    def max_value_length(self) -> int:
        return metrics.max_value_length(self.initial_state)

    def describe(self) -> str:
        return metrics.describe_chain(self.initial_state)

    def __repr__(self) -> str:
        return f"Mask({self.format!r})"


def compile_mask(format: str, *, affinity: AffinityWeights | None = None) -> Mask:
    """Compile a mask format without touching any registry."""

    return Mask(format, affinity=affinity)


def _no_mandatory_states_left(state: State) -> bool:
    current = state
    while True:
        if current.kind is StateKind.END_OF_LINE:
            return True
        if current.kind is StateKind.VALUE:
            return current.elliptical
        if current.kind in (StateKind.FIXED, StateKind.FREE):
            return False
        current = current.successor
