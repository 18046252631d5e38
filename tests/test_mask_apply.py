from __future__ import annotations

from inputmask.masks.mask import Mask, compile_mask
from inputmask.masks.models import CaretString, Result
from inputmask.policy.models import AffinityWeights

PHONE_FORMAT = "+7 ([000]) [000]-[00]-[00]"


def _apply(
    format: str, text: str, caret: int | None = None, *, autocomplete: bool = False
) -> Result:
    caret_string = CaretString(string=text, caret_position=len(text) if caret is None else caret)
    return Mask(format).apply(caret_string, autocomplete=autocomplete)


def test_partial_input_stops_before_unfilled_literal() -> None:
    result = _apply("[00]{-}[00]", "12")

    assert result.formatted_text == CaretString(string="12", caret_position=2)
    assert result.extracted_value == "12"
    assert result.complete is False
    assert result.affinity == 2


def test_fixed_literal_is_inserted_and_extracted() -> None:
    result = _apply("[00]{-}[00]", "1234")

    assert result.formatted_text == CaretString(string="12-34", caret_position=5)
    assert result.extracted_value == "12-34"
    assert result.complete is True
    assert result.affinity == 3


def test_free_literal_is_inserted_but_not_extracted() -> None:
    result = _apply("[00]-[00]", "1234")

    assert result.formatted_text == CaretString(string="12-34", caret_position=5)
    assert result.extracted_value == "1234"
    assert result.complete is True
    assert result.affinity == 3


def test_typed_literal_is_consumed() -> None:
    result = _apply("[00]{-}[00]", "12-34")

    assert result.formatted_text.string == "12-34"
    assert result.affinity == 5


def test_trailing_optional_positions_do_not_block_completion() -> None:
    result = _apply("[A][9][9]", "b")

    assert result.formatted_text == CaretString(string="b", caret_position=1)
    assert result.extracted_value == "b"
    assert result.complete is True
    assert result.affinity == 1


def test_ellipsis_consumes_any_number_of_characters() -> None:
    result = _apply("[0…]", "98765")

    assert result.formatted_text == CaretString(string="98765", caret_position=5)
    assert result.extracted_value == "98765"
    assert result.complete is True
    assert result.affinity == 5


def test_ellipsis_outside_value_group_is_a_literal() -> None:
    result = _apply("[0]…", "98765")

    assert result.formatted_text == CaretString(string="9…", caret_position=2)
    assert result.extracted_value == "9"
    assert result.complete is True
    assert result.affinity == -4


def test_ellipsis_alone_is_complete_without_input() -> None:
    assert _apply("[…]", "").complete is True
    assert _apply("[0…]", "").complete is False


def test_leading_literals_shift_caret_right() -> None:
    result = _apply(PHONE_FORMAT, "9")

    assert result.formatted_text == CaretString(string="+7 (9", caret_position=5)
    assert result.extracted_value == "9"
    assert result.affinity == -3
    assert result.complete is False


def test_literal_inserted_after_caret_keeps_caret() -> None:
    result = _apply("[00]{-}[00]", "1234", caret=1)

    assert result.formatted_text == CaretString(string="12-34", caret_position=1)


def test_dropped_character_before_caret_shifts_caret_left() -> None:
    result = _apply("[00]{-}[00]", "1a2", caret=3)

    assert result.formatted_text == CaretString(string="12", caret_position=2)
    assert result.affinity == 1


def test_dropped_character_after_caret_keeps_caret() -> None:
    result = _apply("[00]{-}[00]", "1a2", caret=1)

    assert result.formatted_text == CaretString(string="12", caret_position=1)


def test_input_beyond_mask_is_dropped() -> None:
    result = _apply("[00]", "123")

    assert result.formatted_text == CaretString(string="12", caret_position=2)
    assert result.extracted_value == "12"
    assert result.affinity == 1
    assert result.complete is True


def test_optional_position_is_skipped_for_other_class() -> None:
    result = _apply("[09]{.}[09]", "1.5")

    assert result.formatted_text == CaretString(string="1.5", caret_position=3)
    assert result.extracted_value == "1.5"
    assert result.affinity == 2
    assert result.complete is True


def test_autocomplete_appends_trailing_literals() -> None:
    result = _apply("[00]{-}[00]", "12", autocomplete=True)

    assert result.formatted_text == CaretString(string="12-", caret_position=3)
    assert result.extracted_value == "12-"
    assert result.affinity == 2
    assert result.complete is False


def test_autocomplete_stops_at_value_position() -> None:
    result = _apply(PHONE_FORMAT, "+7 (123", autocomplete=True)

    assert result.formatted_text == CaretString(string="+7 (123) ", caret_position=9)
    assert result.extracted_value == "123"
    assert result.affinity == 7


def test_autocomplete_fills_leading_literals_for_empty_input() -> None:
    result = _apply(PHONE_FORMAT, "", autocomplete=True)

    assert result.formatted_text == CaretString(string="+7 (", caret_position=4)
    assert result.extracted_value == ""
    assert result.affinity == 0


def test_autocomplete_skipped_when_caret_is_inside_text() -> None:
    result = _apply("[00]{-}[00]", "12", caret=1, autocomplete=True)

    assert result.formatted_text == CaretString(string="12", caret_position=1)


def test_custom_affinity_weights() -> None:
    weights = AffinityWeights(consumed=2, not_consumed=0, dropped=-5)
    mask = compile_mask("[00]{-}[00]", affinity=weights)

    result = mask.apply(CaretString.at_end("12a34"))

    assert result.formatted_text == CaretString(string="12-34", caret_position=5)
    assert result.affinity == 3


def test_apply_does_not_change_mask() -> None:
    mask = Mask(PHONE_FORMAT)
    head = mask.initial_state

    first = mask.apply(CaretString.at_end("9991234567"))
    second = mask.apply(CaretString.at_end("9991234567"))

    assert mask.initial_state is head
    assert first == second
    assert first.formatted_text.string == "+7 (999) 123-45-67"
    assert first.complete is True
