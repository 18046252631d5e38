from __future__ import annotations

from inputmask.masks.models import CaretString
from inputmask.masks.registry import MaskRegistry
from inputmask.masks.selection import pick_mask
from inputmask.policy.models import AffinityWeights, MaskPolicy


def test_pick_mask_prefers_highest_affinity() -> None:
    registry = MaskRegistry()

    mask, result = pick_mask(
        CaretString.at_end("12345"),
        "[00]{-}[00]",
        ["[00000]"],
        registry=registry,
    )

    assert mask.format == "[00000]"
    assert result.formatted_text.string == "12345"
    assert result.affinity == 5


def test_pick_mask_keeps_primary_on_tie() -> None:
    mask, result = pick_mask(
        CaretString.at_end("12"),
        "[00]",
        ["[09]"],
        registry=MaskRegistry(),
    )

    assert mask.format == "[00]"
    assert result.affinity == 2


def test_pick_mask_without_candidates_uses_primary() -> None:
    registry = MaskRegistry()

    mask, result = pick_mask(
        CaretString.at_end("12"),
        "[00]{-}[00]",
        autocomplete=True,
        registry=registry,
    )

    assert mask is registry.get_or_create("[00]{-}[00]")
    assert result.formatted_text.string == "12-"


def test_pick_mask_uses_empty_injected_registry() -> None:
    registry = MaskRegistry(MaskPolicy(affinity=AffinityWeights(consumed=10)))
    assert len(registry) == 0

    mask, result = pick_mask(CaretString.at_end("12"), "[00]", registry=registry)

    assert result.affinity == 20
    assert "[00]" in registry
    assert mask is registry.get_or_create("[00]")
