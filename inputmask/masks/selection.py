"""Choose the best-fitting mask among candidate formats for one input."""

from __future__ import annotations

from collections.abc import Sequence

from inputmask.masks.mask import Mask
from inputmask.masks.models import CaretString, Result
from inputmask.masks.registry import MaskRegistry, default_registry


def pick_mask(
    text: CaretString,
    primary_format: str,
    affine_formats: Sequence[str] = (),
    *,
    autocomplete: bool = False,
    registry: MaskRegistry | None = None,
) -> tuple[Mask, Result]:
    """Apply every candidate format and keep the one with the highest affinity.

    Candidates are tried in order, primary first; on equal affinity the
    earlier candidate wins.
    """

    masks = registry if registry is not None else default_registry()
    best_mask = masks.get_or_create(primary_format)
    best_result = best_mask.apply(text, autocomplete=autocomplete)

    for format in affine_formats:
        mask = masks.get_or_create(format)
        result = mask.apply(text, autocomplete=autocomplete)
        if result.affinity > best_result.affinity:
            best_mask, best_result = mask, result

    return best_mask, best_result
