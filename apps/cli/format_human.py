"""Human-readable and JSON rendering of mask results for CLI output."""

from __future__ import annotations

from typing import Any

from inputmask.masks.mask import Mask
from inputmask.masks.models import Result


def render_result_human(mask: Mask, result: Result) -> str:
    """Render one mask application as a short block of key=value lines."""

    formatted = result.formatted_text
    lines: list[str] = []
    lines.append("mask_result:")
    lines.append(f"format={mask.format}")
    lines.append(f"formatted={formatted.string}")
    lines.append(f"caret={formatted.caret_position}")
    lines.append(f"caret_view={_caret_view(formatted.string, formatted.caret_position)}")
    lines.append(f"extracted={result.extracted_value}")
    lines.append(f"affinity={result.affinity}")
    lines.append(f"complete={'yes' if result.complete else 'no'}")
    return "\n".join(lines)


def render_description_human(mask: Mask) -> str:
    lines: list[str] = []
    lines.append("mask_description:")
    lines.append(f"format={mask.format}")
    lines.append(f"placeholder={mask.placeholder}")
    lines.append(f"text_length={mask.min_text_length}..{mask.max_text_length}")
    lines.append(f"value_length={mask.min_value_length}..{mask.max_value_length}")
    lines.append(f"chain: {mask.describe()}")
    return "\n".join(lines)


def result_payload(mask: Mask, result: Result) -> dict[str, Any]:
    return {
        "format": mask.format,
        "formatted_text": result.formatted_text.string,
        "caret_position": result.formatted_text.caret_position,
        "extracted_value": result.extracted_value,
        "affinity": result.affinity,
        "complete": result.complete,
    }


def description_payload(mask: Mask) -> dict[str, Any]:
    return {
        "format": mask.format,
        "placeholder": mask.placeholder,
        "min_text_length": mask.min_text_length,
        "max_text_length": mask.max_text_length,
        "min_value_length": mask.min_value_length,
        "max_value_length": mask.max_value_length,
        "chain": mask.describe(),
    }


def _caret_view(text: str, caret_position: int) -> str:
    return f"{text[:caret_position]}|{text[caret_position:]}"
