"""Typer CLI entrypoint for inputmask."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Literal, cast

import typer

from apps.cli.format_human import (
    description_payload,
    render_description_human,
    render_result_human,
    result_payload,
)
from inputmask.masks.mask import Mask
from inputmask.masks.models import CaretString
from inputmask.masks.registry import MaskRegistry
from inputmask.policy.policy_loader import load_policy
from inputmask.utils.errors import FormatError

app = typer.Typer(help="Input mask CLI", rich_markup_mode=None)
ReportMode = Literal["human", "json"]


@app.callback()
def cli_callback() -> None:
    """CLI root callback to keep subcommands explicit."""


@app.command("apply")
def apply_command(
    format: Annotated[str, typer.Option("--format", help="Mask format, e.g. [00]{-}[00].")],
    text: Annotated[str, typer.Option("--text", help="User input to format.")],
    caret: Annotated[
        int | None,
        typer.Option("--caret", help="Caret position in the input; defaults to its end."),
    ] = None,
    autocomplete: Annotated[
        bool | None,
        typer.Option(
            "--autocomplete/--no-autocomplete",
            help="Append trailing literals; defaults to the policy setting.",
        ),
    ] = None,
    policy: Annotated[Path | None, typer.Option()] = None,
    report: Annotated[str, typer.Option()] = "human",
) -> None:
    """Apply a mask to one input and print the result."""

    report_mode = _parse_report_mode(report)

    try:
        policy_model = load_policy(policy)
        caret_string = CaretString(
            string=text,
            caret_position=len(text) if caret is None else caret,
        )
    except ValueError as exc:
        typer.echo(f"ERROR: {exc}")
        raise typer.Exit(code=1) from exc

    mask = _build_mask(MaskRegistry(policy_model), format)
    use_autocomplete = policy_model.autocomplete if autocomplete is None else autocomplete
    result = mask.apply(caret_string, autocomplete=use_autocomplete)

    if report_mode == "json":
        _echo_json(result_payload(mask, result))
    else:
        typer.echo(render_result_human(mask, result))


@app.command("describe")
def describe_command(
    format: Annotated[str, typer.Option("--format", help="Mask format to describe.")],
    report: Annotated[str, typer.Option()] = "human",
) -> None:
    """Print placeholder, length bounds and compiled chain of a mask."""

    report_mode = _parse_report_mode(report)
    mask = _build_mask(MaskRegistry(), format)

    if report_mode == "json":
        _echo_json(description_payload(mask))
    else:
        typer.echo(render_description_human(mask))


def _parse_report_mode(report: str) -> ReportMode:
    normalized = report.lower().strip()
    if normalized not in {"human", "json"}:
        typer.echo("ERROR: --report must be one of: human, json.")
        raise typer.Exit(code=1)
    return cast(ReportMode, normalized)


def _build_mask(registry: MaskRegistry, format: str) -> Mask:
    try:
        return registry.get_or_create(format)
    except FormatError as exc:
        typer.echo(f"ERROR: malformed mask format: {exc}")
        raise typer.Exit(code=2) from exc


def _echo_json(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def main() -> None:
    """Console script entrypoint."""

    app()


if __name__ == "__main__":
    main()
