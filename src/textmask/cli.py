"""Command-line interface for textmask."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer

from textmask.config import get_settings
from textmask.errors import TextMaskError
from textmask.logging_utils import configure_logging
from textmask.mask.formatter import MaskFormatter
from textmask.models.mask import FormatOutcome, MaskSpec, load_mask_spec

app = typer.Typer(help="Format text against input masks.")


@app.callback()
def _configure() -> None:
    settings = get_settings()
    configure_logging(
        settings.log_level,
        settings.log_format,
        redact_input=not settings.log_raw_input,
    )


def _resolve_spec(
    pattern: Optional[str],
    prefix: Optional[str],
    spec_path: Optional[Path],
) -> MaskSpec:
    settings = get_settings()
    base = (
        load_mask_spec(spec_path)
        if spec_path is not None
        else MaskSpec(pattern=settings.default_pattern, prefix=settings.default_prefix)
    )
    return MaskSpec(
        pattern=pattern if pattern is not None else base.pattern,
        prefix=prefix if prefix is not None else base.prefix,
    )


def _fail(exc: TextMaskError) -> None:
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=2)


@app.command("format")
def format_command(
    text: Optional[List[str]] = typer.Argument(
        None,
        help="Raw text to format. Reads one value per stdin line when omitted.",
    ),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Mask pattern."),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Prefix for non-empty output."),
    spec_path: Optional[Path] = typer.Option(
        None,
        "--spec",
        help="JSON file with pattern and prefix keys.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON object per input."),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON output."),
) -> None:
    """
    Format each TEXT argument (or stdin line) against the mask and print the result.
    """

    try:
        spec = _resolve_spec(pattern, prefix, spec_path)
    except TextMaskError as exc:
        _fail(exc)
        return

    formatter = MaskFormatter.from_spec(spec, record_metrics=get_settings().metrics_enabled)
    values = text if text else [line.rstrip("\r\n") for line in sys.stdin]

    for value in values:
        output = formatter.format(value)
        if as_json:
            outcome = FormatOutcome(raw_input=value, output=output, max_length=formatter.max_length)
            typer.echo(
                json.dumps(outcome.model_dump(), indent=2 if pretty else None, sort_keys=pretty)
            )
        else:
            typer.echo(output)


@app.command()
def describe(
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Mask pattern."),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Prefix for non-empty output."),
    spec_path: Optional[Path] = typer.Option(
        None,
        "--spec",
        help="JSON file with pattern and prefix keys.",
    ),
) -> None:
    """Show how each pattern character is interpreted."""

    try:
        spec = _resolve_spec(pattern, prefix, spec_path)
    except TextMaskError as exc:
        _fail(exc)
        return

    formatter = MaskFormatter.from_spec(spec, record_metrics=False)
    if not spec.pattern:
        typer.echo("Pattern is empty; text passes through unchanged.")
    for slot in formatter.describe():
        label = slot.kind if slot.kind is not None else "literal"
        typer.echo(f"{slot.index:>3}  {slot.symbol!r:<5} {label}")
    typer.echo(f"prefix: {spec.prefix!r}")
    typer.echo(f"max length: {formatter.max_length}")


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for `python -m textmask`."""
    app(prog_name="textmask", args=argv)


if __name__ == "__main__":
    main()
