"""
Command line front end for die_parser.

Examples:
  die-parser parse 4d20 - 5
  die-parser parse "2d6+3" --max-dice 0 --json
  die-parser dice-types
"""
from __future__ import annotations

import json

import click
import structlog

from die_parser.config import Settings, load_settings
from die_parser.logging import setup_logging
from die_parser.parser import parse_with_limit
from die_parser.validation import ALLOWED_SIDES

log = structlog.get_logger()


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "NONE"], case_sensitive=False),
    default=None,
    help="Override the configured console logging level.",
)
@click.pass_context
def app(ctx: click.Context, log_level: str | None) -> None:
    settings = load_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"logging_console": log_level.upper()})
    setup_logging(settings)
    ctx.obj = settings


# ignore_unknown_options lets "-5" through as part of the notation
@app.command("parse", context_settings={"ignore_unknown_options": True})
@click.argument("notation", nargs=-1, required=True)
@click.option(
    "--max-dice",
    type=click.IntRange(0, 0xFFFF),
    default=None,
    help="Maximum dice per roll (0 = no limit). Defaults to the configured value.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the roll as JSON.")
@click.pass_obj
def parse_cmd(settings: Settings, notation: tuple[str, ...], max_dice: int | None, as_json: bool) -> None:
    """Parse and validate NOTATION, e.g. 4d20-5."""
    text = " ".join(notation)
    limit = settings.max_dice if max_dice is None else max_dice
    result = parse_with_limit(text, limit)

    error = result.error
    if error is not None:
        log.debug("die_parser.cli.rejected", text=text, reason=error.value, max_dice=limit)
        if as_json:
            click.echo(json.dumps({"error": error.value, "message": error.message}))
        else:
            click.echo(click.style(error.message, fg="red"), err=True)
        raise SystemExit(1)

    roll = result.unwrap()
    if as_json:
        click.echo(json.dumps(roll.as_dict()))
    else:
        click.echo(
            f"{roll.notation()} -> dice={roll.number_of_dice} "
            f"sides={roll.number_of_sides} modifier={roll.modifier}"
        )


@app.command("dice-types")
def dice_types_cmd() -> None:
    """List the die types the parser accepts."""
    click.echo(" ".join(f"d{sides}" for sides in sorted(ALLOWED_SIDES)))


def main() -> None:  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
