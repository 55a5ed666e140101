"""Command-line front end: score a password and print the result."""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from src.config import get_settings
from src.config.scoring_config import load_scoring_config
from src.scorer.exceptions import ScorerError
from src.scorer.service import PasswordScorer
from src.ui.text_display import render_report
from src.utils.logging_config import setup_logging

app = typer.Typer(name="pwstrength", help="Score password strength against weighted criteria")


def _build_scorer(config_path: Path | None) -> PasswordScorer:
    settings = get_settings()
    try:
        config = load_scoring_config(config_path or settings.scoring_config_path)
    except ScorerError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    return PasswordScorer(config)


def _read_password() -> str:
    """Read from piped stdin when available, otherwise prompt without echo."""
    if not sys.stdin.isatty():
        # Undecodable bytes become lone surrogates instead of aborting the read.
        text = sys.stdin.buffer.read().decode("utf-8", errors="surrogateescape")
        # Only the transport newline is dropped; the password itself is kept raw.
        if text.endswith("\r\n"):
            return text[:-2]
        if text.endswith("\n"):
            return text[:-1]
        return text
    return typer.prompt("Password", hide_input=True, default="", show_default=False)


def _configure_logging(verbose: bool) -> None:
    settings = get_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        environment=settings.app_env.value,
    )


@app.command()
def check(
    password: str | None = typer.Argument(
        None, help="Password to score. Read from stdin or prompted for when omitted."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="YAML file overriding weights and banding"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    min_score: int | None = typer.Option(
        None, "--min-score", min=0, max=100, help="Exit with status 1 if the score is lower"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output on stderr"
    ),
):
    """Score a password and show the strength bar and criteria checklist."""
    _configure_logging(verbose)
    scorer = _build_scorer(config)

    if password is None:
        password = _read_password()

    result = scorer.evaluate(password)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        typer.echo(render_report(result, width=get_settings().bar_width))

    if min_score is not None and result.score < min_score:
        raise typer.Exit(1)


@app.command()
def criteria(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="YAML file overriding weights and banding"
    ),
):
    """List the criteria in evaluation order with their weights."""
    _configure_logging(False)
    scorer = _build_scorer(config)
    for criterion in scorer.criteria:
        typer.echo(f"{criterion.name:<12}{criterion.weight:>4}  {criterion.description}")
    bands = scorer.banding
    typer.echo(
        f"\nBands: Weak < {bands.moderate} <= Moderate < {bands.strong} "
        f"<= Strong < {bands.very_strong} <= Very strong"
    )


if __name__ == "__main__":
    app()
