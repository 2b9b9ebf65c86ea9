from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml

from .calibration import probe_defaults
from .config import SpellCheckConfig, load_config
from .engine import SuggestionEngine
from .exceptions import ExternalToolError, InvalidConfiguration
from .models import Suggestion
from .validation import ResponseShape

app = typer.Typer(help="Hunspell dispatch CLI.", no_args_is_help=True)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def suggest(
    text: str | None = typer.Argument(None, help="Text to check."),
    input_path: Path | None = typer.Option(
        None,
        "--input-path",
        "-i",
        exists=True,
        readable=True,
        dir_okay=False,
        help="Read the text to check from a file instead.",
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="YAML config file."
    ),
    dictionary: str | None = typer.Option(
        None, "--dictionary", "-d", help="Hunspell dictionary, e.g. en_US."
    ),
    encoding: str | None = typer.Option(
        None, "--encoding", help="Locale passed to hunspell via LANG."
    ),
    max_workers: int | None = typer.Option(
        None, "--max-workers", help="Upper bound on concurrent hunspell processes."
    ),
    min_words_per_worker: int | None = typer.Option(
        None,
        "--min-words-per-worker",
        help="Words a worker must have before another is started.",
    ),
    executable: str | None = typer.Option(
        None, "--executable", help="Path to the hunspell binary."
    ),
    response_shape: str = typer.Option(
        ResponseShape.JSON.value,
        "--response-shape",
        help="json for indented JSON, array for one tab-separated line per word.",
    ),
) -> None:
    """Spell-check text and print the suggestions."""
    if input_path is not None:
        text = input_path.read_text(encoding="utf-8")
    if text is None:
        raise typer.BadParameter("Provide TEXT or --input-path.")

    try:
        cfg = load_config(config)
        _apply_overrides(
            cfg, dictionary, encoding, max_workers, min_words_per_worker, executable
        )
        engine = SuggestionEngine(cfg)
        engine.response_shape = response_shape
        result = engine.suggest(text)
    except InvalidConfiguration as exc:
        raise typer.BadParameter(str(exc)) from exc
    except ExternalToolError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if isinstance(result, str):
        typer.echo(json.dumps(json.loads(result), indent=2))
        return
    for suggestion in result:
        typer.echo(_format_row(suggestion))


@app.command()
def calibrate(
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="YAML config file."
    ),
    skip_ratio: bool = typer.Option(
        False,
        "--skip-ratio/--measure-ratio",
        help="Skip timing the word-per-worker ratio.",
    ),
) -> None:
    """Probe the host and print the resulting configuration as YAML."""
    try:
        cfg = load_config(config)
        result = probe_defaults(base_config=cfg, measure_ratio=not skip_ratio)
    except InvalidConfiguration as exc:
        raise typer.BadParameter(str(exc)) from exc
    except ExternalToolError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(yaml.safe_dump(result.apply(cfg).to_dict(), sort_keys=False))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = SpellCheckConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _format_row(suggestion: Suggestion) -> str:
    candidates = getattr(suggestion, "candidates", [])
    return "\t".join([suggestion.word, suggestion.position, ", ".join(candidates)])


def _apply_overrides(
    config: SpellCheckConfig,
    dictionary: str | None,
    encoding: str | None,
    max_workers: int | None,
    min_words_per_worker: int | None,
    executable: str | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if dictionary:
        config.dictionary = dictionary
    if encoding:
        config.encoding = encoding
    if max_workers is not None:
        config.max_workers = max_workers
    if min_words_per_worker is not None:
        config.min_words_per_worker = min_words_per_worker
    if executable:
        config.executable = executable


if __name__ == "__main__":
    main()
