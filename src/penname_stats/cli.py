from __future__ import annotations

import json
import logging
from dataclasses import replace as dc_replace
from pathlib import Path

import typer
import yaml

from .config import StatsConfig, load_config
from .documents import DocumentReadError, load_document
from .models import Document
from .pipeline import compare_documents
from .report import comparison_to_dict, format_table

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(
    help="Compare lexical statistics of an official and a pseudonymous text.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command()
def compare(
    official_path: Path = typer.Argument(..., help="Text written under the official name."),
    pseudonym_path: Path = typer.Argument(..., help="Text written under the pseudonym."),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML report settings."),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: 'table' or 'json'."
    ),
    precision: int | None = typer.Option(
        None, "--precision", "-p", help="Decimals shown for mean values."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Print word, sentence and marker-word statistics for both texts side by side."""
    cfg = _load_config(config, output_format, precision)
    _configure_logging("DEBUG" if verbose else cfg.log_level)

    official = _read_or_exit(official_path, cfg)
    pseudonym = _read_or_exit(pseudonym_path, cfg)
    comparison = compare_documents(official, pseudonym)

    if cfg.output_format == "json":
        typer.echo(json.dumps(comparison_to_dict(comparison), indent=2))
    else:
        typer.echo(format_table(comparison, cfg))


def main() -> None:
    app()


def _load_config(
    path: Path | None, output_format: str | None, precision: int | None
) -> StatsConfig:
    """Load the YAML config (or defaults) and apply CLI overrides."""
    try:
        cfg = load_config(path)
        overrides: dict[str, object] = {}
        if output_format is not None:
            overrides["output_format"] = output_format.lower()
        if precision is not None:
            overrides["precision"] = precision
        return dc_replace(cfg, **overrides) if overrides else cfg
    except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level {level_name!r}.")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("penname_stats").setLevel(level)


def _read_or_exit(path: Path, cfg: StatsConfig) -> Document:
    """Read an input file, terminating the command when it cannot be read."""
    try:
        return load_document(path, encoding=cfg.encoding)
    except DocumentReadError as exc:
        LOGGER.debug("Failed to load %s", path, exc_info=exc)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    main()
