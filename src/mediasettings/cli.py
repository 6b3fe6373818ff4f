"""Settings registry CLI application.

This module provides a small administrative command-line interface to
inspect the settings catalog and to read or change option values in the
settings database.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Final, Optional

import typer

from mediasettings.accessor import SettingsAccessor
from mediasettings.config.server import ServerConfig
from mediasettings.errors import ConfigError, StoreError
from mediasettings.registry.catalog import REGISTRY
from mediasettings.registry.defaults import ARTWORK_SOURCES_KEY, LIBRARY_SECTION
from mediasettings.registry.models import Option, SettingType
from mediasettings.store.sqlite import SqliteAdminStore

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Settings registry CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "mediasettings.cli"

CONFIG_OPTION = typer.Option(
    None, "--config", "-c", dir_okay=False, help="Static YAML configuration"
)
DB_OPTION = typer.Option(None, "--db", dir_okay=False, help="Override the settings database path")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
JSON_OPTION = typer.Option(False, "--json", help="Print values as JSON")

_TRUE_WORDS: Final = {"1", "true", "yes", "on"}
_FALSE_WORDS: Final = {"0", "false", "no", "off"}


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_config(config: Optional[Path]) -> ServerConfig:
    """Load the static config, falling back to built-in defaults when none exists."""
    try:
        return ServerConfig.load(config)
    except FileNotFoundError as exc:
        if config is not None:
            typer.secho(str(exc), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1) from exc
        logger.debug("No configuration file found, using defaults")
        return ServerConfig()
    except ConfigError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _open_accessor(
    config: Optional[Path], db: Optional[Path], debug: bool
) -> tuple[SettingsAccessor, SqliteAdminStore]:
    _configure_logging(debug)
    server_config = _load_config(config)
    db_path = db or server_config.general.db_path
    try:
        store = SqliteAdminStore(db_path)
    except StoreError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    return SettingsAccessor(store, server_config), store


def _resolve(category_name: str, option_name: str) -> Option:
    category = REGISTRY.category_by_name(category_name)
    if category is None:
        typer.secho(f"Unknown category: {category_name}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    option = REGISTRY.option_by_name(category, option_name)
    if option is None:
        typer.secho(
            f"Unknown option '{option_name}' in category '{category.name}'",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)
    return option


def parse_value(option: Option, raw: str) -> int | bool | str:
    """Convert command-line text to the option's declared type.

    Raises:
        ValueError: If ``raw`` cannot be read as the option's type
    """
    if option.type is SettingType.INT:
        return int(raw)
    if option.type is SettingType.BOOL:
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f"not a boolean: {raw!r}")
    return raw


def format_value(value: int | bool | str | None) -> str:
    if value is None:
        return "(unset)"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@app.command()
def categories() -> None:
    """List setting categories and how many options each holds."""
    for category in REGISTRY:
        typer.echo(f"{category.name}\t{REGISTRY.option_count(category)}")


@app.command()
def show(
    category_name: Optional[str] = typer.Argument(None, metavar="CATEGORY"),
    config: Optional[Path] = CONFIG_OPTION,
    db: Optional[Path] = DB_OPTION,
    as_json: bool = JSON_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show every option with its type and effective value."""
    if category_name is not None and REGISTRY.category_by_name(category_name) is None:
        typer.secho(f"Unknown category: {category_name}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    accessor, store = _open_accessor(config, db, debug)
    with store:
        values = accessor.snapshot()

    if category_name is not None:
        wanted = category_name.casefold()
        values = {name: opts for name, opts in values.items() if name.casefold() == wanted}

    if as_json:
        typer.echo(json.dumps(values, indent=2))
        return

    for name, options in values.items():
        typer.secho(name, bold=True)
        category = REGISTRY.category_by_name(name)
        for option_name, value in options.items():
            option = REGISTRY.option_by_name(category, option_name)
            type_name = option.type.value if option is not None else "?"
            typer.echo(f"  {option_name} ({type_name}) = {format_value(value)}")


@app.command()
def get(
    category_name: str = typer.Argument(..., metavar="CATEGORY"),
    option_name: str = typer.Argument(..., metavar="OPTION"),
    config: Optional[Path] = CONFIG_OPTION,
    db: Optional[Path] = DB_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print the effective value of one option."""
    option = _resolve(category_name, option_name)
    accessor, store = _open_accessor(config, db, debug)
    with store:
        value = accessor.get(option)
    typer.echo(format_value(value))


@app.command("set")
def set_option(
    category_name: str = typer.Argument(..., metavar="CATEGORY"),
    option_name: str = typer.Argument(..., metavar="OPTION"),
    raw_value: str = typer.Argument(..., metavar="VALUE"),
    config: Optional[Path] = CONFIG_OPTION,
    db: Optional[Path] = DB_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Store a new value for one option."""
    option = _resolve(category_name, option_name)
    try:
        value = parse_value(option, raw_value)
    except ValueError as exc:
        typer.secho(
            f"Invalid value for {option.name} ({option.type.value}): {exc}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1) from exc

    accessor, store = _open_accessor(config, db, debug)
    with store:
        if isinstance(value, bool):
            ok = accessor.set_bool(option, value)
        elif isinstance(value, int):
            ok = accessor.set_int(option, value)
        else:
            ok = accessor.set_str(option, value)

    if not ok:
        typer.secho(f"Failed to store {option.name}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"{option.name} = {format_value(value)}", fg=typer.colors.GREEN)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        ServerConfig.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, ConfigError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("sources")
def artwork_sources(file: Path):
    """Show the configured online artwork allow-list."""
    try:
        cfg = ServerConfig.load(file)
    except (FileNotFoundError, ConfigError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    sources = cfg.list_values(LIBRARY_SECTION, ARTWORK_SOURCES_KEY)
    if not sources:
        typer.echo("(not configured, per-source defaults apply)")
        return
    for source in sources:
        typer.echo(source)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
