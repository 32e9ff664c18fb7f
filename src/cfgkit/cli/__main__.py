from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from ..core.errors import ConfigError
from ..providers.file_provider import FileConfigProvider

app = typer.Typer(help="cfgkit CLI")


def _fail(exc: ConfigError) -> NoReturn:
    typer.echo(f"error[{exc.code.value}]: {exc.message}", err=True)
    raise typer.Exit(code=2)


def _open(ctx: typer.Context, file: Path) -> FileConfigProvider:
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    logger = logging.getLogger("cfgkit") if verbose else None
    try:
        return FileConfigProvider(file, logger=logger)
    except ConfigError as exc:
        _fail(exc)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log provider activity to stderr"),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"verbose": verbose}


@app.command()
def show(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Configuration file"),
    section: Optional[str] = typer.Option(None, "--section", help="Only show this section"),
):
    provider = _open(ctx, file)
    if section is None:
        typer.echo(json.dumps(provider.get_all_sections(), indent=2))
        return
    values = provider.get_section(section)
    if values is None:
        typer.echo(f"Section not found: {section}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(values, indent=2))


@app.command()
def sections(ctx: typer.Context, file: Path = typer.Argument(..., help="Configuration file")):
    provider = _open(ctx, file)
    for name in provider.get_all_sections():
        typer.echo(name)


@app.command()
def get(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Configuration file"),
    section: str = typer.Argument(...),
    key: str = typer.Argument(...),
):
    provider = _open(ctx, file)
    value = provider.get(section, key)
    if value is None:
        typer.echo(f"Not found: {section}.{key}", err=True)
        raise typer.Exit(code=1)
    typer.echo(value)


@app.command("set")
def set_value(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Configuration file"),
    section: str = typer.Argument(...),
    key: str = typer.Argument(...),
    value: str = typer.Argument(...),
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write the file"),
):
    provider = _open(ctx, file)
    provider.set(section, key, value)
    if dry_run:
        typer.echo(json.dumps(provider.get_section(section), indent=2))
        return
    try:
        provider.save()
    except ConfigError as exc:
        _fail(exc)
    typer.echo("OK")


@app.command()
def path(ctx: typer.Context, file: Path = typer.Argument(..., help="Configuration file")):
    provider = _open(ctx, file)
    typer.echo(str(provider.file_path))


if __name__ == "__main__":
    app()
