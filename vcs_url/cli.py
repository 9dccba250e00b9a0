"""vcs-url CLI — main entry point."""

from __future__ import annotations

import json as json_mod
import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__, get_vcsurl_home
from .config import VCSURLConfig
from .parser import parse
from .remote import remote

app = typer.Typer(
    name="vcsurl",
    help="vcs-url — normalize repository URLs and render clone remotes",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True, soft_wrap=True)

_state: dict[str, VCSURLConfig] = {}


def _get_config() -> VCSURLConfig:
    if "config" not in _state:
        _state["config"] = VCSURLConfig.load()
    return _state["config"]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )


def _fail(exc: Exception) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


@app.callback()
def main(
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: ~/.vcsurl/config.yaml)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log rule selection"),
) -> None:
    """vcs-url — repository URL normalization."""
    config = VCSURLConfig.load(config_path)
    _state["config"] = config
    _configure_logging("DEBUG" if verbose else config.log_level)


@app.command("parse")
def parse_cmd(
    url: str = typer.Argument(..., help="Repository URL, SSH remote or host/owner/repo"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Parse a repository reference into its components."""
    config = _get_config()
    try:
        registry = config.build_registry()
        descriptor = parse(url, registry=registry)
    except ValueError as exc:  # VCSURLError or a bad host alias
        _fail(exc)

    if json_output:
        print(json_mod.dumps(descriptor.model_dump(mode="json")))
        return

    table = Table(title=descriptor.id, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for field_name, value in descriptor.model_dump(mode="json").items():
        table.add_row(field_name, escape(value) if value else "[dim]-[/dim]")
    console.print(table)


@app.command("remote")
def remote_cmd(
    url: str = typer.Argument(..., help="Repository URL, SSH remote or host/owner/repo"),
    protocol: str | None = typer.Option(
        None, "--protocol", "-p", help="ssh or https (default from config)"
    ),
) -> None:
    """Print the canonical clone URL for a repository reference."""
    config = _get_config()
    try:
        registry = config.build_registry()
        descriptor = parse(url, registry=registry)
        print(remote(descriptor, protocol or config.default_protocol, registry=registry))
    except ValueError as exc:  # VCSURLError or a bad host alias
        _fail(exc)


@app.command("init")
def init() -> None:
    """Write a default config to ~/.vcsurl/config.yaml."""
    from .config import get_default_config_content

    config_path = get_vcsurl_home() / "config.yaml"
    if config_path.exists():
        console.print(f"[dim]Config already exists:[/dim] {config_path}")
        return

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(get_default_config_content(), encoding="utf-8")
    console.print(f"[green]Created config:[/green] {config_path}")


@app.command("version")
def version() -> None:
    """Show version information."""
    console.print(f"vcs-url v{__version__}")


if __name__ == "__main__":
    app()
