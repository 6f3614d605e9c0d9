"""Main Typer application for startheme.

This module contains the Typer app and its commands. It provides the entry
point for the CLI and handles global options like debug mode, dry runs and
output formatting.
"""

import functools
import sys
from typing import Optional

import click
import typer
from rich.console import Console
from rich.markup import escape
from rich.traceback import install
from typer.core import TyperGroup

from . import __version__
from .config import StarthemePaths
from .exceptions import (
    ConfigError,
    MissingArgumentError,
    StarthemeError,
    UnknownCommandError,
    format_error_for_user,
)
from .manager import ThemeManager
from .render import OutputFormatter

# Install rich traceback handler for better error display
install(show_locals=True)

console = Console(highlight=False, soft_wrap=True)
output_formatter = OutputFormatter(console)


def print_error(message: str) -> None:
    console.print(f"[bold red]{escape(message)}[/bold red]")


class StarthemeGroup(TyperGroup):
    """Command group that reports unknown subcommands with exit status 1."""

    def parse_args(self, ctx: click.Context, args):
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as e:
            self._unknown_command(ctx, e.option_name)

    def resolve_command(self, ctx: click.Context, args):
        cmd_name = args[0] if args else None
        if cmd_name and self.get_command(ctx, cmd_name) is None:
            self._unknown_command(ctx, cmd_name)
        return super().resolve_command(ctx, args)

    def _unknown_command(self, ctx: click.Context, cmd_name: str) -> None:
        print_error(format_error_for_user(UnknownCommandError(cmd_name)))
        typer.echo(ctx.get_help(), color=ctx.color)
        ctx.exit(1)


# Subcommands ignore extra arguments and pass dash-prefixed theme names through
LENIENT_ARGS = {"ignore_unknown_options": True, "allow_extra_args": True}


app = typer.Typer(
    name="startheme",
    cls=StarthemeGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"startheme {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be done without making changes",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format for list and get (text, json, yaml)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """startheme - hotswap starship themes.

    Theme files live in ~/.config/starship/ and the active one is symlinked
    to ~/.config/starship.toml.

    Examples:
        # List themes
        startheme list

        # Change the current theme
        startheme change gruvbox

        # Get the current theme
        startheme get

    [bold red]WARNING:[/bold red] this command isn't going to back up your current
    starship.toml, so please do so before changing themes.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help(), color=ctx.color)
        raise typer.Exit()

    try:
        paths = StarthemePaths.from_home()
    except ConfigError as e:
        print_error(format_error_for_user(e, debug))
        raise typer.Exit(1)

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["dry_run"] = dry_run
    ctx.obj["output_format"] = output_format
    ctx.obj["console"] = console
    ctx.obj["output_formatter"] = output_formatter
    ctx.obj["manager"] = ThemeManager(paths)

    if debug:
        console.print("[dim]Debug mode enabled[/dim]")
        console.print(f"[dim]Themes directory: {escape(str(paths.themes_dir))}[/dim]")
        console.print(f"[dim]Config path: {escape(str(paths.config_path))}[/dim]")


def handle_exceptions(func):
    """Decorator to handle common exceptions in commands."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except StarthemeError as e:
            ctx = click.get_current_context(silent=True)
            debug = ctx.obj.get("debug", False) if ctx and ctx.obj else False
            print_error(format_error_for_user(e, debug))
            raise typer.Exit(1)
        except KeyboardInterrupt:
            console.print("\n[yellow]Operation cancelled by user[/yellow]")
            raise typer.Exit(130)
        except Exception as e:
            ctx = click.get_current_context(silent=True)
            debug = ctx.obj.get("debug", False) if ctx and ctx.obj else False

            if debug:
                console.print_exception(show_locals=True)
            else:
                print_error(f"Unexpected error: {e}")
                console.print("[dim]Use --debug for more details[/dim]")
            raise typer.Exit(1)
    return wrapper


@app.command("list", context_settings=LENIENT_ARGS)
@handle_exceptions
def list_themes(ctx: typer.Context) -> None:
    """List themes.

    Examples:
        # List themes
        startheme list

        # List themes as JSON
        startheme -o json list
    """
    manager: ThemeManager = ctx.obj["manager"]
    formatter: OutputFormatter = ctx.obj["output_formatter"]

    themes = manager.list_themes()
    formatter.render_themes(themes, format=ctx.obj["output_format"])


@app.command("change", context_settings=LENIENT_ARGS)
@handle_exceptions
def change_theme(
    ctx: typer.Context,
    theme_name: Optional[str] = typer.Argument(None, help="Name of the theme to activate"),
) -> None:
    """Change the current theme.

    Replaces ~/.config/starship.toml with a symlink to the theme file.
    Whatever was there before is removed without a backup.

    Examples:
        # Change theme
        startheme change gruvbox

        # See what would happen first
        startheme --dry-run change gruvbox
    """
    if theme_name is None:
        raise MissingArgumentError(argument="theme_name")

    manager: ThemeManager = ctx.obj["manager"]
    formatter: OutputFormatter = ctx.obj["output_formatter"]

    result = manager.change_theme(theme_name, dry_run=ctx.obj["dry_run"])
    formatter.render_activation(result)


@app.command("get", context_settings=LENIENT_ARGS)
@handle_exceptions
def get_theme(ctx: typer.Context) -> None:
    """Get current theme.

    A missing or unmanaged starship.toml is reported, not treated as a
    failure.
    """
    manager: ThemeManager = ctx.obj["manager"]
    formatter: OutputFormatter = ctx.obj["output_formatter"]

    try:
        status = manager.current_theme()
    except StarthemeError as e:
        print_error(format_error_for_user(e, ctx.obj["debug"]))
        return

    formatter.render_status(status, format=ctx.obj["output_format"])


@app.command("help")
def show_help(ctx: typer.Context) -> None:
    """Show this help message."""
    typer.echo(ctx.parent.get_help(), color=ctx.color)


def cli():
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        # Last resort error handling
        print_error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
