"""Output rendering for startheme.

Results are printed as coloured text through rich by default, or as JSON
or YAML for scripting.
"""

import json
import os
from typing import Any, List, Optional

import yaml
from rich.console import Console
from rich.markup import escape

from .exceptions import ValidationError
from .models import ActivationResult, ThemeState, ThemeStatus

OUTPUT_FORMATS = ("text", "json", "yaml")


class OutputFormatter:
    """Renders theme listings and status in the selected format."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize output formatter.

        Args:
            console: Rich console instance. If None, creates a new one.
        """
        self.console = console or Console(highlight=False, soft_wrap=True)

    def determine_format(self, format_override: Optional[str] = None) -> str:
        """Determine the output format to use.

        Args:
            format_override: Explicit format override

        Returns:
            Format name (text, json, yaml)

        Raises:
            ValidationError: If the format is not supported
        """
        format_name = format_override or os.environ.get("STARTHEME_OUTPUT_FORMAT") or "text"
        format_name = format_name.lower()
        if format_name not in OUTPUT_FORMATS:
            raise ValidationError(
                f"Unknown output format: {format_name} (expected one of: {', '.join(OUTPUT_FORMATS)})"
            )
        return format_name

    def render_themes(self, themes: List[str], format: Optional[str] = None) -> None:
        """Render the list of available themes."""
        format_name = self.determine_format(format)

        if format_name == "json":
            self.render_json(themes)
        elif format_name == "yaml":
            self.render_yaml(themes)
        else:
            self.console.print("[bold blue]Available themes:[/bold blue]")
            for theme in themes:
                self.console.print(f"  {escape(theme)}")

    def render_status(self, status: ThemeStatus, format: Optional[str] = None) -> None:
        """Render the result of inspecting the configuration path."""
        format_name = self.determine_format(format)

        if format_name == "json":
            self.render_json(status.model_dump(mode="json"))
        elif format_name == "yaml":
            self.render_yaml(status.model_dump(mode="json"))
        elif status.is_managed:
            self.console.print(f"[bold blue]Current theme: {escape(status.theme or '')}[/bold blue]")
        elif status.state == ThemeState.ABSENT:
            self.console.print("[bold red]✖ No starship config found[/bold red]")
        else:
            self.console.print(
                "[bold red]✖ starship.toml is not a symlink (not managed by startheme)[/bold red]"
            )

    def render_activation(self, result: ActivationResult) -> None:
        """Render the outcome of changing the theme."""
        theme = escape(result.theme)
        if result.dry_run:
            self.console.print(f"[yellow]DRY RUN: Would change theme to '{theme}'[/yellow]")
            if result.replaced:
                self.console.print(f"  Remove existing {escape(result.config_path)}")
            self.console.print(f"  Link {escape(result.config_path)} -> {escape(result.target)}")
            return

        self.console.print(f"[bold green]✓ Successfully changed theme to: {theme}[/bold green]")

    def render_json(self, data: Any, indent: int = 2) -> None:
        """Render data as JSON."""
        try:
            print(json.dumps(data, indent=indent, ensure_ascii=False, default=str))
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Failed to serialize data to JSON: {e}")

    def render_yaml(self, data: Any) -> None:
        """Render data as YAML."""
        try:
            print(yaml.safe_dump(data, default_flow_style=False, allow_unicode=True), end="")
        except yaml.YAMLError as e:
            raise ValidationError(f"Failed to serialize data to YAML: {e}")
