"""Console output for react-testgen."""

from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel


class StatusIcon:
    """Status icons for CLI display."""

    SUCCESS = "[bold green]✓[/bold green]"
    ERROR = "[bold red]✗[/bold red]"
    WARNING = "[bold yellow]⚠[/bold yellow]"
    DEBUG = "[dim]◦[/dim]"


class UserFeedback:
    """User-facing console output.

    Messages go to stdout, errors to stderr. Quiet mode keeps errors and
    results only; verbose mode adds debug lines and details.
    """

    def __init__(self, verbose: bool = False, quiet: bool = False,
                 console: Optional[Console] = None, error_console: Optional[Console] = None):
        self.verbose = verbose
        self.quiet = quiet
        self.console = console or Console(stderr=False, highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)

    def plain(self, message: str):
        """Display a message as-is, without icon or markup."""
        if not self.quiet:
            self.console.print(escape(message), soft_wrap=True)

    def success(self, message: str):
        """Display success message with checkmark icon."""
        if not self.quiet:
            self.console.print(f"{StatusIcon.SUCCESS} {escape(message)}")

    def error(self, message: str, suggestion: Optional[str] = None, details: Optional[str] = None):
        """Display error message with error icon and optional suggestion."""
        # Errors are shown even in quiet mode
        self.error_console.print(f"{StatusIcon.ERROR} [bold red]Error:[/bold red] {escape(message)}")

        if suggestion:
            self.error_console.print(f"  [yellow]Suggestion:[/yellow] {escape(suggestion)}")

        if details and self.verbose:
            self._print_details(details, "red", console=self.error_console)

    def warning(self, message: str, suggestion: Optional[str] = None):
        """Display warning message with warning icon."""
        if not self.quiet:
            self.console.print(f"{StatusIcon.WARNING} [bold yellow]Warning:[/bold yellow] {escape(message)}")
            if suggestion:
                self.console.print(f"  [yellow]{escape(suggestion)}[/yellow]")

    def debug(self, message: str):
        """Display debug message (only in verbose mode)."""
        if self.verbose and not self.quiet:
            self.console.print(f"{StatusIcon.DEBUG} [dim]{escape(message)}[/dim]")

    def result(self, message: str):
        """Display important results - always shown even in quiet mode."""
        self.console.print(f"{StatusIcon.SUCCESS} [bold green]{escape(message)}[/bold green]")

    def summary_panel(self, title: str, items: Dict[str, Any], style: str = "green"):
        """Display a summary panel with key-value pairs."""
        if not self.quiet:
            content = []
            for key, value in items.items():
                content.append(f"[bold]{escape(str(key))}:[/bold] {escape(str(value))}")

            panel = Panel(
                "\n".join(content),
                title=title,
                border_style=style,
                padding=(1, 2)
            )
            self.console.print(panel)

    def _print_details(self, details: str, style: str, console: Optional[Console] = None):
        """Print details with proper indentation and styling."""
        target_console = console or self.console
        for line in details.split('\n'):
            if line.strip():
                target_console.print(f"  [dim]│[/dim] [{style}]{escape(line)}[/{style}]")
