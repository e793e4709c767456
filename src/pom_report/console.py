"""Shared Rich consoles for pom-report CLI output.

Tables and results go to ``console`` (stdout); log records go to
``err_console`` (stderr) so that command output can be piped.
"""

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def success(message: str, console: Console = console) -> None:
    """Print a success message in green."""
    console.print(f"[green]{message}[/green]")
