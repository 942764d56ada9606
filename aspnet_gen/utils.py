"""Shared helpers: name normalisation, file-system helpers and Rich output."""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")


def strip_extension(name: str, extension: str) -> str:
    """Drop *extension* from *name* when present (case-insensitive).

    Examples::

        strip_extension("MyClass.cs", ".cs") -> "MyClass"
        strip_extension("MyClass", ".cs")    -> "MyClass"
    """
    if extension and name.lower().endswith(extension.lower()):
        return name[: -len(extension)]
    return name


def is_identifier(name: str) -> bool:
    """Return ``True`` if *name* is usable as a C# (dotted) identifier."""
    return bool(_IDENTIFIER.match(name)) and not name.endswith(".") and ".." not in name


def sanitize_namespace(name: str) -> str:
    """Turn a directory or project name into a valid C# namespace.

    Examples::

        sanitize_namespace("emptyTest")  -> "emptyTest"
        sanitize_namespace("my-app")     -> "my_app"
        sanitize_namespace("2fa")        -> "_2fa"
    """
    result = re.sub(r"[^A-Za-z0-9_.]", "_", name.strip())
    result = re.sub(r"\.+", ".", result).strip(".")
    if not result:
        return ""
    if result[0].isdigit():
        result = f"_{result}"
    return result


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist and resolve it."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a short human-readable string.

    Examples::

        format_duration(0.0042) -> "4ms"
        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0ms"
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {int(seconds % 60)}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
