# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Flagbind output and diagnostics."""
from rich.console import Console
from rich.theme import Theme

flagbind_theme = Theme(
    {
        "param": "bold cyan",
        "error": "bold red",
        "hint": "dim",
    }
)

console = Console(color_system="truecolor", theme=flagbind_theme)
error_console = Console(color_system="auto", theme=flagbind_theme, stderr=True)
