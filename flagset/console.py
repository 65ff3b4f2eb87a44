# Flagset CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used for help rendering and the demo program."""
from rich.console import Console
from rich.theme import Theme

flagset_theme = Theme(
    {
        "flag": "bold cyan",
        "default": "dim",
        "error": "bold red",
    }
)

console = Console(theme=flagset_theme)
