# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for the Paramline command-line tool."""
from rich.console import Console

from paramline.themes import get_one_theme

console = Console(theme=get_one_theme())
