# Whim Document Library — (c) 2023 Evan Overman — MIT Licensed
"""Global console instance for whim."""
from rich.console import Console

from whim.themes import get_theme

console = Console(theme=get_theme(), highlight=False)
