"""
Shared rich consoles for terminal output.

Every module prints through these two instances so tests can swap them in
one place. Highlighting is off: poems and quotes are printed as-is.
"""

from rich.console import Console

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)
