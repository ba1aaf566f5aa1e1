"""
Terminal rendering for a selected entry
"""

from typing import Optional

from rich.console import Console
from rich.text import Text

from .config import DisplayConfig, display_config
from .console import console as default_console
from .models import Content


def terminal_width(console: Console, config: DisplayConfig = display_config) -> int:
    """Console width clamped to the display bounds (rich falls back to 80 columns)"""
    width = console.size.width
    return max(config.min_width, min(config.max_width, width))


def render(
    content: Optional[Content],
    console: Optional[Console] = None,
    config: DisplayConfig = display_config,
) -> None:
    """Print content between two decorative rules"""
    if content is None:
        return

    if console is None:
        console = default_console
    width = terminal_width(console, config)
    top = config.top_rule * (width - config.margin)
    bottom = config.bottom_rule * (width - config.margin)

    sub_style = config.hadith_style if content.is_hadith else config.attribution_style

    def line(body: str, style: str) -> None:
        console.print(Text.assemble(config.indent, (body, style)), soft_wrap=True)

    console.print()
    line(top, config.rule_style)
    line(f"  {content.text}", config.text_style)
    console.print()
    line(f"  {content.author} | {content.sub}", sub_style)
    line(bottom, config.rule_style)
    console.print()
