"""
حكمة - Hikma command line
A terminal companion for Arabic poetry, wisdom quotes and hadith
"""

import argparse
import logging
import random
from pathlib import Path
from typing import List, Optional

from .console import console, err_console
from .database import DatabaseUnavailableError, ensure_local_database, get_db
from .models import CONCRETE_MODES, Content, Mode
from .presenter import render
from .services import ContentService

logger = logging.getLogger(__name__)

NO_CONTENT_MESSAGE = "⚠️  No content found for this category."

# Tried in order when a random pick comes back empty. Hadith is not retried.
FALLBACK_MODES = (Mode.QUOTES, Mode.POEMS)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hikma",
        description="A terminal companion for Arabic Poetry, Quotes, and Hadith.",
    )
    parser.add_argument("-d", "--hadith", "--hadeeth", action="store_true",
                        dest="hadith", help="Show Prophetic Hadith")
    parser.add_argument("-p", "--poems", action="store_true", help="Show Poetry")
    parser.add_argument("-q", "--quotes", action="store_true", help="Show Wisdom Quotes")
    parser.add_argument("-e", "--era", default="", metavar="NAME",
                        help="Filter Poems by Era (e.g., 'Abbasid')")
    parser.add_argument("--db", type=Path, default=None, metavar="PATH",
                        help="Read from this database file instead of the installed one")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    return parser


def resolve_mode(args: argparse.Namespace) -> Mode:
    """Flags in precedence order: poems (or an era), quotes, hadith, else random"""
    if args.poems or args.era:
        return Mode.POEMS
    if args.quotes:
        return Mode.QUOTES
    if args.hadith:
        return Mode.HADITH
    return Mode.ALL


def fetch_content(
    service: ContentService,
    mode: Mode,
    era_filter: str,
    rng: random.Random,
) -> Optional[Content]:
    """Select content for mode; a random pick falls back to quotes, then poems"""
    if mode is not Mode.ALL:
        return service.select(mode, era_filter)

    picked = rng.choice(CONCRETE_MODES)
    logger.debug(f"Random mode: {picked.value}")
    content = service.select(picked)
    if content is not None:
        return content

    for fallback in FALLBACK_MODES:
        logger.debug(f"Falling back to {fallback.value}")
        content = service.select(fallback)
        if content is not None:
            return content
    return None


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    # One generator per run, seeded from OS entropy
    rng = random.Random()
    mode = resolve_mode(args)

    try:
        db_path = args.db or ensure_local_database()
        with get_db(db_path) as conn:
            service = ContentService(conn, rng)
            content = fetch_content(service, mode, args.era, rng)
    except DatabaseUnavailableError as e:
        err_console.print(f"❌ {e}", markup=False)
        return 1

    if content is None:
        console.print(NO_CONTENT_MESSAGE)
        return 0

    render(content)
    return 0
