"""
Content Service - خدمة المحتوى
Picks a random poem couplet, wisdom quote or hadith from the content database
"""

import logging
import random
import sqlite3
from enum import Enum
from typing import Dict, Optional, Tuple

from ..config import (
    AUTHOR_TRANSLATIONS,
    HADITH_CATEGORY,
    HADITH_LABEL,
    WISDOM_LABEL,
    SelectionConfig,
    selection_config,
)
from ..models import Content, Mode

logger = logging.getLogger(__name__)


class QueryKind(Enum):
    POEMS_BY_ERA = "poems_by_era"
    POEMS_BY_ID = "poems_by_id"
    QUOTES = "quotes"
    HADITH = "hadith"


# (count query, data query) per kind. Only the era and the offset/id are bound.
QUERIES: Dict[QueryKind, Tuple[str, str]] = {
    QueryKind.POEMS_BY_ERA: (
        "SELECT COUNT(*) FROM poetry WHERE instr(poet_era, ?) > 0",
        """
            SELECT poem_text, poet_name, poet_era FROM poetry
            WHERE instr(poet_era, ?) > 0
            ORDER BY id LIMIT 1 OFFSET ?
        """,
    ),
    # MAX(id) rather than COUNT(*): the id space may have gaps
    QueryKind.POEMS_BY_ID: (
        "SELECT MAX(id) FROM poetry",
        "SELECT poem_text, poet_name, poet_era FROM poetry WHERE id = ?",
    ),
    QueryKind.QUOTES: (
        "SELECT COUNT(*) FROM quotes WHERE category != 'hadith'",
        """
            SELECT text, author, category FROM quotes
            WHERE category != 'hadith'
            ORDER BY id LIMIT 1 OFFSET ?
        """,
    ),
    QueryKind.HADITH: (
        "SELECT COUNT(*) FROM quotes WHERE category = 'hadith'",
        """
            SELECT text, author, category FROM quotes
            WHERE category = 'hadith'
            ORDER BY id LIMIT 1 OFFSET ?
        """,
    ),
}


def query_kind(mode: Mode, era_filter: str = "") -> QueryKind:
    """Map a resolved mode (and optional era filter) to its query templates"""
    if mode is Mode.POEMS:
        return QueryKind.POEMS_BY_ERA if era_filter else QueryKind.POEMS_BY_ID
    if mode is Mode.QUOTES:
        return QueryKind.QUOTES
    if mode is Mode.HADITH:
        return QueryKind.HADITH
    raise ValueError(f"Mode must be resolved before selecting content: {mode!r}")


def translate_author(name: str) -> str:
    """Arabic name for a known hadith compiler; anything else is returned unchanged"""
    return AUTHOR_TRANSLATIONS.get(name.strip(), name)


def pick_couplet(
    poem_text: str,
    rng: random.Random,
    config: SelectionConfig = selection_config,
) -> str:
    """
    Choose one couplet from a poem.

    Lines are paired from the top (0-1, 2-3, ...) and a trailing unpaired
    line is never used. The pair is printed second line first, joined by
    the rosette separator.

    Args:
        poem_text: Raw poem text, one hemistich per line
        rng: Random source used to choose the pair

    Returns:
        The couplet, the single usable line, or the raw text when no line is usable
    """
    clean_lines = []
    for line in poem_text.split("\n"):
        line = line.strip()
        if len(line) > config.min_line_length:
            clean_lines.append(line)

    if not clean_lines:
        return poem_text
    if len(clean_lines) == 1:
        return clean_lines[0]

    idx = 0
    if len(clean_lines) > 2:
        limit = len(clean_lines) - len(clean_lines) % 2
        idx = rng.randrange(limit // 2) * 2

    return clean_lines[idx + 1] + config.couplet_separator + clean_lines[idx]


class ContentService:
    """Random content selection over an open content database."""

    def __init__(
        self,
        conn: sqlite3.Connection,
        rng: random.Random,
        config: SelectionConfig = selection_config,
    ):
        self.conn = conn
        self.rng = rng
        self.config = config

    def _count(self, sql: str, args: Tuple) -> int:
        try:
            row = self.conn.execute(sql, args).fetchone()
        except sqlite3.Error as e:
            logger.warning(f"Count query failed: {e}")
            return 0
        if row is None or row[0] is None:
            return 0
        return int(row[0])

    def _poem_content(self, row: sqlite3.Row) -> Content:
        text = pick_couplet(row[0] or "", self.rng, self.config)
        return Content(text=text, author=row[1] or "", sub=row[2] or "")

    def _quote_content(self, row: sqlite3.Row) -> Content:
        text, author, category = row[0] or "", row[1] or "", row[2]
        sub = WISDOM_LABEL
        if category == HADITH_CATEGORY:
            sub = HADITH_LABEL
            author = translate_author(author)
        return Content(text=text, author=author, sub=sub)

    def select(self, mode: Mode, era_filter: str = "") -> Optional[Content]:
        """
        Fetch one random entry for a resolved mode.

        Args:
            mode: POEMS, QUOTES or HADITH
            era_filter: Case-sensitive substring of the poet era (poems only)

        Returns:
            Content, or None if nothing matched within the allowed attempts
        """
        kind = query_kind(mode, era_filter)
        count_sql, data_sql = QUERIES[kind]
        args: Tuple = (era_filter,) if kind is QueryKind.POEMS_BY_ERA else ()

        count = self._count(count_sql, args)
        if count <= 0:
            logger.debug(f"No rows for {kind.value}")
            return None

        for attempt in range(1, self.config.max_attempts + 1):
            offset = self.rng.randrange(count)
            if kind is QueryKind.POEMS_BY_ID:
                offset += 1  # ids start at 1

            try:
                row = self.conn.execute(data_sql, args + (offset,)).fetchone()
            except sqlite3.Error as e:
                logger.warning(f"Data query failed for {kind.value}: {e}")
                continue

            if row is None:
                logger.debug(f"Attempt {attempt}: nothing at {offset} for {kind.value}")
                continue

            if mode is Mode.POEMS:
                content = self._poem_content(row)
            else:
                content = self._quote_content(row)

            if content.is_complete:
                return content
            logger.debug(f"Attempt {attempt}: incomplete row at {offset} for {kind.value}")

        return None
