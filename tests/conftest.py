"""
Pytest configuration and fixtures.
Each test gets its own SQLite file built from db/schema.sql.
"""
import io
import sqlite3
from pathlib import Path

import pytest
from rich.console import Console

SCHEMA_SQL = Path(__file__).parent.parent / "db" / "schema.sql"


class ScriptedRandom:
    """Random source that replays fixed randrange() results."""

    def __init__(self, values, choices=None):
        self.values = list(values)
        self.choices = list(choices or [])
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value

    def choice(self, seq):
        return self.choices.pop(0) if self.choices else seq[0]


def create_database(path: Path, quotes=(), poems=()) -> Path:
    """Write a content database with the given (id, ...) rows."""
    conn = sqlite3.connect(path)
    try:
        conn.executescript(SCHEMA_SQL.read_text(encoding="utf-8"))
        conn.executemany(
            "INSERT INTO quotes (id, text, author, category) VALUES (?, ?, ?, ?)",
            quotes,
        )
        conn.executemany(
            "INSERT INTO poetry (id, poem_text, poet_name, poet_era) VALUES (?, ?, ?, ?)",
            poems,
        )
        conn.commit()
    finally:
        conn.close()
    return path


SAMPLE_QUOTES = [
    (1, "قيمة كل امرئ ما يحسنه", "علي بن أبي طالب", "wisdom"),
    (2, "الصبر مفتاح الفرج", "مثل عربي", "proverb"),
    (3, "الدين النصيحة", " Muslim ", "hadith"),
    (4, "الكلمة الطيبة صدقة", "Bukhari", "hadith"),
]

SAMPLE_POEMS = [
    (1, "قفا نبك من ذكرى حبيب ومنزل\nبسقط اللوى بين الدخول فحومل", "امرؤ القيس", "Pre-Islamic"),
    (2, "دع الأيام تفعل ما تشاء\nوطب نفسا إذا حكم القضاء", "الإمام الشافعي", "Abbasid"),
    # id 3 is missing on purpose
    (4, "إذا الشعب يوما أراد الحياة\nفلا بد أن يستجيب القدر", "أبو القاسم الشابي", "Modern"),
]


@pytest.fixture
def sample_db(tmp_path):
    """Database with a few quotes, hadith and poems (poetry ids have a gap)."""
    return create_database(tmp_path / "hikma.db", SAMPLE_QUOTES, SAMPLE_POEMS)


@pytest.fixture
def empty_db(tmp_path):
    """Database with the schema and no rows."""
    return create_database(tmp_path / "empty.db")


@pytest.fixture
def conn(sample_db):
    connection = sqlite3.connect(sample_db)
    connection.row_factory = sqlite3.Row
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture
def record_console():
    """Plain-text console writing to a buffer."""
    def make(width=100, color=False):
        return Console(
            file=io.StringIO(),
            width=width,
            force_terminal=color,
            color_system="standard" if color else None,
            no_color=False,
            highlight=False,
        )
    return make
