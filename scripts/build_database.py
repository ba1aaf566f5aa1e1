#!/usr/bin/env python3
"""
Database Build Script
Builds the حكمة content database from SQL sources and packs it for bundling

Sources:
1. db/schema.sql: quotes and poetry tables
2. db/seed.sql: bundled starter content

Output: src/hikma/data/hikma.db.gz, extracted on the user's first run
"""

import gzip
import shutil
import sqlite3
import tempfile
from pathlib import Path
import logging

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Paths
BASE_DIR = Path(__file__).parent.parent
DB_DIR = BASE_DIR / "db"
SCHEMA_SQL = DB_DIR / "schema.sql"
SEED_SQL = DB_DIR / "seed.sql"
OUTPUT_ARCHIVE = BASE_DIR / "src" / "hikma" / "data" / "hikma.db.gz"


class DatabaseBuilder:
    """Build the content database and compress it into the package"""

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.conn = None

    def connect(self):
        """Connect to database"""
        self.conn = sqlite3.connect(self.db_path)
        logger.info(f"Connected to database: {self.db_path}")

    def close(self):
        """Close database connection"""
        if self.conn:
            self.conn.commit()
            self.conn.close()
            self.conn = None

    def run_script(self, script_path: Path) -> bool:
        """Execute a SQL file against the database"""
        if not script_path.exists():
            logger.error(f"SQL file not found: {script_path}")
            return False

        try:
            self.conn.executescript(script_path.read_text(encoding='utf-8'))
            self.conn.commit()
            logger.info(f"Applied {script_path.name}")
            return True
        except sqlite3.Error as e:
            logger.error(f"Error applying {script_path.name}: {e}")
            return False

    def generate_stats(self):
        """Log row counts per table and category"""
        cursor = self.conn.cursor()

        cursor.execute("SELECT category, COUNT(*) FROM quotes GROUP BY category ORDER BY category")
        for category, count in cursor.fetchall():
            logger.info(f"  quotes[{category}]: {count}")

        cursor.execute("SELECT poet_era, COUNT(*) FROM poetry GROUP BY poet_era ORDER BY poet_era")
        for era, count in cursor.fetchall():
            logger.info(f"  poetry[{era}]: {count}")

    def build(self, seed_path: Path) -> bool:
        self.connect()
        try:
            if not self.run_script(SCHEMA_SQL):
                return False
            if not self.run_script(seed_path):
                return False
            self.generate_stats()
            return True
        finally:
            self.close()


def compress(db_path: Path, archive_path: Path):
    """gzip the database into archive_path (mtime zeroed for reproducible output)"""
    archive_path.parent.mkdir(parents=True, exist_ok=True)
    with open(db_path, 'rb') as src, open(archive_path, 'wb') as raw:
        with gzip.GzipFile(filename="", mode='wb', fileobj=raw, compresslevel=9, mtime=0) as dest:
            shutil.copyfileobj(src, dest)
    logger.info(f"Wrote {archive_path} ({archive_path.stat().st_size} bytes)")


def main():
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="Build the حكمة content database")
    parser.add_argument("--seed", default=str(SEED_SQL), help="SQL file with content rows")
    parser.add_argument("--output", default=str(OUTPUT_ARCHIVE), help="Compressed archive path")
    parser.add_argument("--keep-db", default=None, help="Also keep the uncompressed database here")

    args = parser.parse_args()

    with tempfile.TemporaryDirectory() as tmp:
        db_path = Path(tmp) / "hikma.db"

        if not DatabaseBuilder(db_path).build(Path(args.seed)):
            logger.error("Database build failed")
            return 1

        compress(db_path, Path(args.output))
        if args.keep_db:
            shutil.copyfile(db_path, args.keep_db)
            logger.info(f"Kept uncompressed copy at {args.keep_db}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
