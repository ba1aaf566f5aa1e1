"""
Database bootstrap and connection utilities

The content database ships gzip-compressed inside the package and is
extracted to the per-user data directory the first time it is needed.
"""

import gzip
import logging
import os
import shutil
import sqlite3
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

import platformdirs

from .config import StorageConfig, storage_config
from .console import console

logger = logging.getLogger(__name__)


class DatabaseUnavailableError(Exception):
    """The content database cannot be installed or opened"""


def get_data_dir(config: StorageConfig = storage_config) -> Path:
    """Per-user data directory, e.g. ~/.local/share/hikma on Linux"""
    try:
        Path.home()
    except (RuntimeError, KeyError) as e:
        raise DatabaseUnavailableError("Could not find home directory.") from e
    return platformdirs.user_data_path(config.app_name, appauthor=False)


def install_database(data_dir: Path, db_path: Path, archive: Path) -> None:
    """Decompress the bundled archive into db_path"""
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DatabaseUnavailableError(f"Failed to create directory: {e}") from e

    # Extract next to the target and rename, so a broken run leaves nothing behind
    partial_path = db_path.with_name(db_path.name + ".part")
    try:
        with gzip.open(archive, "rb") as src, open(partial_path, "wb") as dest:
            shutil.copyfileobj(src, dest)
        os.replace(partial_path, db_path)
    except FileNotFoundError as e:
        partial_path.unlink(missing_ok=True)
        raise DatabaseUnavailableError(f"Failed to read embedded data: {e}") from e
    except (gzip.BadGzipFile, EOFError, zlib.error) as e:
        partial_path.unlink(missing_ok=True)
        raise DatabaseUnavailableError(f"Failed to decompress embedded data: {e}") from e
    except OSError as e:
        partial_path.unlink(missing_ok=True)
        raise DatabaseUnavailableError(f"Failed to write database: {e}") from e

    logger.debug(f"Extracted {archive} -> {db_path}")


def ensure_local_database(
    data_dir: Optional[Path] = None,
    archive: Optional[Path] = None,
    config: StorageConfig = storage_config,
) -> Path:
    """Return the local database path, installing it on first run"""
    data_dir = data_dir or get_data_dir(config)
    archive = archive or config.archive_path
    db_path = data_dir / config.db_name

    if db_path.exists():
        logger.debug(f"Using existing database: {db_path}")
        return db_path

    console.print("📦 First run detected. Installing database...")
    install_database(data_dir, db_path, archive)
    console.print("✅ Installation complete.")
    console.print()
    return db_path


@contextmanager
def get_db(db_path: Path) -> Generator[sqlite3.Connection, None, None]:
    """Open the content database read-only as a context manager"""
    try:
        conn = sqlite3.connect(f"{Path(db_path).resolve().as_uri()}?mode=ro", uri=True)
    except sqlite3.Error as e:
        raise DatabaseUnavailableError(f"Failed to open database: {e}") from e

    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()
