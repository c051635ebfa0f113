"""
SQLite database integration.

This module resolves where the database file lives
(``get_database_path``), opens it (``connect``), applies the schema
(``init_db``) and fills an empty table with sample contacts
(``seed_contacts``).  The schema is applied with ``CREATE TABLE IF NOT
EXISTS`` on every start; there is no migration history to track.

The connection is opened in WAL journal mode so that readers are not
blocked while a single writer is active.
"""

import logging
import os
import sqlite3
import uuid
from pathlib import Path
from typing import Optional

from .config import settings

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS contacts (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    phone TEXT NOT NULL,
    email TEXT DEFAULT ''
);
"""

# (name, phone, email) inserted on first run when the table is empty.
SEED_CONTACTS = [
    ("Ron Levi", "050-111-2233", "ron@example.com"),
    ("Marine Azulay", "052-444-5566", "marine@example.com"),
]


def get_database_path(data_dir: Optional[str] = None, db_filename: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the data directory is an absolute path, use it directly.
    Otherwise resolve it relative to the project root (the directory
    containing the ``phonebook_api`` package).
    """
    data_dir = data_dir or settings.data_dir
    db_filename = db_filename or settings.db_filename
    if os.path.isabs(data_dir):
        return str(Path(data_dir) / db_filename)
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / data_dir / db_filename).resolve())


def connect(db_path: str) -> sqlite3.Connection:
    """Open (creating if needed) the database file at ``db_path``.

    The parent directory is created when missing.  The connection may
    be shared between threads; callers are responsible for serialising
    access to it (see ``ContactService``).
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path, check_same_thread=False)
    # Return rows as dict-like objects keyed by column name
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode = WAL")
    logger.info("Opened database %s", db_path)
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create the ``contacts`` table if it does not exist yet."""
    conn.executescript(SCHEMA_SQL)
    conn.commit()
    logger.debug("Database schema is up to date")


def seed_contacts(conn: sqlite3.Connection) -> int:
    """Insert the sample contacts if the table is empty.

    Returns the number of inserted rows (0 when the table already
    had data).
    """
    count = conn.execute("SELECT COUNT(*) AS cnt FROM contacts").fetchone()["cnt"]
    if count:
        return 0
    conn.executemany(
        "INSERT INTO contacts (id, name, phone, email) VALUES (?, ?, ?, ?)",
        [(str(uuid.uuid4()), name, phone, email) for name, phone, email in SEED_CONTACTS],
    )
    conn.commit()
    logger.info("Seeded %d sample contacts", len(SEED_CONTACTS))
    return len(SEED_CONTACTS)
