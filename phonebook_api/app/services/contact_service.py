"""
Service layer for contacts.

``ContactService`` owns the SQLite connection opened at startup and
exposes one query per operation.  A single instance is created by the
application factory and handed to the endpoints through a FastAPI
dependency, so there is no module-level database handle.

Each operation holds a lock for its whole duration, which makes it an
atomic unit for callers sharing the connection.  Writes commit on
success and roll back on failure; errors are logged and re-raised.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
import uuid
from contextlib import contextmanager
from typing import Iterator, List, Optional

from phonebook_api.app.schemas.contact import ContactRead, ContactWrite

logger = logging.getLogger(__name__)

_SELECT_ALL = "SELECT id, name, phone, email FROM contacts ORDER BY name"
_SELECT_ONE = "SELECT id, name, phone, email FROM contacts WHERE id = ?"
_INSERT = "INSERT INTO contacts (id, name, phone, email) VALUES (?, ?, ?, ?)"
_UPDATE = "UPDATE contacts SET name = ?, phone = ?, email = ? WHERE id = ?"
_DELETE = "DELETE FROM contacts WHERE id = ?"


class ContactService:
    """CRUD operations on the ``contacts`` table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._lock = threading.Lock()

    @contextmanager
    def _cursor(self, write: bool = False) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor while holding the lock; commit writes on exit."""
        with self._lock:
            cursor = self._conn.cursor()
            try:
                yield cursor
                if write:
                    self._conn.commit()
            except Exception:
                if write:
                    self._conn.rollback()
                logger.exception("Contact query failed")
                raise
            finally:
                cursor.close()

    async def list_contacts(self) -> List[ContactRead]:
        """Return every contact ordered by name."""
        with self._cursor() as cursor:
            rows = cursor.execute(_SELECT_ALL).fetchall()
        return [self._row_to_contact(row) for row in rows]

    async def get_contact(self, contact_id: str) -> Optional[ContactRead]:
        """Retrieve a single contact by its ID."""
        with self._cursor() as cursor:
            row = cursor.execute(_SELECT_ONE, (contact_id,)).fetchone()
        if not row:
            return None
        return self._row_to_contact(row)

    async def create_contact(self, data: ContactWrite) -> ContactRead:
        """Insert a new contact and return it as stored.

        The ID is a random UUID generated here.  The row is read back
        after the insert so the response reflects what the database
        actually holds.
        """
        contact_id = str(uuid.uuid4())
        with self._cursor(write=True) as cursor:
            cursor.execute(_INSERT, (contact_id, data.name, data.phone, data.email))
            row = cursor.execute(_SELECT_ONE, (contact_id,)).fetchone()
        logger.info("Created contact %s", contact_id)
        return self._row_to_contact(row)

    async def update_contact(self, contact_id: str, data: ContactWrite) -> Optional[ContactRead]:
        """Overwrite name, phone and email of an existing contact.

        Returns the updated contact or ``None`` if the record does not
        exist.
        """
        with self._cursor(write=True) as cursor:
            cursor.execute(_UPDATE, (data.name, data.phone, data.email, contact_id))
            if cursor.rowcount == 0:
                return None
            row = cursor.execute(_SELECT_ONE, (contact_id,)).fetchone()
        logger.info("Updated contact %s", contact_id)
        return self._row_to_contact(row)

    async def delete_contact(self, contact_id: str) -> bool:
        """Delete a contact by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        with self._cursor(write=True) as cursor:
            cursor.execute(_DELETE, (contact_id,))
            affected = cursor.rowcount
        if affected:
            logger.info("Deleted contact %s", contact_id)
        return affected > 0

    async def count_contacts(self) -> int:
        """Return the number of stored contacts."""
        with self._cursor() as cursor:
            return cursor.execute("SELECT COUNT(*) FROM contacts").fetchone()[0]

    def close(self) -> None:
        """Close the connection; called once when the application stops."""
        with self._lock:
            self._conn.close()

    @staticmethod
    def _row_to_contact(row: sqlite3.Row) -> ContactRead:
        """Convert a database row to a ContactRead schema instance."""
        return ContactRead(
            id=row["id"],
            name=row["name"],
            phone=row["phone"],
            # Rows written by other tools may carry NULL here
            email=row["email"] or "",
        )
