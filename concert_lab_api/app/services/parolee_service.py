"""
Business logic for parolees.

Parolees are persisted in the ``parolees`` SQLite table.  Identifiers
are assigned by the database on insert.  Every method opens its own
connection and closes it before returning.
"""

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from concert_lab_api.app.core.db import get_connection
from concert_lab_api.app.schemas.parolee import ParoleeCreate, ParoleeRead


logger = logging.getLogger(__name__)

_COLUMNS = "id, last_name, first_name, gender, date_of_birth"


class ParoleeService:
    """Service for managing parolee records."""

    @staticmethod
    def _row_to_read(row: sqlite3.Row) -> ParoleeRead:
        return ParoleeRead(
            id=row["id"],
            last_name=row["last_name"],
            first_name=row["first_name"],
            gender=row["gender"],
            date_of_birth=row["date_of_birth"],
        )

    @classmethod
    async def create_parolee(cls, data: ParoleeCreate) -> ParoleeRead:
        """Insert a new parolee and return it with its assigned id."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO parolees (last_name, first_name, gender, date_of_birth)
                VALUES (?, ?, ?, ?)
                """,
                (
                    data.last_name,
                    data.first_name,
                    data.gender.value,
                    data.date_of_birth.isoformat() if data.date_of_birth else None,
                ),
            )
            parolee_id = cursor.lastrowid
            conn.commit()
            logger.info("Created parolee %s %s (id=%s)", data.first_name, data.last_name, parolee_id)
            return ParoleeRead(id=parolee_id, **data.model_dump())
        finally:
            conn.close()

    @classmethod
    async def get_parolee(cls, parolee_id: int) -> ParoleeRead:
        """Return a parolee by id.

        Raises ``ValueError`` if no such parolee exists.
        """
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM parolees WHERE id = ?", (parolee_id,)
            ).fetchone()
            if not row:
                raise ValueError("Parolee not found")
            return cls._row_to_read(row)
        finally:
            conn.close()

    @classmethod
    async def list_parolees(
        cls,
        first_name: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[ParoleeRead]:
        """Return parolees ordered by first name, then id.

        ``first_name`` restricts the result to an exact first name match.
        """
        query = f"SELECT {_COLUMNS} FROM parolees"
        params: list = []
        if first_name is not None:
            query += " WHERE first_name = ?"
            params.append(first_name)
        query += " ORDER BY first_name ASC, id ASC LIMIT ? OFFSET ?"
        params.extend([limit, offset])
        conn = get_connection()
        try:
            rows = conn.execute(query, tuple(params)).fetchall()
            return [cls._row_to_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def update_parolee(cls, parolee_id: int, updates: Dict[str, Any]) -> ParoleeRead:
        """Apply a partial update and return the stored parolee.

        ``date_of_birth`` may be set to ``None`` to clear it; ``None`` for
        the required columns is ignored.
        """
        updates = dict(updates)
        if updates.get("gender") is not None:
            updates["gender"] = getattr(updates["gender"], "value", updates["gender"])
        if updates.get("date_of_birth") is not None:
            updates["date_of_birth"] = updates["date_of_birth"].isoformat()
        fields = [
            key for key in ("last_name", "first_name", "gender", "date_of_birth")
            if key in updates and (updates[key] is not None or key == "date_of_birth")
        ]
        conn = get_connection()
        try:
            cursor = conn.cursor()
            if fields:
                assignments = ", ".join(f"{key} = ?" for key in fields)
                params = [updates[key] for key in fields] + [parolee_id]
                cursor.execute(f"UPDATE parolees SET {assignments} WHERE id = ?", tuple(params))
                if cursor.rowcount == 0:
                    raise ValueError("Parolee not found")
                conn.commit()
                logger.info("Updated parolee %s: %s", parolee_id, ", ".join(fields))
        finally:
            conn.close()
        return await cls.get_parolee(parolee_id)

    @classmethod
    async def delete_parolee(cls, parolee_id: int) -> None:
        """Delete a parolee.  Raises ``ValueError`` if it does not exist."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM parolees WHERE id = ?", (parolee_id,))
            if cursor.rowcount == 0:
                raise ValueError("Parolee not found")
            conn.commit()
            logger.info("Deleted parolee %s", parolee_id)
        finally:
            conn.close()
