"""
Business logic for performers.

A performer is an artist or band that plays at concerts: a database
assigned id, a name and the name of an image file.
"""

import logging
from typing import Any, Dict, List

from concert_lab_api.app.core.db import get_connection
from concert_lab_api.app.schemas.performer import PerformerCreate, PerformerRead


class PerformerService:
    """Service for managing performers stored in SQLite."""

    @classmethod
    async def create_performer(cls, data: PerformerCreate) -> PerformerRead:
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO performers (name, image_uri) VALUES (?, ?)",
                (data.name, data.image_uri),
            )
            performer_id = cursor.lastrowid
            conn.commit()
            logger.info("Created performer '%s' (id=%s)", data.name, performer_id)
            return PerformerRead(id=performer_id, **data.model_dump())
        finally:
            conn.close()

    @classmethod
    async def get_performer(cls, performer_id: int) -> PerformerRead:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, image_uri FROM performers WHERE id = ?", (performer_id,)
            ).fetchone()
            if not row:
                raise ValueError("Performer not found")
            return PerformerRead(id=row["id"], name=row["name"], image_uri=row["image_uri"])
        finally:
            conn.close()

    @classmethod
    async def list_performers(cls, limit: int = 100, offset: int = 0) -> List[PerformerRead]:
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT id, name, image_uri FROM performers ORDER BY id LIMIT ? OFFSET ?",
                (limit, offset),
            ).fetchall()
            return [
                PerformerRead(id=row["id"], name=row["name"], image_uri=row["image_uri"])
                for row in rows
            ]
        finally:
            conn.close()

    @classmethod
    async def update_performer(cls, performer_id: int, updates: Dict[str, Any]) -> PerformerRead:
        """Partially update a performer; unspecified fields remain unchanged."""
        fields = [key for key in updates if key in {"name", "image_uri"}]
        if fields:
            conn = get_connection()
            try:
                cursor = conn.cursor()
                assignments = ", ".join(f"{key} = ?" for key in fields)
                cursor.execute(
                    f"UPDATE performers SET {assignments} WHERE id = ?",
                    tuple(updates[key] for key in fields) + (performer_id,),
                )
                if cursor.rowcount == 0:
                    raise ValueError("Performer not found")
                conn.commit()
            finally:
                conn.close()
        return await cls.get_performer(performer_id)

    @classmethod
    async def delete_performer(cls, performer_id: int) -> None:
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM performers WHERE id = ?", (performer_id,))
            if cursor.rowcount == 0:
                raise ValueError("Performer not found")
            conn.commit()
            logger.info("Deleted performer %s", performer_id)
        finally:
            conn.close()
