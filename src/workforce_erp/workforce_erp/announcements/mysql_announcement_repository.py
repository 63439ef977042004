from __future__ import annotations

import json
from typing import Optional, Sequence

from ..core.enums import Priority
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Announcement
from .repository import AnnouncementRepository

_COLUMNS = "announcement_id, title, published_on, content, categories, priority"


def _to_announcement(r: dict) -> Announcement:
    return Announcement(
        announcement_id=str(r["announcement_id"]),
        title=r["title"],
        date=r["published_on"],
        content=r["content"],
        categories=tuple(json.loads(r["categories"] or "[]")),
        priority=Priority(r["priority"]),
    )


class MySQLAnnouncementRepository(AnnouncementRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Announcement]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM announcements ORDER BY published_on DESC")
            return [_to_announcement(r) for r in fetchall(cur)]

    def get_by_id(self, announcement_id: str) -> Optional[Announcement]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM announcements WHERE announcement_id=%s", (announcement_id,))
            r = fetchone(cur)
            return _to_announcement(r) if r else None

    def save(self, announcement: Announcement) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO announcements(announcement_id, title, published_on, content, categories, priority)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE title=VALUES(title), published_on=VALUES(published_on),
                    content=VALUES(content), categories=VALUES(categories), priority=VALUES(priority)
                """,
                (
                    announcement.announcement_id,
                    announcement.title,
                    announcement.date,
                    announcement.content,
                    json.dumps(list(announcement.categories)),
                    announcement.priority.value,
                ),
            )

    def delete(self, announcement_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM announcements WHERE announcement_id=%s", (announcement_id,))
            return cur.rowcount > 0
