from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_min_length
from ..core.constants import DEFAULT_ANNOUNCEMENT_CATEGORY
from ..core.enums import Priority
from ..core.exceptions import NotFoundError
from .model import Announcement
from .repository import AnnouncementRepository

logger = logging.getLogger(__name__)


class AnnouncementService:
    def __init__(self, announcements: AnnouncementRepository):
        self._announcements = announcements

    def publish(
        self,
        *,
        title: str,
        content: str,
        categories: Optional[Iterable[str]] = None,
        priority: Priority = Priority.MEDIUM,
        on: Optional[date] = None,
    ) -> Announcement:
        cleaned = tuple(dict.fromkeys(c.strip() for c in (categories or ()) if c and c.strip()))
        announcement = Announcement(
            announcement_id=uuid.uuid4().hex,
            title=require_min_length(title, 5, "Title"),
            date=on or today_local(),
            content=require_min_length(content, 10, "Content"),
            categories=cleaned or (DEFAULT_ANNOUNCEMENT_CATEGORY,),
            priority=Priority(priority),
        )
        self._announcements.save(announcement)
        logger.info("Announcement %s published", announcement.announcement_id)
        return announcement

    def list(self, *, category: Optional[str] = None) -> Sequence[Announcement]:
        """Newest first."""
        items = list(self._announcements.list_all())
        if category:
            wanted = category.strip().lower()
            items = [a for a in items if wanted in (c.lower() for c in a.categories)]
        items.sort(key=lambda a: a.date, reverse=True)
        return items

    def remove(self, announcement_id: str) -> None:
        if not self._announcements.delete(str(announcement_id)):
            raise NotFoundError(f"Announcement {announcement_id} not found")
