from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import Priority


@dataclass(frozen=True)
class Announcement:
    announcement_id: str
    title: str
    date: date
    content: str
    categories: tuple[str, ...] = field(default_factory=tuple)
    priority: Priority = Priority.MEDIUM
