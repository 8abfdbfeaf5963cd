"""
Central data model definitions used across the project.

This module defines the input records (Account, Course, FeedbackSession,
CourseDetails) and the view-model records produced for the student home
page (CourseTable, SessionRow, ElementTag), so that:
- the assembler, the link builder and the markup builder share field names
- the rendering layer gets plain, immutable data
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, List, NamedTuple, Optional, Tuple


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


@dataclass(frozen=True)
class Account:
    """
    The student the page is rendered for. Only google_id ends up in links.
    """

    google_id: str
    name: str = ""
    email: str = ""


@dataclass(frozen=True)
class Course:
    id: str
    name: str


class SessionKey(NamedTuple):
    """
    Identifies one feedback session: (course id, session name).
    """

    course_id: str
    session_name: str


@dataclass(frozen=True)
class SessionFlags:
    """
    Lifecycle flags of a session at one instant.

    The flags are independent booleans. Nothing here forbids combinations
    the upstream lifecycle never produces (e.g. closed AND waiting_to_open).
    """

    opened: bool = False
    waiting_to_open: bool = False
    closed: bool = False
    published: bool = False
    visible: bool = False


@dataclass(frozen=True)
class FeedbackSession:
    """
    One feedback session of a course.

    All datetimes should be timezone-aware and comparable with `now`.

    visible_from=None means the session becomes visible when it opens.
    results_follow_visible=True publishes results together with visibility,
    otherwise results are published at results_visible_from (never if None).
    """

    course_id: str
    name: str
    start_time: datetime
    end_time: datetime
    grace_period_minutes: int = 0
    visible_from: Optional[datetime] = None
    results_visible_from: Optional[datetime] = None
    results_follow_visible: bool = False

    def is_opened(self, now: Optional[datetime] = None) -> bool:
        t = _now(now)
        return self.start_time < t < self.end_time

    def is_waiting_to_open(self, now: Optional[datetime] = None) -> bool:
        return _now(now) < self.start_time

    def is_closed(self, now: Optional[datetime] = None) -> bool:
        # the grace period sits between "opened" and "closed"
        deadline = self.end_time + timedelta(minutes=self.grace_period_minutes)
        return _now(now) > deadline

    def is_visible(self, now: Optional[datetime] = None) -> bool:
        visible_from = self.visible_from if self.visible_from is not None else self.start_time
        return _now(now) >= visible_from

    def is_published(self, now: Optional[datetime] = None) -> bool:
        if self.results_follow_visible:
            return self.is_visible(now)
        if self.results_visible_from is None:
            return False
        return _now(now) >= self.results_visible_from

    def flags(self, now: Optional[datetime] = None) -> SessionFlags:
        """
        Evaluate every predicate against the same instant.
        """
        t = _now(now)
        return SessionFlags(
            opened=self.is_opened(t),
            waiting_to_open=self.is_waiting_to_open(t),
            closed=self.is_closed(t),
            published=self.is_published(t),
            visible=self.is_visible(t),
        )


@dataclass(frozen=True)
class CourseDetails:
    """
    A course together with its feedback sessions, in display order.
    """

    course: Course
    feedback_sessions: List[FeedbackSession] = field(default_factory=list)


# ---------------------------------------------------------------------------
# View model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ElementTag:
    """
    A link shown next to a course. Attributes keep their insertion order.
    """

    content: str
    attributes: Tuple[Tuple[str, str], ...] = ()

    def get(self, name: str) -> Optional[str]:
        for key, value in self.attributes:
            if key == name:
                return value
        return None

    def render(self) -> str:
        attrs = "".join(f' {key}="{value}"' for key, value in self.attributes)
        return f"<a{attrs}>{self.content}</a>"

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.content, "attributes": dict(self.attributes), "html": self.render()}


@dataclass(frozen=True)
class SessionRow:
    """
    One session line of a course table.

    `name` is already HTML-escaped; `actions` is raw markup.
    `index` is unique per page and only used for element ids.
    """

    name: str
    end_time: str
    tooltip: str
    status: str
    actions: str
    index: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "endTime": self.end_time,
            "tooltip": self.tooltip,
            "status": self.status,
            "actions": self.actions,
            "index": str(self.index),
        }


@dataclass(frozen=True)
class CourseTable:
    course: Course
    links: List[ElementTag]
    rows: List[SessionRow]

    def to_dict(self) -> dict[str, Any]:
        return {
            "course": {"id": self.course.id, "name": self.course.name},
            "links": [link.to_dict() for link in self.links],
            "rows": [row.to_dict() for row in self.rows],
        }
