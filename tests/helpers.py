"""
Shared fixtures for the test suite: a fixed "now" and session factories
for each lifecycle state.
"""

from datetime import datetime, timedelta, timezone

from studenthome.model import FeedbackSession

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def open_session(course_id: str, name: str, **kwargs) -> FeedbackSession:
    return FeedbackSession(
        course_id=course_id,
        name=name,
        start_time=NOW - timedelta(days=1),
        end_time=NOW + timedelta(days=1),
        **kwargs,
    )


def waiting_session(course_id: str, name: str, **kwargs) -> FeedbackSession:
    return FeedbackSession(
        course_id=course_id,
        name=name,
        start_time=NOW + timedelta(days=1),
        end_time=NOW + timedelta(days=5),
        **kwargs,
    )


def closed_session(course_id: str, name: str, **kwargs) -> FeedbackSession:
    return FeedbackSession(
        course_id=course_id,
        name=name,
        start_time=NOW - timedelta(days=10),
        end_time=NOW - timedelta(days=5),
        **kwargs,
    )
