"""
Loading dashboard input data from JSON.

This stands in for the application's data-access layer. The file holds
the account, the enrolled courses with their sessions and the student's
submission statuses:

    {
      "account": {"google_id": "alice.tmms", "name": "Alice"},
      "courses": [
        {"id": "CS2103", "name": "Software Engineering",
         "sessions": [{"name": "Mid-term feedback",
                       "start_time": "2026-10-01T00:00:00+00:00",
                       "end_time": "2026-10-30T23:59:00+00:00",
                       "grace_period_minutes": 15,
                       "visible_from": null,
                       "results_visible_from": null,
                       "results_follow_visible": false}]}
      ],
      "submissions": [
        {"course_id": "CS2103", "session_name": "Mid-term feedback", "submitted": true}
      ]
    }

Timestamps are ISO-8601; naive timestamps are read as UTC. "submitted" is
required and must be a JSON boolean; "results_follow_visible" defaults to
false but must be a boolean when given.

Unlike the rest of the page, a broken file is an input problem, not a
programming error: it raises DashboardDataError so the CLI can report it.
Missing submission entries are NOT checked here.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional, Tuple

from studenthome.model import Account, Course, CourseDetails, FeedbackSession, SessionKey
from studenthome.submissions import SubmissionStatusMap

logger = logging.getLogger(__name__)


class DashboardDataError(ValueError):
    """
    Raised when the dashboard data file is missing or malformed.
    """


def default_data_path() -> Path:
    """
    Return the default path of dashboard.json inside the package.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "dashboard.json"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp. None stays None; naive values become UTC.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise DashboardDataError(f"Invalid timestamp: {value!r}")
    try:
        dt = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise DashboardDataError(f"Invalid timestamp: {value!r}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _require_str(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise DashboardDataError(f"{where}: missing or empty '{key}'")
    return value.strip()


def _require_bool(data: dict[str, Any], key: str, where: str, default: Optional[bool] = None) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise DashboardDataError(f"{where}: '{key}' must be true or false")
    return value


def _parse_session(raw: Any, course_id: str) -> FeedbackSession:
    if not isinstance(raw, dict):
        raise DashboardDataError(f"Course {course_id}: session entries must be objects")
    name = _require_str(raw, "name", f"Course {course_id} session")
    where = f"Session {name!r} of {course_id}"

    start_time = parse_timestamp(raw.get("start_time"))
    end_time = parse_timestamp(raw.get("end_time"))
    if start_time is None or end_time is None:
        raise DashboardDataError(f"{where}: start_time and end_time are required")

    grace = raw.get("grace_period_minutes", 0)
    if not isinstance(grace, int) or isinstance(grace, bool) or grace < 0:
        raise DashboardDataError(f"{where}: grace_period_minutes must be a non-negative integer")

    return FeedbackSession(
        course_id=course_id,
        name=name,
        start_time=start_time,
        end_time=end_time,
        grace_period_minutes=grace,
        visible_from=parse_timestamp(raw.get("visible_from")),
        results_visible_from=parse_timestamp(raw.get("results_visible_from")),
        results_follow_visible=_require_bool(raw, "results_follow_visible", where, default=False),
    )


def _parse_course(raw: Any) -> CourseDetails:
    if not isinstance(raw, dict):
        raise DashboardDataError("Course entries must be objects")
    course_id = _require_str(raw, "id", "Course")
    name = str(raw.get("name", "") or "").strip()

    sessions_raw = raw.get("sessions", [])
    if not isinstance(sessions_raw, list):
        raise DashboardDataError(f"Course {course_id}: 'sessions' must be a list")

    sessions = [_parse_session(s, course_id) for s in sessions_raw]
    return CourseDetails(course=Course(id=course_id, name=name), feedback_sessions=sessions)


def _parse_submissions(raw: Any) -> SubmissionStatusMap:
    if not isinstance(raw, list):
        raise DashboardDataError("'submissions' must be a list")
    statuses: dict[SessionKey, bool] = {}
    for entry in raw:
        if not isinstance(entry, dict):
            raise DashboardDataError("Submission entries must be objects")
        course_id = _require_str(entry, "course_id", "Submission")
        session_name = _require_str(entry, "session_name", "Submission")
        where = f"Submission for {session_name!r} of {course_id}"
        statuses[SessionKey(course_id, session_name)] = _require_bool(entry, "submitted", where)
    return SubmissionStatusMap(statuses)


def load_dashboard(path: str | Path | None = None) -> Tuple[Account, List[CourseDetails], SubmissionStatusMap]:
    """
    Load account, courses and submission statuses from a dashboard JSON file.

    Raises DashboardDataError if the file is missing, unreadable or malformed.
    """
    data_path = Path(path) if path is not None else default_data_path()

    try:
        data = json.loads(data_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        logger.error("Dashboard data file not found: %s", data_path)
        raise DashboardDataError(f"Data file not found: {data_path}") from e
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("Could not read dashboard data %s: %s", data_path, e)
        raise DashboardDataError(f"Could not read {data_path}: {e}") from e

    if not isinstance(data, dict):
        raise DashboardDataError("Dashboard data must be a JSON object")

    account_raw = data.get("account")
    if not isinstance(account_raw, dict):
        raise DashboardDataError("Missing 'account' object")
    account = Account(
        google_id=_require_str(account_raw, "google_id", "Account"),
        name=str(account_raw.get("name", "") or ""),
        email=str(account_raw.get("email", "") or ""),
    )

    courses_raw = data.get("courses", [])
    if not isinstance(courses_raw, list):
        raise DashboardDataError("'courses' must be a list")
    courses = [_parse_course(c) for c in courses_raw]

    submissions = _parse_submissions(data.get("submissions", []))

    logger.debug(
        "Loaded %d courses and %d submission statuses from %s", len(courses), len(submissions), data_path
    )
    return account, courses, submissions
