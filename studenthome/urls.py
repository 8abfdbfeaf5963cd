"""
Link builder for the student home page.

Parameter order matters to anything matching on URL shape:
- course details: user id first, then course id
- submission edit / results: course id, session name, user id last
"""

from __future__ import annotations

from urllib.parse import quote_plus

from studenthome.const import (
    PARAM_COURSE_ID,
    PARAM_FEEDBACK_SESSION_NAME,
    PARAM_USER_ID,
    STUDENT_COURSE_DETAILS_PAGE,
    STUDENT_FEEDBACK_RESULTS_PAGE,
    STUDENT_FEEDBACK_SUBMISSION_EDIT_PAGE,
)


def add_param_to_url(url: str, key: str, value: str | None) -> str:
    """
    Append `key=value` to url.

    Returns url unchanged if key or value is empty, or if the key is
    already present in the query string.
    """
    if not key or not value:
        return url
    if f"?{key}=" in url or f"&{key}=" in url:
        return url
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}{key}={quote_plus(value)}"


def course_details_link(course_id: str, user_id: str | None) -> str:
    link = add_param_to_url(STUDENT_COURSE_DETAILS_PAGE, PARAM_USER_ID, user_id)
    return add_param_to_url(link, PARAM_COURSE_ID, course_id)


def _session_link(page: str, course_id: str, session_name: str, user_id: str | None) -> str:
    link = add_param_to_url(page, PARAM_COURSE_ID, course_id)
    link = add_param_to_url(link, PARAM_FEEDBACK_SESSION_NAME, session_name)
    return add_param_to_url(link, PARAM_USER_ID, user_id)


def submission_edit_link(course_id: str, session_name: str, user_id: str | None) -> str:
    return _session_link(STUDENT_FEEDBACK_SUBMISSION_EDIT_PAGE, course_id, session_name, user_id)


def results_link(course_id: str, session_name: str, user_id: str | None) -> str:
    return _session_link(STUDENT_FEEDBACK_RESULTS_PAGE, course_id, session_name, user_id)
