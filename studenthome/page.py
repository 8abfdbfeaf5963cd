"""
Page data for the student home page.

StudentHomePageData turns the student's courses and their submission
statuses into one CourseTable per course, ready for the templating layer.

Session rows are numbered with a single running index over the whole page
(it is NOT reset between courses), so every action button id is unique.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from studenthome import const
from studenthome.actions import session_actions
from studenthome.model import Account, CourseDetails, CourseTable, ElementTag, FeedbackSession, SessionKey, SessionRow
from studenthome.status import status_for_session, tooltip_for_session
from studenthome.submissions import SubmissionStatusMap
from studenthome.timefmt import format_time
from studenthome.urls import course_details_link

logger = logging.getLogger(__name__)


class PageData:
    """
    Base for page data: carries the account the page is rendered for.
    """

    def __init__(self, account: Account) -> None:
        self.account = account

    @property
    def user_id(self) -> str:
        return self.account.google_id

    @staticmethod
    def sanitize_for_html(text: Optional[str]) -> str:
        """
        Escape text for use in HTML content and attributes.
        """
        if text is None:
            return ""
        return html.escape(text, quote=True).replace("/", "&#x2f;")


class StudentHomePageData(PageData):
    def __init__(
        self,
        account: Account,
        courses: Sequence[CourseDetails],
        submission_status: Mapping,
        now: Optional[datetime] = None,
    ) -> None:
        super().__init__(account)
        self.now = now if now is not None else datetime.now(timezone.utc)
        if not isinstance(submission_status, SubmissionStatusMap):
            submission_status = SubmissionStatusMap(submission_status)
        self.course_tables = self._build_course_tables(courses, submission_status)

    def _build_course_tables(
        self, courses: Sequence[CourseDetails], submission_status: SubmissionStatusMap
    ) -> List[CourseTable]:
        tables: List[CourseTable] = []
        session_idx = 0
        for details in courses:
            rows = self._build_session_rows(
                details.course.id, details.feedback_sessions, submission_status, session_idx
            )
            session_idx += len(rows)
            tables.append(
                CourseTable(
                    course=details.course,
                    links=self._build_course_links(details.course.id),
                    rows=rows,
                )
            )

        logger.debug("Built %d course tables with %d session rows for %s", len(tables), session_idx, self.user_id)
        return tables

    def _build_course_links(self, course_id: str) -> List[ElementTag]:
        return [
            ElementTag(
                "View Team",
                (
                    ("href", course_details_link(course_id, self.user_id)),
                    ("title", const.TOOLTIP_STUDENT_COURSE_DETAILS),
                ),
            )
        ]

    def _build_session_rows(
        self,
        course_id: str,
        sessions: Sequence[FeedbackSession],
        submission_status: SubmissionStatusMap,
        start_idx: int,
    ) -> List[SessionRow]:
        rows: List[SessionRow] = []
        for idx, session in enumerate(sessions, start=start_idx):
            # raises MissingSubmissionStatusError on a missing entry
            has_submitted = submission_status.has_submitted(SessionKey(course_id, session.name))
            flags = session.flags(self.now)

            rows.append(
                SessionRow(
                    name=self.sanitize_for_html(session.name),
                    end_time=format_time(session.end_time),
                    tooltip=tooltip_for_session(flags, has_submitted),
                    status=status_for_session(flags, has_submitted),
                    actions=session_actions(session.course_id, session.name, flags, idx, has_submitted, self.user_id),
                    index=idx,
                )
            )
        return rows

    def to_dict(self) -> dict:
        return {
            "user": self.user_id,
            "courseTables": [table.to_dict() for table in self.course_tables],
        }
