"""
Shared constants for the student home page.

Page URIs, query parameter names and the tooltip texts shown on the
dashboard. Kept in one place so links and markup stay consistent across
the assembler, the link builder and the action buttons.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Page URIs
# ---------------------------------------------------------------------------

STUDENT_COURSE_DETAILS_PAGE = "/page/studentCourseDetailsPage"
STUDENT_FEEDBACK_SUBMISSION_EDIT_PAGE = "/page/studentFeedbackSubmissionEditPage"
STUDENT_FEEDBACK_RESULTS_PAGE = "/page/studentFeedbackResultsPage"


# ---------------------------------------------------------------------------
# Query parameter names
# ---------------------------------------------------------------------------

PARAM_USER_ID = "user"
PARAM_COURSE_ID = "courseid"
PARAM_FEEDBACK_SESSION_NAME = "fsname"


# ---------------------------------------------------------------------------
# Tooltips
# ---------------------------------------------------------------------------

TOOLTIP_STUDENT_COURSE_DETAILS = "View and edit information regarding your team"

TOOLTIP_STATUS_AWAITING = "The feedback session is yet to be opened."
TOOLTIP_STATUS_PENDING = "The feedback session is open for submissions."
TOOLTIP_STATUS_SUBMITTED = "You have submitted your feedback for this session."
TOOLTIP_STATUS_CLOSED = "<br>The session is now closed for submissions."
TOOLTIP_STATUS_PUBLISHED = "<br>The responses for the session have been published and can now be viewed."

TOOLTIP_SESSION_RESULTS = "View the submitted responses for this feedback session"
TOOLTIP_EDIT_SUBMITTED_RESPONSE = "Edit submitted feedback"
TOOLTIP_VIEW_SUBMITTED_RESPONSE = "View submitted feedback"
TOOLTIP_SESSION_SUBMIT = "Start submitting feedback"
TOOLTIP_SESSION_AWAITING = "This feedback session is not yet opened."


# ---------------------------------------------------------------------------
# Status labels
# ---------------------------------------------------------------------------

STATUS_SUBMITTED = "Submitted"
STATUS_PENDING = "Pending"
STATUS_AWAITING = "Awaiting"
STATUS_PUBLISHED = "Published"
STATUS_CLOSED = "Closed"

STATUS_LABELS = (STATUS_SUBMITTED, STATUS_PENDING, STATUS_AWAITING, STATUS_PUBLISHED, STATUS_CLOSED)


# Appended to an open class attribute: closes it with an extra "disabled" class.
DISABLED = ' disabled" '
