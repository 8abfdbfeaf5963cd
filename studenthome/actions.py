"""
Action buttons for one session row.

Builds the HTML fragment with the buttons a student can use on a session:
- "View Responses" (always present, disabled until results are published)
- "Edit Submission" / "View Submission" once the student has submitted
- "Start Submission" (or the edit/view button for closed sessions) otherwise

The fragment must stay byte-compatible with existing pages and tests that
match on it, including the places where attributes are not separated by a
space. Values interpolated here (urls, ids, fixed tooltips) are trusted;
nothing is escaped again. The templates fix attribute order only: values
placed in href, id, name and title are never HTML-escaped here, so callers
must pass url-encoded links and plain-text tooltips.
"""

from __future__ import annotations

from studenthome import const
from studenthome.model import SessionFlags
from studenthome.urls import results_link, submission_edit_link

BUTTON_CLASS = "btn btn-default btn-xs btn-tm-actions"
TOOLTIP_ATTRS = 'data-toggle="tooltip" data-placement="top"'

# Each template starts right after the (possibly disabled) class attribute.
_RESULTS_BUTTON = (
    'href="{href}" name="viewFeedbackResults{idx}"  id="viewFeedbackResults{idx}" '
    '{tooltip_attrs}title="{title}"role="button">View Responses</a>'
)
_EDIT_BUTTON = (
    ' href="{href}" name="editFeedbackResponses{idx}" id="editFeedbackResponses{idx}" '
    '{tooltip_attrs}title="{title}"role="button">{text}</a>'
)
_SUBMIT_BUTTON = (
    'id="submitFeedback{idx}" href="{href}" '
    '{tooltip_attrs}title="{title}"role="button">{text}</a>'
)


def _open_tag(enabled: bool) -> str:
    return f'<a class="{BUTTON_CLASS}' + ('"' if enabled else const.DISABLED)


def _submission_text(flags: SessionFlags) -> str:
    return ("Edit" if flags.opened else "View") + " Submission"


def session_actions(
    course_id: str,
    session_name: str,
    flags: SessionFlags,
    idx: int,
    has_submitted: bool,
    user_id: str | None,
) -> str:
    """
    Return the action buttons markup for a session shown at row `idx`.
    """
    edit_href = submission_edit_link(course_id, session_name, user_id)

    result = _open_tag(flags.published) + _RESULTS_BUTTON.format(
        href=results_link(course_id, session_name, user_id),
        idx=idx,
        tooltip_attrs=TOOLTIP_ATTRS,
        title=const.TOOLTIP_SESSION_RESULTS,
    )

    if has_submitted:
        title = const.TOOLTIP_EDIT_SUBMITTED_RESPONSE if flags.opened else const.TOOLTIP_VIEW_SUBMITTED_RESPONSE
        result += f'<a class="{BUTTON_CLASS}"' + _EDIT_BUTTON.format(
            href=edit_href,
            idx=idx,
            tooltip_attrs=TOOLTIP_ATTRS,
            title=title,
            text=_submission_text(flags),
        )
        return result

    if not flags.closed:
        title = const.TOOLTIP_SESSION_AWAITING if flags.waiting_to_open else const.TOOLTIP_SESSION_SUBMIT
        text = "Start Submission"
    else:
        title = const.TOOLTIP_VIEW_SUBMITTED_RESPONSE
        text = _submission_text(flags)

    result += _open_tag(flags.visible) + _SUBMIT_BUTTON.format(
        href=edit_href,
        idx=idx,
        tooltip_attrs=TOOLTIP_ATTRS,
        title=title,
        text=text,
    )
    return result
