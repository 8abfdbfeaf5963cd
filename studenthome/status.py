"""
Session status classification.

Status label precedence (first match wins):
    opened          -> Submitted / Pending
    waiting to open -> Awaiting
    published       -> Published
    otherwise       -> Closed

The tooltip is built independently: one base message, then the closed
and published suffixes are appended when those flags are set.
"""

from __future__ import annotations

from studenthome import const
from studenthome.model import SessionFlags


def status_for_session(flags: SessionFlags, has_submitted: bool) -> str:
    """
    Return the submission status label shown for a session.
    """
    if flags.opened:
        return const.STATUS_SUBMITTED if has_submitted else const.STATUS_PENDING

    if flags.waiting_to_open:
        return const.STATUS_AWAITING

    if flags.published:
        return const.STATUS_PUBLISHED

    return const.STATUS_CLOSED


def tooltip_for_session(flags: SessionFlags, has_submitted: bool) -> str:
    """
    Return the hover message explaining the session status.
    """
    if flags.waiting_to_open:
        msg = const.TOOLTIP_STATUS_AWAITING
    elif has_submitted:
        msg = const.TOOLTIP_STATUS_SUBMITTED
    else:
        msg = const.TOOLTIP_STATUS_PENDING

    if flags.closed:
        msg += const.TOOLTIP_STATUS_CLOSED
    if flags.published:
        msg += const.TOOLTIP_STATUS_PUBLISHED
    return msg
