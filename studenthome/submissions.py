"""
Submission status lookup.

Maps (course id, session name) to whether the student has submitted.
Every session shown on the page must have an entry; a missing one is a
caller bug and is raised, never defaulted to "not submitted".
"""

from __future__ import annotations

from typing import Iterator, Mapping

from studenthome.model import SessionKey


class MissingSubmissionStatusError(LookupError):
    """
    Raised when a session has no submission status entry.
    """

    def __init__(self, key: SessionKey) -> None:
        super().__init__(
            f"No submission status for session {key.session_name!r} of course {key.course_id!r}"
        )
        self.key = key


class SubmissionStatusMap(Mapping[SessionKey, bool]):
    """
    Read-only mapping SessionKey -> has submitted.
    """

    def __init__(self, statuses: Mapping[SessionKey, bool] | None = None) -> None:
        self._statuses: dict[SessionKey, bool] = {}
        for key, submitted in (statuses or {}).items():
            self._statuses[SessionKey(*key)] = bool(submitted)

    def __getitem__(self, key: SessionKey) -> bool:
        return self._statuses[key]

    def __iter__(self) -> Iterator[SessionKey]:
        return iter(self._statuses)

    def __len__(self) -> int:
        return len(self._statuses)

    def has_submitted(self, key: SessionKey) -> bool:
        try:
            return self._statuses[key]
        except KeyError:
            raise MissingSubmissionStatusError(key) from None
