"""
Unit tests for the link builder.

Parameter order is part of the contract:
- course details: ?user=...&courseid=...
- edit / results: ?courseid=...&fsname=...&user=...
"""

import unittest

from studenthome.urls import add_param_to_url, course_details_link, results_link, submission_edit_link


class TestAddParamToUrl(unittest.TestCase):
    def test_first_param_uses_question_mark(self) -> None:
        self.assertEqual(add_param_to_url("/page", "courseid", "CS2103"), "/page?courseid=CS2103")

    def test_next_param_uses_ampersand(self) -> None:
        self.assertEqual(add_param_to_url("/page?a=1", "courseid", "CS2103"), "/page?a=1&courseid=CS2103")

    def test_empty_value_is_skipped(self) -> None:
        self.assertEqual(add_param_to_url("/page", "user", ""), "/page")
        self.assertEqual(add_param_to_url("/page", "user", None), "/page")

    def test_existing_key_is_not_added_twice(self) -> None:
        self.assertEqual(add_param_to_url("/page?user=a", "user", "b"), "/page?user=a")

    def test_value_is_url_encoded(self) -> None:
        self.assertEqual(add_param_to_url("/page", "fsname", "Mid term & more"), "/page?fsname=Mid+term+%26+more")


class TestLinks(unittest.TestCase):
    def test_course_details_link_puts_user_first(self) -> None:
        self.assertEqual(
            course_details_link("CS2103", "alice"),
            "/page/studentCourseDetailsPage?user=alice&courseid=CS2103",
        )

    def test_results_link_puts_user_last(self) -> None:
        self.assertEqual(
            results_link("CS2103", "Quiz", "alice"),
            "/page/studentFeedbackResultsPage?courseid=CS2103&fsname=Quiz&user=alice",
        )

    def test_submission_edit_link(self) -> None:
        self.assertEqual(
            submission_edit_link("CS2103", "Quiz", "alice"),
            "/page/studentFeedbackSubmissionEditPage?courseid=CS2103&fsname=Quiz&user=alice",
        )

    def test_missing_user_id_is_omitted(self) -> None:
        self.assertEqual(course_details_link("CS2103", ""), "/page/studentCourseDetailsPage?courseid=CS2103")


if __name__ == "__main__":
    unittest.main()
