"""
Smoke tests for the Streamlit page.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from gpa_projector.config import (
    CREDITS_NOT_PARSABLE_MESSAGE,
    GPA_NOT_PARSABLE_MESSAGE,
    NO_CREDIT_HOURS_MESSAGE,
)

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH)
    at.run()
    return at


def _calculate(at, gpa_text, credits_text):
    at.text_input(key="prior_gpa").input(gpa_text)
    at.text_input(key="prior_credits").input(credits_text)
    at.button(key="calculate").click()
    at.run()


def test_page_loads(app):
    assert not app.exception
    assert app.title[0].value == "🎓 Semester GPA Calculator"


def test_unparsable_gpa_shows_error(app):
    _calculate(app, "", "0")
    assert [e.value for e in app.error] == [GPA_NOT_PARSABLE_MESSAGE]
    assert len(app.metric) == 0


def test_unparsable_credits_shows_error(app):
    _calculate(app, "3.5", "lots")
    assert [e.value for e in app.error] == [CREDITS_NOT_PARSABLE_MESSAGE]


def test_no_courses_shows_prior_gpa(app):
    _calculate(app, "3.5", "30")
    assert not app.error
    assert app.metric[0].value == "3.500"


def test_no_credit_hours_shows_warning(app):
    _calculate(app, "0.0", "0")
    assert [w.value for w in app.warning] == [NO_CREDIT_HOURS_MESSAGE]


def _add_course(at, name, grade_text):
    at.text_input(key="new_course_name").input(name)
    at.text_input(key="new_course_grade").input(grade_text)
    next(b for b in at.button if b.label == "Add Course").click()
    at.run()


def _course_rows(at):
    return [c.value for c in at.caption if c.value.endswith(("Credit Hour", "Credit Hours"))]


def test_add_course_defaults_to_three_credit_hours(app):
    _add_course(app, "Calc", "91")
    assert not app.exception
    assert _course_rows(app) == ["3 Credit Hours"]
    assert app.session_state["course_store"].courses[0].credit_hours == 3


def test_delete_discards_projected_gpa(app):
    _add_course(app, "Calc", "91")
    _calculate(app, "3.0", "30")
    assert [m.value for m in app.metric] == ["3.061"]

    app.button(key="delete_0").click()
    app.run()
    assert len(app.metric) == 0
    assert _course_rows(app) == []


def test_adding_course_discards_projected_gpa(app):
    _calculate(app, "3.5", "30")
    assert len(app.metric) == 1

    _add_course(app, "Calc", "91")
    assert len(app.metric) == 0


def test_delete_removes_only_clicked_row(app):
    _add_course(app, "Calc", "91")
    _add_course(app, "Calc", "75")
    assert len(_course_rows(app)) == 2

    app.button(key="delete_0").click()
    app.run()
    assert len(_course_rows(app)) == 1
    remaining = app.session_state["course_store"].courses
    assert [(c.name, c.grade) for c in remaining] == [("Calc", 75.0)]


def test_add_form_shows_grade_range(app):
    assert "Enter your grade 0-100." in [c.value for c in app.caption]
