import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

from .config import (
    CREDITS_NOT_PARSABLE_MESSAGE,
    FAILING_LETTER,
    FAILING_POINTS,
    GPA_NOT_PARSABLE_MESSAGE,
    GRADE_SCALE,
)

logger = logging.getLogger(__name__)

MAX_CREDIT_HOURS = int(np.iinfo(np.int64).max)


# ------------------------
# Data model
# ------------------------
@dataclass(frozen=True)
class Course:
    """A course taken this semester. Two courses with the same fields are the same course."""
    name: str
    credit_hours: int
    grade: float


@dataclass(frozen=True)
class StoreChange:
    action: str  # "added", "removed" or "cleared"
    courses: Tuple[Course, ...]


Listener = Callable[[StoreChange], None]


@dataclass
class CourseStore:
    """
    Ordered list of the session's courses.

    One store per user session; the UI keeps it in st.session_state.
    Subscribers are called after every mutation with a StoreChange.
    """
    _courses: List[Course] = field(default_factory=list)
    _listeners: List[Listener] = field(default_factory=list, repr=False, compare=False)

    @property
    def courses(self) -> Tuple[Course, ...]:
        return tuple(self._courses)

    def __len__(self) -> int:
        return len(self._courses)

    def __iter__(self):
        return iter(tuple(self._courses))

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, action: str) -> None:
        change = StoreChange(action=action, courses=self.courses)
        for listener in list(self._listeners):
            listener(change)

    def add(self, course: Course) -> None:
        self._courses.append(course)
        logger.debug("Added course %r (%d in store)", course.name, len(self._courses))
        self._notify("added")

    def remove_courses(self, name: str) -> int:
        """Remove every course called `name`. Returns how many were removed."""
        kept = [c for c in self._courses if c.name != name]
        removed = len(self._courses) - len(kept)
        if removed:
            self._courses = kept
            logger.debug("Removed %d course(s) named %r", removed, name)
            self._notify("removed")
        return removed

    def remove_at(self, index: int) -> Course:
        """Remove only the course at list position `index`."""
        course = self._courses.pop(index)
        logger.debug("Removed course %r at position %d", course.name, index)
        self._notify("removed")
        return course

    def clear(self) -> None:
        if self._courses:
            self._courses = []
            self._notify("cleared")


# ------------------------
# Core logic
# ------------------------
def grade_points(numeric_grade: float) -> float:
    """
    Grade points for a 0-100 grade, e.g. a 98 is an A+ worth 4.333.
    Anything that matches no bucket (below 60, NaN) is worth 0.0.
    """
    for lower, points, _ in GRADE_SCALE:
        if numeric_grade >= lower:
            return points
    return FAILING_POINTS


def grade_points_array(grades: Iterable[float]) -> np.ndarray:
    grades = np.asarray(list(grades), dtype=float)
    conditions = [grades >= lower for lower, _, _ in GRADE_SCALE]
    choices = [points for _, points, _ in GRADE_SCALE]
    return np.select(conditions, choices, default=FAILING_POINTS)


def letter_grade(numeric_grade: float) -> str:
    for lower, _, letter in GRADE_SCALE:
        if numeric_grade >= lower:
            return letter
    return FAILING_LETTER


def semester_totals(courses: Iterable[Course]) -> Tuple[float, int]:
    """
    returns: (semester credit points, semester credit hours)
    """
    courses = list(courses)
    if len(courses) == 0:
        return 0.0, 0

    hours = [c.credit_hours for c in courses]
    points = grade_points_array(c.grade for c in courses)
    # weights as floats, total as a python int
    return float(np.dot(points, np.asarray(hours, dtype=float))), sum(hours)


def calculate_final_gpa(prior_gpa: float,
                        prior_credit_hours: float,
                        courses: Iterable[Course]) -> float:
    """
    Cumulative GPA once this semester's courses are counted.

    Returns nan when there are no credit hours at all (nothing to average).
    """
    credit_points, credit_hours = semester_totals(courses)

    if credit_hours == 0:
        if prior_credit_hours == 0:
            logger.warning("No prior or semester credit hours, GPA is undefined")
            return np.nan
        # nothing new to weigh in
        return float(prior_gpa)

    total_hours = prior_credit_hours + float(credit_hours)
    if total_hours == 0:
        logger.warning("Prior and semester credit hours cancel out, GPA is undefined")
        return np.nan

    return (prior_gpa * prior_credit_hours + credit_points) / total_hours


# ------------------------
# Text input boundary
# ------------------------
class InputParseError(ValueError):
    field = ""
    message = ""

    def __init__(self, text: Optional[str]):
        self.text = text
        super().__init__(f"{self.message} (got {text!r})")


class GpaNotParsable(InputParseError):
    field = "gpa"
    message = GPA_NOT_PARSABLE_MESSAGE


class CreditsNotParsable(InputParseError):
    field = "credits"
    message = CREDITS_NOT_PARSABLE_MESSAGE


def _to_float(text: Optional[str]) -> float:
    return float((text or "").strip())


def _to_finite_float(text: Optional[str]) -> float:
    value = _to_float(text)
    if not np.isfinite(value):
        raise ValueError(f"{text!r} is not a finite number")
    return value


def parse_prior_gpa(text: Optional[str]) -> float:
    try:
        return _to_finite_float(text)
    except ValueError:
        raise GpaNotParsable(text) from None


def parse_prior_credit_hours(text: Optional[str]) -> float:
    try:
        return _to_finite_float(text)
    except ValueError:
        raise CreditsNotParsable(text) from None


def parse_course_credit_hours(text: Optional[str]) -> int:
    """Whole, non-negative credit hours; anything else falls back to 0."""
    try:
        hours = int((text or "").strip())
    except ValueError:
        logger.warning("Credit hours %r are not a whole number, using 0", text)
        return 0
    if hours > MAX_CREDIT_HOURS:
        logger.warning("Credit hours %r are out of range, using 0", text)
        return 0
    if hours < 0:
        logger.warning("Credit hours %r are negative, using 0", text)
        return 0
    return hours


def parse_course_grade(text: Optional[str]) -> float:
    try:
        return _to_float(text)
    except ValueError:
        logger.warning("Grade %r is not a number, using 0.0", text)
        return 0.0


def calculate(prior_gpa_text: Optional[str],
              prior_credit_hours_text: Optional[str],
              courses: Iterable[Course]) -> float:
    """
    Parse the two text fields and project the final GPA.

    Raises GpaNotParsable or CreditsNotParsable (GPA is checked first).
    """
    prior_gpa = parse_prior_gpa(prior_gpa_text)
    prior_credit_hours = parse_prior_credit_hours(prior_credit_hours_text)

    courses = list(courses)
    final_gpa = calculate_final_gpa(prior_gpa, prior_credit_hours, courses)
    logger.info(
        "Projected GPA %.3f from prior %.3f over %g credits and %d course(s)",
        final_gpa, prior_gpa, prior_credit_hours, len(courses),
    )
    return final_gpa


def add_course(store: CourseStore,
               name: str,
               credit_hours_text: Optional[str],
               grade_text: Optional[str]) -> Course:
    course = Course(
        name=(name or "").strip(),
        credit_hours=parse_course_credit_hours(credit_hours_text),
        grade=parse_course_grade(grade_text),
    )
    store.add(course)
    return course


def remove_courses(store: CourseStore, name: str) -> int:
    return store.remove_courses((name or "").strip())
