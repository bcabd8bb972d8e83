"""
Semester GPA projector.

Projects a cumulative GPA from a prior GPA, prior credit hours and this
semester's courses. `backend_logic` holds the computation, `io_csv` the
table/CSV helpers used by the Streamlit page in app.py.
"""

__version__ = "1.0.0"

from .backend_logic import (
    Course,
    CourseStore,
    StoreChange,
    InputParseError,
    GpaNotParsable,
    CreditsNotParsable,
    grade_points,
    grade_points_array,
    letter_grade,
    semester_totals,
    calculate_final_gpa,
    calculate,
    add_course,
    remove_courses,
)

__all__ = [
    "__version__",
    "Course",
    "CourseStore",
    "StoreChange",
    "InputParseError",
    "GpaNotParsable",
    "CreditsNotParsable",
    "grade_points",
    "grade_points_array",
    "letter_grade",
    "semester_totals",
    "calculate_final_gpa",
    "calculate",
    "add_course",
    "remove_courses",
]
