from typing import List, Tuple

# ------------------------
# Grade scale
# ------------------------
# (inclusive lower bound, grade points, letter), highest bucket first.
# Anything below the last bound is an F worth 0.0.
GRADE_SCALE: List[Tuple[float, float, str]] = [
    (97.0, 4.333, "A+"),
    (93.0, 4.0, "A"),
    (90.0, 3.667, "A-"),
    (87.0, 3.333, "B+"),
    (83.0, 3.0, "B"),
    (80.0, 2.67, "B-"),
    (77.0, 2.333, "C+"),
    (73.0, 2.0, "C"),
    (70.0, 1.667, "C-"),
    (67.0, 1.333, "D+"),
    (63.0, 1.0, "D"),
    (60.0, 0.667, "D-"),
]
FAILING_POINTS = 0.0
FAILING_LETTER = "F"

# ------------------------
# Add-course form
# ------------------------
DEFAULT_CREDIT_HOURS = 3
GRADE_MIN = 0
GRADE_MAX = 100

# ------------------------
# Display
# ------------------------
GRADE_DECIMALS = 2
GPA_DECIMALS = 3

GPA_NOT_PARSABLE_MESSAGE = (
    "Please enter your current GPA as a decimal. If you don't have one then enter 0.0."
)
CREDITS_NOT_PARSABLE_MESSAGE = (
    "Please enter your credits taken as a number. If you haven't taken any then enter 0."
)
NO_CREDIT_HOURS_MESSAGE = (
    "There are no credit hours to average over. Enter your credits taken or add a course."
)
RESULT_CAPTION = (
    "This will be your grade at the end of the semester given the provided "
    "semester classes and grades."
)
