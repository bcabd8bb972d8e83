import logging
from typing import Iterable, List

import pandas as pd

from .backend_logic import (
    Course,
    CourseStore,
    add_course,
    grade_points_array,
    letter_grade,
)

logger = logging.getLogger(__name__)

# ------------------------
# CSV helpers (UI-side)
# ------------------------

def _normalise_cols(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df.columns = [" ".join(str(c).strip().lower().replace("_", " ").split()) for c in df.columns]
    # allow "credits" / "credit" / "hours" for the credit hours column
    for alias in ("credits", "credit", "hours", "credit hour"):
        if alias in df.columns and "credit hours" not in df.columns:
            df = df.rename(columns={alias: "credit hours"})
    if "course" in df.columns and "name" not in df.columns:
        df = df.rename(columns={"course": "name"})
    return df

def read_csv_upload(uploaded_file) -> pd.DataFrame:
    # keep every cell as text so the add-course parsing decides what's valid
    df = pd.read_csv(uploaded_file, dtype=str, keep_default_na=False)
    return _normalise_cols(df)

def validate_courses_csv(df: pd.DataFrame) -> pd.DataFrame:
    required = {"name", "credit hours", "grade"}
    missing = required - set(df.columns)
    if missing:
        raise ValueError(f"Missing columns: {sorted(missing)}. Expected: Name, Credit Hours, Grade.")
    return df[["name", "credit hours", "grade"]].copy()

def add_courses_from_frame(store: CourseStore, df: pd.DataFrame) -> List[Course]:
    """
    Add one course per row. Rows without a name are skipped; credit hours
    and grades fall back to 0 the same way the add-course form does.
    """
    added = []
    for _, row in df.iterrows():
        name = str(row.get("name", "")).strip()
        if not name:
            continue
        added.append(
            add_course(store, name, str(row.get("credit hours", "")), str(row.get("grade", "")))
        )
    logger.info("Imported %d course(s) from CSV", len(added))
    return added

def courses_to_frame(courses: Iterable[Course]) -> pd.DataFrame:
    courses = list(courses)
    return pd.DataFrame(
        {
            "Course": [c.name for c in courses],
            "Credit Hours": [c.credit_hours for c in courses],
            "Grade": pd.Series([c.grade for c in courses], dtype="float64"),
            "Letter": [letter_grade(c.grade) for c in courses],
            "Grade Points": grade_points_array(c.grade for c in courses),
        },
        columns=["Course", "Credit Hours", "Grade", "Letter", "Grade Points"],
    )
