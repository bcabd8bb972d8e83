import logging

import numpy as np
import streamlit as st

from gpa_projector.backend_logic import (
    CourseStore,
    InputParseError,
    StoreChange,
    add_course,
    calculate,
    semester_totals,
)
from gpa_projector.config import (
    DEFAULT_CREDIT_HOURS,
    GPA_DECIMALS,
    GRADE_DECIMALS,
    GRADE_MAX,
    GRADE_MIN,
    NO_CREDIT_HOURS_MESSAGE,
    RESULT_CAPTION,
)
from gpa_projector.io_csv import (
    add_courses_from_frame,
    courses_to_frame,
    read_csv_upload,
    validate_courses_csv,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ------------------------
# Session state
# ------------------------

def _discard_stale_result(change: StoreChange) -> None:
    # the projected GPA is only valid for the course list it was computed on
    st.session_state.pop("final_gpa", None)


def get_store() -> CourseStore:
    if "course_store" not in st.session_state:
        store = CourseStore()
        store.subscribe(_discard_stale_result)
        st.session_state["course_store"] = store
    return st.session_state["course_store"]


def _delete_course(index: int) -> None:
    get_store().remove_at(index)

# ------------------------
# Streamlit UI
# ------------------------

st.set_page_config(
    page_title="Semester GPA Calculator",
    page_icon="🎓",
    layout="centered",
)

store = get_store()

st.title("🎓 Semester GPA Calculator")
st.write(
    "Enter your current GPA and credits taken, add this semester's classes with "
    "their grades (0-100), and see what your GPA will be once the semester ends."
)

col_gpa, col_credits = st.columns(2)
with col_gpa:
    prior_gpa_text = st.text_input("Current GPA:", placeholder="0.0", key="prior_gpa")
with col_credits:
    prior_credits_text = st.text_input("Credits Taken:", placeholder="0", key="prior_credits")

# ------------------------
# Semester classes
# ------------------------

st.subheader("Semester Classes")

if len(store) == 0:
    st.info("Use **Add A Course** below to add a course.")
else:
    for idx, course in enumerate(store):
        c_name, c_grade, c_delete = st.columns([6, 2, 1])
        with c_name:
            st.markdown(f"**{course.name}**")
            hours_label = "Credit Hour" if course.credit_hours == 1 else "Credit Hours"
            st.caption(f"{course.credit_hours} {hours_label}")
        with c_grade:
            st.markdown(f"### {course.grade:.{GRADE_DECIMALS}f}")
        with c_delete:
            st.button("🗑", key=f"delete_{idx}", on_click=_delete_course, args=(idx,), help="Delete course")

    with st.expander("Grade points breakdown"):
        st.dataframe(courses_to_frame(store), hide_index=True)
        credit_points, credit_hours = semester_totals(store)
        st.caption(f"Semester credit points: {credit_points:g} over {credit_hours} credit hours")

with st.form("add_course_form", clear_on_submit=True):
    st.markdown("**Add A Course**")
    name = st.text_input("Name:", placeholder="Course Name", key="new_course_name")
    c_hours, c_grade = st.columns(2)
    with c_hours:
        credit_hours_text = st.text_input(
            "Credit Hours:", value=str(DEFAULT_CREDIT_HOURS), key="new_course_credit_hours"
        )
    with c_grade:
        grade_text = st.text_input("Grade:", placeholder="0.0", key="new_course_grade")
    st.caption(f"Enter your grade {GRADE_MIN}-{GRADE_MAX}.")
    add_submitted = st.form_submit_button("Add Course")

if add_submitted:
    add_course(store, name, credit_hours_text, grade_text)
    st.rerun()

with st.expander("Import courses from CSV"):
    courses_csv = st.file_uploader(
        "Upload this semester's courses CSV (Name, Credit Hours, Grade)",
        type=["csv"],
        key="courses_csv",
    )
    if courses_csv is not None and st.button("Import courses", key="import_courses"):
        try:
            frame = validate_courses_csv(read_csv_upload(courses_csv))
        except ValueError as e:
            st.error(f"Courses CSV error: {e}")
        else:
            add_courses_from_frame(store, frame)
            st.rerun()

# ------------------------
# Calculate
# ------------------------

if st.button("Calculate", type="primary", key="calculate"):
    try:
        st.session_state["final_gpa"] = calculate(prior_gpa_text, prior_credits_text, store)
    except InputParseError as e:
        st.session_state.pop("final_gpa", None)
        logger.info("Calculation blocked, %s field not parsable", e.field)
        st.error(e.message)

if "final_gpa" in st.session_state:
    final_gpa = st.session_state["final_gpa"]
    st.markdown("---")
    if np.isnan(final_gpa):
        st.warning(NO_CREDIT_HOURS_MESSAGE)
    else:
        st.metric("Calculated GPA", f"{final_gpa:.{GPA_DECIMALS}f}")
        st.caption(RESULT_CAPTION)
