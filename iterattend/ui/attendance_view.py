"""Attendance viewer UI for parsed API responses."""
import logging
from datetime import datetime
from typing import Optional

import streamlit as st

from iterattend.models.parse_result import ParseResult, ParseStatus
from iterattend.models.student import Student
from iterattend.models.subject import Subject
from iterattend.services.login_service import parse_login
from iterattend.services.registration_service import parse_registration_id
from iterattend.services.student_service import parse_student
from iterattend.ui.html_utils import escape, html_block

logger = logging.getLogger(__name__)

STUDENT_KEY = "attendance_student"
REGISTRATION_ID_KEY = "attendance_registration_id"

STATUS_COLORS = {
    "safe": "#22d3ee",
    "warning": "#fbbf24",
    "danger": "#f87171",
    "empty": "#94a3b8",
}

FAILURE_MESSAGES = {
    ParseStatus.INVALID_CREDENTIALS: "Invalid username or password",
    ParseStatus.INVALID_RESPONSE: "The server returned an unexpected response",
}


def _ensure_view_state() -> None:
    """Ensure viewer state keys exist."""
    if STUDENT_KEY not in st.session_state:
        st.session_state[STUDENT_KEY] = None
    if REGISTRATION_ID_KEY not in st.session_state:
        st.session_state[REGISTRATION_ID_KEY] = None


def _attendance_status(subject: Subject, threshold: int) -> str:
    """Classify a subject as safe, warning, danger or empty."""
    if subject.total() == 0:
        return "empty"

    percentage = subject.overall_percentage()
    if percentage >= threshold + 5:
        return "safe"
    if percentage >= threshold:
        return "warning"
    return "danger"


def _advice_text(subject: Subject, threshold: int) -> str:
    if subject.total() == 0:
        return "No classes recorded yet"

    needed = subject.classes_needed(threshold)
    if needed > 0:
        return f"Attend the next {needed} class{'es' if needed != 1 else ''} to reach {threshold}%"

    can_skip = subject.classes_can_skip(threshold)
    if can_skip == 0:
        return f"Don't miss the next class to stay at {threshold}%"
    return f"You can miss {can_skip} class{'es' if can_skip != 1 else ''} and stay at {threshold}%"


def _format_last_updated(last_updated: int) -> str:
    return datetime.fromtimestamp(last_updated / 1000).strftime("%Y-%m-%d %H:%M")


def _subject_card_html(subject: Subject, threshold: int) -> str:
    """Build the HTML card for one subject."""
    status = _attendance_status(subject, threshold)
    color = STATUS_COLORS[status]
    percentage = subject.overall_percentage()

    return html_block(
        f"""
        <div class="subject-card" style="border-left: 4px solid {color};">
            <div class="subject-card__header">
                <h4 class="subject-card__name">{escape(subject.name)}</h4>
                <span class="subject-card__code">{escape(subject.code)}</span>
            </div>
            <div class="subject-card__percentage" style="color: {color};">{percentage:.1f}%</div>
            <div class="subject-card__counts">
                <span>Theory {subject.theory_present}/{subject.theory_total}</span>
                <span>Lab {subject.lab_present}/{subject.lab_total}</span>
            </div>
            <div class="subject-card__progress-track">
                <div class="subject-card__progress-fill" style="width: {percentage:.1f}%; background: {color};"></div>
            </div>
            <div class="subject-card__advice">{escape(_advice_text(subject, threshold))}</div>
            <div class="subject-card__updated">Updated {_format_last_updated(subject.last_updated)}</div>
        </div>
        """
    )


def _student_header_html(student: Student, registration_id: Optional[str]) -> str:
    """Build the heading showing the student's name and registration ID."""
    registration_line = ""
    if registration_id:
        registration_line = f'<div class="student-heading__meta">Registration {escape(registration_id)}</div>'

    return html_block(
        f"""
        <div class="student-heading">
            <h2 class="student-heading__name">{escape(student.name)}</h2>
            {registration_line}
        </div>
        """
    )


def _inject_view_styles() -> None:
    """Inject viewer-specific CSS."""
    st.markdown("""
        <style>
        .subject-card {
            background: #16213e;
            border-radius: 12px;
            padding: 16px 20px;
            margin-bottom: 16px;
            color: #f1f5f9;
        }
        .subject-card__header {
            display: flex;
            justify-content: space-between;
            align-items: baseline;
        }
        .subject-card__name { margin: 0; font-size: 1.05rem; }
        .subject-card__code { color: #94a3b8; font-size: 0.85rem; }
        .subject-card__percentage { font-size: 1.8rem; font-weight: 700; }
        .subject-card__counts { display: flex; gap: 16px; color: #cbd5e1; }
        .subject-card__progress-track {
            background: #2d3748;
            border-radius: 4px;
            height: 6px;
            margin: 8px 0;
        }
        .subject-card__progress-fill { height: 6px; border-radius: 4px; }
        .subject-card__advice { font-size: 0.9rem; }
        .subject-card__updated { color: #64748b; font-size: 0.75rem; margin-top: 4px; }
        .student-heading__name { margin-bottom: 0; }
        .student-heading__meta { color: #94a3b8; }
        </style>
    """, unsafe_allow_html=True)


def _refresh_student(
    previous: Optional[Student],
    login_json: str,
    attendance_json: str
) -> ParseResult[Student]:
    """Parse the responses, merging over the previous student's subjects if it is the same student."""
    existing_subjects = None
    if previous is not None:
        login_result = parse_login(login_json)
        if login_result.is_ok and login_result.value.name == previous.name:
            existing_subjects = previous.subjects

    return parse_student(login_json, attendance_json, existing_subjects)


def _handle_parse(registration_json: str, login_json: str, attendance_json: str) -> None:
    """Run the parsers and store the outcome in session state."""
    if registration_json.strip():
        registration_result = parse_registration_id(registration_json)
        if not registration_result.is_ok:
            st.error(f"❌ {FAILURE_MESSAGES[registration_result.status]}")
            with st.expander("Details"):
                st.code(registration_result.message)
            return
        st.session_state[REGISTRATION_ID_KEY] = registration_result.value

    result = _refresh_student(st.session_state.get(STUDENT_KEY), login_json, attendance_json)
    if not result.is_ok:
        st.error(f"❌ {FAILURE_MESSAGES[result.status]}")
        with st.expander("Details"):
            st.code(result.message)
        return

    student = result.value
    st.session_state[STUDENT_KEY] = student
    logger.info("Parsed %s with %d subjects", student.name, len(student.subjects))
    if not student.subjects:
        st.warning("Attendance is not available right now.")
    else:
        st.success(f"Loaded attendance for {len(student.subjects)} subjects")


def _render_input_form() -> None:
    with st.form("attendance_input_form"):
        registration_json = st.text_area(
            "Registration response (optional)",
            height=120,
            placeholder='{"studentdata": [{"REGISTRATIONID": "...", "REGISTRATIONDATEFROM": "2024-07-01"}]}'
        )
        login_json = st.text_area(
            "Login response",
            height=120,
            placeholder='{"status": "success", "name": "..."}'
        )
        attendance_json = st.text_area(
            "Attendance response",
            height=200,
            placeholder='{"griddata": [{"subject": "...", "subjectcode": "...", "Latt": "23 / 30", "Patt": "4 / 4"}]}'
        )
        submitted = st.form_submit_button("Parse", type="primary", use_container_width=True)

    if submitted:
        if not login_json.strip():
            st.error("❌ Paste the login response first")
            return
        _handle_parse(registration_json, login_json, attendance_json)


def _render_student(student: Student, threshold: int) -> None:
    st.markdown(
        _student_header_html(student, st.session_state.get(REGISTRATION_ID_KEY)),
        unsafe_allow_html=True
    )

    if not student.subjects:
        st.info("No attendance data yet.")
        return

    columns = st.columns(2, gap="medium")
    for index, code in enumerate(student.get_subject_codes()):
        with columns[index % 2]:
            st.markdown(
                _subject_card_html(student.subjects[code], threshold),
                unsafe_allow_html=True
            )

    if st.button("Clear", key="attendance_clear"):
        st.session_state[STUDENT_KEY] = None
        st.session_state[REGISTRATION_ID_KEY] = None
        st.rerun()


def render_attendance_view(threshold: int) -> None:
    """Render the attendance viewer page."""
    _ensure_view_state()
    _inject_view_styles()

    st.markdown("## Attendance")
    _render_input_form()

    student = st.session_state.get(STUDENT_KEY)
    if student is not None:
        _render_student(student, threshold)
