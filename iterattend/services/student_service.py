"""Student assembly from login and attendance responses."""
import logging
from typing import Mapping, Optional

from iterattend.models.parse_result import ParseResult, ParseStatus
from iterattend.models.student import Student
from iterattend.models.subject import Subject
from iterattend.services.attendance_service import parse_attendance
from iterattend.services.login_service import parse_login

logger = logging.getLogger(__name__)


def parse_student(
    login_json: str,
    attendance_json: str,
    existing_subjects: Optional[Mapping[str, Subject]] = None
) -> ParseResult[Student]:
    """
    Build a student from the login response and merge in attendance.

    Args:
        login_json: Raw JSON text of the login document
        attendance_json: Raw JSON text of the attendance document
        existing_subjects: Subjects from an earlier refresh to merge over.
                           Copied, never modified.

    Returns:
        ParseResult[Student]:
        - The login failure unchanged (INVALID_CREDENTIALS or
          INVALID_RESPONSE) if the login document is rejected
        - OK otherwise, even when the attendance document is rejected

    Behavior:
        - A rejected attendance document is logged and ignored; the student
          keeps existing_subjects (or none)
        - Parsed subjects overwrite existing ones with the same code
    """
    login_result = parse_login(login_json)
    if not login_result.is_ok:
        return login_result

    student = login_result.value
    if existing_subjects:
        student = student.merge_subjects(existing_subjects)

    attendance_result = parse_attendance(attendance_json)
    if attendance_result.status is ParseStatus.OK:
        student = student.merge_subjects(attendance_result.value)
    elif attendance_result.status is ParseStatus.INVALID_RESPONSE:
        logger.warning(
            "Ignoring unusable attendance response for %s: %s",
            student.name, attendance_result.message
        )

    return ParseResult.ok(student)


def build_student(
    login_json: str,
    attendance_json: str,
    existing_subjects: Optional[Mapping[str, Subject]] = None
) -> Student:
    """
    Raising form of parse_student().

    Raises:
        InvalidCredentialsError: If the login was rejected
        InvalidResponseError: If the login response is malformed
    """
    return parse_student(login_json, attendance_json, existing_subjects).unwrap()
