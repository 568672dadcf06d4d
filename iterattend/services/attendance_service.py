"""Attendance grid parsing."""
import logging
import time
from typing import Any, Dict

from iterattend.models.parse_result import ParseResult
from iterattend.models.subject import Subject
from iterattend.utils.exceptions import InvalidResponseError
from iterattend.utils.json_access import get_array, get_object, get_string, load_object, require_fields
from iterattend.utils.validation import parse_class_count

logger = logging.getLogger(__name__)

GRID_FIELD = "griddata"
THEORY_FIELD = "Latt"
LAB_FIELD = "Patt"
NAME_FIELD = "subject"
CODE_FIELD = "subjectcode"
REQUIRED_ROW_FIELDS = [THEORY_FIELD, LAB_FIELD, NAME_FIELD, CODE_FIELD]


def _now_millis() -> int:
    return int(time.time() * 1000)


def _parse_row(row: Dict[str, Any], parsed_at: int) -> Subject:
    """Build a subject from one grid row; malformed counts stay at zero."""
    require_fields(row, REQUIRED_ROW_FIELDS)

    subject = Subject.blank(
        name=get_string(row, NAME_FIELD),
        code=get_string(row, CODE_FIELD),
        last_updated=parsed_at
    )

    theory = parse_class_count(row[THEORY_FIELD])
    if theory is not None:
        subject.theory_present, subject.theory_total = theory
    else:
        logger.debug("Unrecognized theory attendance %r for %s", row[THEORY_FIELD], subject.code)

    lab = parse_class_count(row[LAB_FIELD])
    if lab is not None:
        subject.lab_present, subject.lab_total = lab
    else:
        logger.debug("Unrecognized lab attendance %r for %s", row[LAB_FIELD], subject.code)

    return subject


def parse_attendance(attendance_json: str) -> ParseResult[Dict[str, Subject]]:
    """
    Parse the attendance grid into subjects keyed by subject code.

    Args:
        attendance_json: Raw JSON text of the attendance document

    Returns:
        ParseResult[Dict[str, Subject]]:
        - OK with the subjects mapping
        - INVALID_RESPONSE if the JSON is malformed, "griddata" is missing
          or not an array, or any row lacks Latt, Patt, subject or
          subjectcode. No partial mapping is returned.

    Behavior:
        - Attendance strings must look like "23 / 30"; anything else leaves
          that row's theory or lab counters at zero without rejecting it
        - Every subject is stamped with the current time in epoch ms
        - Rows sharing a subject code: the later row wins
    """
    subjects: Dict[str, Subject] = {}
    parsed_at = _now_millis()

    try:
        grid = get_array(load_object(attendance_json), GRID_FIELD)
        for row in grid:
            subject = _parse_row(get_object(row), parsed_at)
            subjects[subject.code] = subject
    except InvalidResponseError as e:
        logger.debug("Rejected attendance response: %s", e)
        return ParseResult.invalid_response(str(e))

    return ParseResult.ok(subjects)
