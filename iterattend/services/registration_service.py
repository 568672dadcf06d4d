"""Registration service for selecting the current academic year's registration ID."""
import logging
from typing import List

from iterattend.models.parse_result import ParseResult
from iterattend.models.registration_year import RegistrationYear
from iterattend.utils.exceptions import InvalidResponseError
from iterattend.utils.json_access import get_object, get_string, load_object

logger = logging.getLogger(__name__)

STUDENT_DATA_FIELD = "studentdata"
REGISTRATION_ID_FIELD = "REGISTRATIONID"
REGISTRATION_DATE_FIELD = "REGISTRATIONDATEFROM"


def _parse_years(entries: List) -> List[RegistrationYear]:
    years = []
    for entry in entries:
        entry = get_object(entry)
        years.append(RegistrationYear(
            registration_id=get_string(entry, REGISTRATION_ID_FIELD),
            registered_from=get_string(entry, REGISTRATION_DATE_FIELD)
        ))
    return years


def parse_registration_id(registration_json: str) -> ParseResult[str]:
    """
    Select the registration ID of the most recent academic year.

    Args:
        registration_json: Raw JSON text of the registration document

    Returns:
        ParseResult[str]:
        - OK with the registration ID on success
        - INVALID_CREDENTIALS if "studentdata" is absent
        - INVALID_RESPONSE if the JSON is malformed, the array is empty,
          or an entry lacks a registration ID or start date

    Behavior:
        - "Most recent" means the lexicographically greatest start date
          string. This is only chronological for zero-padded sortable
          formats such as YYYY-MM-DD.
        - Ties go to the last tied entry in input order
    """
    try:
        document = load_object(registration_json)

        if STUDENT_DATA_FIELD not in document:
            logger.debug("Registration response has no %s", STUDENT_DATA_FIELD)
            return ParseResult.invalid_credentials(
                f"No {STUDENT_DATA_FIELD} for these credentials"
            )

        entries = document[STUDENT_DATA_FIELD]
        if not isinstance(entries, list):
            raise InvalidResponseError(f"Field {STUDENT_DATA_FIELD} must be an array")
        if len(entries) == 0:
            raise InvalidResponseError(f"Field {STUDENT_DATA_FIELD} is empty")

        years = _parse_years(entries)
    except InvalidResponseError as e:
        logger.debug("Rejected registration response: %s", e)
        return ParseResult.invalid_response(str(e))

    # Stable sort keeps input order among equal dates, so the last entry wins ties
    years.sort(key=lambda y: y.registered_from)
    return ParseResult.ok(years[-1].registration_id)


def select_registration_id(registration_json: str) -> str:
    """
    Raising form of parse_registration_id().

    Raises:
        InvalidCredentialsError: If "studentdata" is absent
        InvalidResponseError: If the document is malformed
    """
    return parse_registration_id(registration_json).unwrap()
