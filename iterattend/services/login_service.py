"""Login response parsing."""
import logging

from iterattend.models.parse_result import ParseResult
from iterattend.models.student import Student
from iterattend.utils.exceptions import InvalidResponseError
from iterattend.utils.json_access import get_string, load_object, require_fields
from iterattend.utils.validation import capitalize_words

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "success"


def parse_login(login_json: str) -> ParseResult[Student]:
    """
    Validate a login response and build the student it describes.

    Args:
        login_json: Raw JSON text of the login document

    Returns:
        ParseResult[Student]:
        - OK with a Student (capitalized name, no subjects)
        - INVALID_CREDENTIALS if status is not "success"
        - INVALID_RESPONSE if the JSON is malformed or lacks
          "status" or "name", or the name is blank
    """
    try:
        login = load_object(login_json)
        require_fields(login, ["status", "name"])

        status = login["status"]
        if status != SUCCESS_STATUS:
            logger.debug("Login rejected with status %r", status)
            return ParseResult.invalid_credentials("Invalid username or password")

        name = capitalize_words(get_string(login, "name"))
        student = Student(name=name)
    except InvalidResponseError as e:
        logger.debug("Rejected login response: %s", e)
        return ParseResult.invalid_response(str(e))
    except ValueError as e:
        logger.debug("Login response describes an invalid student: %s", e)
        return ParseResult.invalid_response(str(e))

    return ParseResult.ok(student)
