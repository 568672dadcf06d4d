"""Helpers for reading untrusted JSON API responses."""
import json
from typing import Any, Dict, Iterable, List

from iterattend.utils.exceptions import InvalidResponseError


def load_object(text: str) -> Dict[str, Any]:
    """
    Parse JSON text whose top level must be an object.

    Args:
        text: Raw JSON text

    Returns:
        dict: Parsed top-level object

    Raises:
        InvalidResponseError: If text is not valid JSON or not an object
    """
    if not isinstance(text, (str, bytes, bytearray)):
        raise InvalidResponseError("Response must be JSON text")

    try:
        document = json.loads(text)
    except ValueError as e:
        raise InvalidResponseError(f"Malformed JSON: {e}") from e
    except RecursionError as e:
        raise InvalidResponseError("Malformed JSON: nesting too deep") from e

    return get_object(document)


def get_object(value: Any) -> Dict[str, Any]:
    """Return value if it is a JSON object, else raise InvalidResponseError."""
    if not isinstance(value, dict):
        raise InvalidResponseError(f"Expected JSON object, got {type(value).__name__}")
    return value


def get_array(obj: Dict[str, Any], key: str) -> List[Any]:
    """
    Get an array-valued field.

    Raises:
        InvalidResponseError: If the field is missing or not an array
    """
    if key not in obj:
        raise InvalidResponseError(f"Missing required field: {key}")

    value = obj[key]
    if not isinstance(value, list):
        raise InvalidResponseError(f"Field {key} must be an array")
    return value


def require_fields(obj: Dict[str, Any], fields: Iterable[str]) -> None:
    """Raise InvalidResponseError naming the first missing field."""
    for field in fields:
        if field not in obj:
            raise InvalidResponseError(f"Missing required field: {field}")


def get_string(obj: Dict[str, Any], key: str) -> str:
    """
    Get a field as a string.

    Strings are returned unchanged and integers are rendered in decimal.
    Anything else (null, booleans, floats, objects, arrays) is rejected.

    Raises:
        InvalidResponseError: If the field is missing or not string-like
    """
    require_fields(obj, [key])
    value = obj[key]

    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)

    raise InvalidResponseError(f"Field {key} must be a string")
