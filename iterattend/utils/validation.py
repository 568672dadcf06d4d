"""Text normalization and validation utilities."""
import re
from typing import Any, Optional, Tuple

# "23 / 30" -> present=23, total=30
CLASS_COUNT_PATTERN = re.compile(r"^(\d+) / (\d+)$", re.ASCII)

_WORD_PATTERN = re.compile(r"\S+")


def capitalize_words(text: str) -> str:
    """
    Capitalize every whitespace-delimited word.

    Args:
        text: Text in any casing

    Returns:
        Text where each word starts upper-case and the rest is lower-case.
        Whitespace between words is preserved as-is.

    Example:
        "jOHN doe" -> "John Doe"
    """
    return _WORD_PATTERN.sub(lambda m: _title_char(m.group(0)[0]) + m.group(0)[1:].lower(), text)


def _title_char(char: str) -> str:
    # Title case per character; letters without a single-character
    # title form (e.g. "ß") are left as they are
    titled = char.title()
    return titled if len(titled) == 1 else char


def parse_class_count(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse an attendance string of the form "<present> / <total>".

    Args:
        text: Attendance string from the attendance grid

    Returns:
        Tuple of (present, total), or None if the string doesn't match
    """
    if not isinstance(text, str):
        return None

    match = CLASS_COUNT_PATTERN.match(text)
    if match is None:
        return None

    return int(match.group(1)), int(match.group(2))


def validate_threshold(value: Any) -> Tuple[bool, str]:
    """
    Validate an attendance threshold percentage.

    Args:
        value: Threshold to validate

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Threshold must be an integer") if not an int
        - (False, "Threshold must be between 1 and 99") if out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False, "Threshold must be an integer"

    if value < 1 or value > 99:
        return False, "Threshold must be between 1 and 99"

    return True, ""
