"""Runtime configuration loaded from the environment and an optional .env file."""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Dict, Iterable

from iterattend.utils.validation import validate_threshold

logger = logging.getLogger(__name__)

ENV_KEYS = {"ITER_LOG_LEVEL", "ITER_ATTENDANCE_THRESHOLD"}

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_ATTENDANCE_THRESHOLD = 75

_ENV_LOADED = False
_ENV_LOCK = Lock()


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    log_level: str = DEFAULT_LOG_LEVEL
    attendance_threshold: int = DEFAULT_ATTENDANCE_THRESHOLD


def parse_env_lines(lines: Iterable[str]) -> Dict[str, str]:
    """
    Parse KEY=VALUE lines in .env format.

    Args:
        lines: Lines of a .env file

    Returns:
        Mapping of key to value. Blank lines, comments and lines without
        "=" are skipped; surrounding quotes are removed from values and the
        last assignment of a key wins.
    """
    values = {}
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, _, value = line.partition("=")
        values[key.strip()] = value.strip().strip('"\'')
    return values


def _load_env(env_path: Path = Path(".env")) -> None:
    """Copy configuration keys from a .env file into the environment once."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        if env_path.exists():
            file_values = parse_env_lines(env_path.read_text(encoding="utf-8").splitlines())
            for key in file_values.keys() & ENV_KEYS:
                os.environ.setdefault(key, file_values[key])

        _ENV_LOADED = True


def _reset_env_loaded() -> None:
    """Allow the .env file to be read again (used by tests)."""
    global _ENV_LOADED
    _ENV_LOADED = False


def _resolve_log_level() -> str:
    raw = os.getenv("ITER_LOG_LEVEL")
    if raw is None or not raw.strip():
        return DEFAULT_LOG_LEVEL

    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown ITER_LOG_LEVEL %r, using %s", raw, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def _resolve_attendance_threshold() -> int:
    raw = os.getenv("ITER_ATTENDANCE_THRESHOLD")
    if raw is None or not raw.strip():
        return DEFAULT_ATTENDANCE_THRESHOLD

    try:
        threshold = int(raw.strip())
    except ValueError:
        logger.warning(
            "ITER_ATTENDANCE_THRESHOLD %r is not an integer, using %d",
            raw, DEFAULT_ATTENDANCE_THRESHOLD
        )
        return DEFAULT_ATTENDANCE_THRESHOLD

    is_valid, error_msg = validate_threshold(threshold)
    if not is_valid:
        logger.warning("%s, using %d", error_msg, DEFAULT_ATTENDANCE_THRESHOLD)
        return DEFAULT_ATTENDANCE_THRESHOLD
    return threshold


def get_settings() -> Settings:
    """
    Build settings from the environment.

    Returns:
        Settings with values from ITER_LOG_LEVEL and ITER_ATTENDANCE_THRESHOLD

    Behavior:
        - Loads .env from the working directory once per process
        - Existing environment variables take precedence over .env
        - Invalid values fall back to defaults with a warning
    """
    _load_env()
    return Settings(
        log_level=_resolve_log_level(),
        attendance_threshold=_resolve_attendance_threshold(),
    )
