"""Tagged result type returned by the response parsers."""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from iterattend.utils.exceptions import InvalidCredentialsError, InvalidResponseError

T = TypeVar("T")


class ParseStatus(str, Enum):
    OK = "ok"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """
    Outcome of parsing one API response.

    Exactly one of three states:
        - OK: value holds the parsed result
        - INVALID_CREDENTIALS: the API rejected the credentials
        - INVALID_RESPONSE: the response could not be interpreted

    Failures carry a human-readable message and no value.
    """

    status: ParseStatus
    value: Optional[T] = None
    message: str = ""

    @classmethod
    def ok(cls, value: T) -> "ParseResult[T]":
        return cls(status=ParseStatus.OK, value=value)

    @classmethod
    def invalid_credentials(cls, message: str = "Invalid credentials") -> "ParseResult[T]":
        return cls(status=ParseStatus.INVALID_CREDENTIALS, message=message)

    @classmethod
    def invalid_response(cls, message: str = "Invalid response") -> "ParseResult[T]":
        return cls(status=ParseStatus.INVALID_RESPONSE, message=message)

    @property
    def is_ok(self) -> bool:
        return self.status is ParseStatus.OK

    def unwrap(self) -> T:
        """
        Return the parsed value.

        Raises:
            InvalidCredentialsError: If status is INVALID_CREDENTIALS
            InvalidResponseError: If status is INVALID_RESPONSE
        """
        if self.status is ParseStatus.INVALID_CREDENTIALS:
            raise InvalidCredentialsError(self.message)
        if self.status is ParseStatus.INVALID_RESPONSE:
            raise InvalidResponseError(self.message)
        return self.value
