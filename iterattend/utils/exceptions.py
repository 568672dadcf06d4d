"""Custom exception classes."""


class InvalidCredentialsError(Exception):
    """Raised when the API response signals rejected credentials."""
    pass


class InvalidResponseError(Exception):
    """Raised when an API response is malformed or cannot be interpreted."""
    pass
