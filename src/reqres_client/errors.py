"""Error taxonomy for fetches against the ReqRes API.

Transport, decode and unexpected failures are all handled the same way at the
lookup boundary: logged, then degraded to an absent, empty or partial result.
"""


class FetchError(Exception):
    """Base error for fetch failures.

    Attributes:
        message: Human-readable error description.
        cause: Optional underlying exception that caused this error.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class TransportError(FetchError):
    """Connection failure or non-2xx response.

    ``status_code`` is None when no response was received.
    """

    def __init__(self, message: str, status_code: int | None = None, cause: Exception | None = None) -> None:
        super().__init__(message, cause)
        self.status_code = status_code


class DecodeError(FetchError):
    """Response body was not valid JSON or did not match the expected envelope."""


class UnexpectedError(FetchError):
    """Any other failure while fetching."""


class ConfigurationError(Exception):
    """Raised when a configuration value cannot be used."""
