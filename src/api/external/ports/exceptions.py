"""Exceptions for the External bounded context."""


class ExternalFetchError(Exception):
    """Raised when the external user API cannot be read.

    Covers transport failures, timeouts, non-2xx responses and bodies that
    do not parse into the expected schema. There is no retry and no
    partial result; the error propagates to the caller.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
