"""Public exceptions for the Signal SDK."""


class SignalError(Exception):
    """Base exception for all Signal SDK errors."""


class SignalTransportError(SignalError):
    """The request could not complete (connection refused, DNS failure, ...)."""


class SignalTimeoutError(SignalTransportError):
    """The request did not complete within the configured timeout."""


class SignalAPIError(SignalError):
    """Non-success status returned by the Signal REST API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SignalResponseError(SignalError):
    """Success status whose body does not match the expected response shape."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SignalConfigError(SignalError):
    """Configuration error (missing env vars, invalid config)."""


class SignalValidationError(SignalError):
    """Invalid call arguments (path parameters, query parameters, body)."""


class SignalClientClosedError(SignalError):
    """Operation invoked on a client that has already been closed."""
