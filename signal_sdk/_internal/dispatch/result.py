"""Tagged outcome of a single dispatched request."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from signal_sdk.exceptions import SignalError


class Outcome(str, Enum):
    VALUE = "value"
    EMPTY = "empty"
    TRANSPORT_ERROR = "transport_error"
    SERVICE_ERROR = "service_error"
    SHAPE_ERROR = "shape_error"


@dataclass(frozen=True)
class DispatchResult:
    """Result of executing one endpoint.

    Exactly one of the following holds:
        - outcome is VALUE and ``value`` carries the decoded body (raw text or
          a validated model / list)
        - outcome is EMPTY and there is no value
        - outcome is one of the *_ERROR kinds and ``error`` carries the
          classified exception

    Attributes:
        endpoint: Name of the executed endpoint.
        outcome: Classification of the exchange.
        value: Decoded value for VALUE outcomes.
        error: Classified exception for failure outcomes.
        status_code: HTTP status, or None if no response was received.
    """

    endpoint: str
    outcome: Outcome
    value: Any = None
    error: SignalError | None = None
    status_code: int | None = None

    def __post_init__(self) -> None:
        if self.ok == (self.error is not None):
            raise ValueError("DispatchResult must carry an error exactly when it failed")

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.VALUE, Outcome.EMPTY)

    def unwrap(self) -> Any:
        """Return the value, or raise the classified error."""
        if self.error is not None:
            raise self.error
        return self.value
