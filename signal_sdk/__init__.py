"""Signal SDK for Python.

Typed client for the signal-cli REST API messaging gateway.

Public API:
    SignalClient - User-facing client, one method per REST endpoint
    signal_sdk.models - Request and response models
    signal_sdk.exceptions - Error hierarchy

Internal (not a stable API):
    _internal.dispatch - Endpoint catalog and dispatch engine
"""

from signal_sdk._internal.dispatch import ENDPOINTS, DispatchResult, Outcome
from signal_sdk._version import __version__
from signal_sdk.client import SignalClient
from signal_sdk.exceptions import (
    SignalAPIError,
    SignalClientClosedError,
    SignalConfigError,
    SignalError,
    SignalResponseError,
    SignalTimeoutError,
    SignalTransportError,
    SignalValidationError,
)

__all__ = [
    "__version__",
    "SignalClient",
    "DispatchResult",
    "Outcome",
    "ENDPOINTS",
    "SignalError",
    "SignalAPIError",
    "SignalClientClosedError",
    "SignalConfigError",
    "SignalResponseError",
    "SignalTimeoutError",
    "SignalTransportError",
    "SignalValidationError",
]
