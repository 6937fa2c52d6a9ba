"""Request dispatch for the Signal SDK.

The endpoint catalog describes every operation as data; the engine turns one
descriptor plus call arguments into one HTTP exchange and a DispatchResult.
"""

from signal_sdk._internal.dispatch.endpoints import ENDPOINTS
from signal_sdk._internal.dispatch.engine import DispatchEngine
from signal_sdk._internal.dispatch.models import Endpoint, ErrorEnvelope, ResponseShape
from signal_sdk._internal.dispatch.result import DispatchResult, Outcome

__all__ = [
    "ENDPOINTS",
    "DispatchEngine",
    "DispatchResult",
    "Endpoint",
    "ErrorEnvelope",
    "Outcome",
    "ResponseShape",
]
