"""Dispatch engine: one endpoint descriptor in, one classified result out."""

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from signal_sdk._internal.dispatch.models import (
    NO_CONTENT_PLACEHOLDER,
    PLACEHOLDER_PATTERN,
    SUCCESS_STATUS_CODES,
    Endpoint,
    ErrorEnvelope,
    ResponseShape,
)
from signal_sdk._internal.dispatch.redaction import redact_payload
from signal_sdk._internal.dispatch.result import DispatchResult, Outcome
from signal_sdk.exceptions import (
    SignalAPIError,
    SignalResponseError,
    SignalTimeoutError,
    SignalTransportError,
    SignalValidationError,
)

logger = logging.getLogger(__name__)

QueryValue = str | int | bool | list[str] | tuple[str, ...] | None


# =============================================================================
# Request Building
# =============================================================================


def resolve_path(endpoint: Endpoint, path_params: Mapping[str, str] | None = None) -> str:
    """Substitute every ``{placeholder}`` in the endpoint's path template.

    Values are inserted literally in a single pass, so a value that itself
    looks like a placeholder is never substituted again.

    Raises:
        SignalValidationError: A placeholder has no value.
    """
    params = path_params or {}
    missing = [name for name in endpoint.placeholders if params.get(name) is None]
    if missing:
        raise SignalValidationError(
            f"{endpoint.name}: missing path parameter(s): {', '.join(missing)}"
        )
    return PLACEHOLDER_PATTERN.sub(lambda m: str(params[m.group(1)]), endpoint.path)


def serialize_query_value(value: str | int | bool | list[str] | tuple[str, ...]) -> str:
    """Serialize one query value: lowercase booleans, decimal ints, comma-joined lists."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def build_query(
    endpoint: Endpoint, query: Mapping[str, QueryValue] | None = None
) -> list[tuple[str, str]]:
    """Build query pairs in the endpoint's declared order, dropping None values.

    Raises:
        SignalValidationError: A query parameter the endpoint does not accept.
    """
    values = query or {}
    unknown = sorted(set(values) - set(endpoint.query))
    if unknown:
        raise SignalValidationError(
            f"{endpoint.name}: unknown query parameter(s): {', '.join(unknown)}"
        )
    return [
        (name, serialize_query_value(values[name]))
        for name in endpoint.query
        if values.get(name) is not None
    ]


def serialize_body(
    endpoint: Endpoint, body: BaseModel | Mapping[str, Any] | None = None
) -> dict[str, Any] | None:
    """Serialize a request body to JSON-ready data, or None when there is no body.

    Mappings are validated into the endpoint's body model first.

    Raises:
        SignalValidationError: The endpoint takes no body, or the body is invalid.
    """
    if body is None:
        return None
    if endpoint.body is None:
        raise SignalValidationError(f"{endpoint.name} does not accept a request body")
    if not isinstance(body, BaseModel):
        try:
            body = endpoint.body.model_validate(body)
        except ValidationError as e:
            raise SignalValidationError(f"{endpoint.name}: invalid request body: {e}") from e
    elif not isinstance(body, endpoint.body):
        raise SignalValidationError(
            f"{endpoint.name} expects {endpoint.body.__name__}, got {type(body).__name__}"
        )
    return body.model_dump(mode="json", exclude_none=True)


# =============================================================================
# Response Classification
# =============================================================================


@lru_cache(maxsize=None)
def _type_adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def error_message(status_code: int, text: str) -> str:
    """Message for a non-success response.

    The service's ``{"error": ...}`` message when the body carries one,
    otherwise a description with the status code and raw body.
    """
    if text:
        try:
            envelope = ErrorEnvelope.model_validate_json(text)
        except ValidationError:
            envelope = None
        if envelope is not None and envelope.error:
            return envelope.error
    return f"Request failed with status {status_code}: {text or NO_CONTENT_PLACEHOLDER}"


def classify_response(endpoint: Endpoint, response: httpx.Response) -> DispatchResult:
    """Turn a received response into a DispatchResult for the endpoint."""
    status_code = response.status_code
    text = response.text

    if status_code not in SUCCESS_STATUS_CODES:
        return DispatchResult(
            endpoint=endpoint.name,
            outcome=Outcome.SERVICE_ERROR,
            error=SignalAPIError(error_message(status_code, text), status_code, text),
            status_code=status_code,
        )

    if endpoint.response is ResponseShape.NONE:
        return DispatchResult(endpoint.name, Outcome.EMPTY, status_code=status_code)

    if endpoint.response is ResponseShape.TEXT:
        return DispatchResult(endpoint.name, Outcome.VALUE, value=text, status_code=status_code)

    try:
        value = _type_adapter(endpoint.response_type).validate_json(response.content)
    except ValidationError as e:
        error = SignalResponseError(
            f"{endpoint.name}: unexpected response shape (status {status_code}): {e}",
            status_code,
            text,
        )
        error.__cause__ = e
        return DispatchResult(
            endpoint.name, Outcome.SHAPE_ERROR, error=error, status_code=status_code
        )
    return DispatchResult(endpoint.name, Outcome.VALUE, value=value, status_code=status_code)


# =============================================================================
# Engine
# =============================================================================


class DispatchEngine:
    """Executes endpoint descriptors against a shared httpx.Client.

    The engine keeps no per-call state; a single instance may be used from
    several threads at once, as httpx.Client is thread-safe.

    Debug lines always go to the module logger. When `debug_logger` is given
    they are also written there, so one client's debug output stays its own.
    """

    def __init__(self, http: httpx.Client, debug_logger: logging.Logger | None = None) -> None:
        self._http = http
        self._debug_logger = debug_logger

    def _debug_enabled(self) -> bool:
        return self._debug_logger is not None or logger.isEnabledFor(logging.DEBUG)

    def _log_debug(self, msg: str, *args: Any) -> None:
        logger.debug(msg, *args)
        if self._debug_logger is not None:
            self._debug_logger.debug(msg, *args)

    def build_request(
        self,
        endpoint: Endpoint,
        *,
        path_params: Mapping[str, str] | None = None,
        query: Mapping[str, QueryValue] | None = None,
        body: BaseModel | Mapping[str, Any] | None = None,
    ) -> httpx.Request:
        """Build the outbound request without sending it.

        Raises:
            SignalValidationError: Invalid path parameters, query or body.
        """
        path = resolve_path(endpoint, path_params)
        params = build_query(endpoint, query)
        payload = serialize_body(endpoint, body)
        if payload is not None and self._debug_enabled():
            self._log_debug("%s body: %s", endpoint.name, json.dumps(redact_payload(payload)))
        return self._http.build_request(
            endpoint.method,
            path,
            params=params or None,
            json=payload,
        )

    def execute(
        self,
        endpoint: Endpoint,
        *,
        path_params: Mapping[str, str] | None = None,
        query: Mapping[str, QueryValue] | None = None,
        body: BaseModel | Mapping[str, Any] | None = None,
    ) -> DispatchResult:
        """Send exactly one request for the endpoint and classify the outcome.

        Transport, service and shape failures are returned in the result, not
        raised. Argument errors raise SignalValidationError before anything
        is sent.
        """
        request = self.build_request(endpoint, path_params=path_params, query=query, body=body)
        self._log_debug("%s %s", request.method, request.url)

        try:
            response = self._http.send(request)
        except httpx.TimeoutException as e:
            return self._transport_failure(endpoint, SignalTimeoutError, e)
        except httpx.RequestError as e:
            return self._transport_failure(endpoint, SignalTransportError, e)

        self._log_debug("%s %s -> %d", request.method, request.url.path, response.status_code)
        return classify_response(endpoint, response)

    def _transport_failure(
        self,
        endpoint: Endpoint,
        error_type: type[SignalTransportError],
        cause: httpx.RequestError,
    ) -> DispatchResult:
        error = error_type(f"{endpoint.name}: {type(cause).__name__}: {cause}")
        error.__cause__ = cause
        self._log_debug("%s transport failure: %s", endpoint.name, error)
        return DispatchResult(endpoint.name, Outcome.TRANSPORT_ERROR, error=error)
