"""Endpoint descriptor types shared by the catalog and the dispatch engine."""

import re
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Any, Literal

from pydantic import BaseModel

# =============================================================================
# Constants
# =============================================================================

SUCCESS_STATUS_CODES = frozenset({200, 201, 204})
NO_CONTENT_PLACEHOLDER = "No content"

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


class ResponseShape(str, Enum):
    """What a successful response body is turned into."""

    NONE = "none"
    TEXT = "text"
    JSON = "json"


# =============================================================================
# Endpoint Descriptor
# =============================================================================


@dataclass(frozen=True)
class Endpoint:
    """Static wire definition of one operation.

    Attributes:
        name: Operation name, matching the SignalClient method.
        method: HTTP method.
        path: Path template with ``{placeholder}`` tokens.
        response: Shape of a successful response body.
        response_type: Type the body is validated into when response is JSON
            (a model class or e.g. ``list[GroupEntry]``).
        query: Accepted query parameter names, in transmission order.
        body: Request body model, or None if the endpoint takes no body.
        deprecated: Whether the operation is kept only for compatibility.
    """

    name: str
    method: HttpMethod
    path: str
    response: ResponseShape = ResponseShape.NONE
    response_type: Any = None
    query: tuple[str, ...] = ()
    body: type[BaseModel] | None = None
    deprecated: bool = False

    def __post_init__(self) -> None:
        if (self.response is ResponseShape.JSON) != (self.response_type is not None):
            raise ValueError(
                f"{self.name}: response_type must be set exactly when response is JSON"
            )

    @cached_property
    def placeholders(self) -> tuple[str, ...]:
        """Placeholder names in the path template, in order of appearance."""
        return tuple(PLACEHOLDER_PATTERN.findall(self.path))


# =============================================================================
# Error Envelope
# =============================================================================


class ErrorEnvelope(BaseModel):
    """Failure body returned by the service: ``{"error": "<message>"}``."""

    error: str | None = None

    model_config = {"extra": "allow"}
