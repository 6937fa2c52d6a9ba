"""Pydantic models for linked devices."""

from pydantic import BaseModel


class Device(BaseModel):
    """Linked device as listed by ``/v1/devices/{number}``."""

    id: int | None = None
    name: str | None = None
    creation_timestamp: int | None = None
    last_seen_timestamp: int | None = None

    model_config = {"extra": "allow"}


class AddDeviceRequest(BaseModel):
    """Link a new device using the ``sgnl://linkdevice?...`` URI it displays."""

    uri: str
