"""Pydantic models for contacts."""

from pydantic import BaseModel


class ContactProfile(BaseModel):
    given_name: str | None = None
    lastname: str | None = None
    about: str | None = None
    has_avatar: bool = False
    last_updated_timestamp: int | None = None

    model_config = {"extra": "allow"}


class Nickname(BaseModel):
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None

    model_config = {"extra": "allow"}


class Contact(BaseModel):
    """Contact record as returned by the contacts endpoints."""

    number: str | None = None
    uuid: str | None = None
    name: str | None = None
    given_name: str | None = None
    profile_name: str | None = None
    username: str | None = None
    color: str | None = None
    blocked: bool = False
    message_expiration: str | None = None
    note: str | None = None
    nickname: Nickname | None = None
    profile: ContactProfile | None = None

    model_config = {"extra": "allow"}


class UpdateContactRequest(BaseModel):
    """Payload for creating or renaming a contact.

    Required fields:
        recipient: Phone number or UUID of the contact

    Optional fields:
        name: Display name for the contact
        expiration_in_seconds: Disappearing-messages timer for the chat
    """

    recipient: str
    name: str | None = None
    expiration_in_seconds: int | None = None
