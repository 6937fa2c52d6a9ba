"""Pydantic models for sending and receiving messages.

Covers the legacy and current send payloads, received envelopes, reactions,
receipts, remote deletion and typing indicators.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

TextMode = Literal["normal", "styled"]
ReceiptType = Literal["read", "viewed"]

# =============================================================================
# Send
# =============================================================================


class MessageMention(BaseModel):
    author: str
    start: int
    length: int


class LinkPreview(BaseModel):
    url: str
    title: str | None = None
    description: str | None = None
    base64_thumbnail: str | None = None


class SendMessageLegacy(BaseModel):
    """Payload for the deprecated ``/v1/send`` endpoint.

    Single attachment only; superseded by SendMessage.
    """

    number: str
    recipients: list[str] = Field(default_factory=list)
    message: str | None = None
    base64_attachment: str | None = None
    is_group: bool = False


class SendMessage(BaseModel):
    """Payload for ``/v2/send``.

    Required fields:
        number: Sending account
        recipients: Phone numbers, usernames or group ids

    Optional fields:
        message: Message text
        base64_attachments: Attachments as (data URI) base64 strings
        text_mode: 'normal' or 'styled' (default: 'normal')
        edit_timestamp: Timestamp of the message to edit
        link_preview: Link preview to attach
        mentions: Mentions within the message text
        notify_self: Also notify the sending account's other devices
        quote_author / quote_message / quote_timestamp / quote_mentions:
            Quoted message
        sticker: '<pack_id>:<sticker_id>'
        view_once: Send attachments as view-once
    """

    number: str
    recipients: list[str]
    message: str | None = None
    base64_attachments: list[str] | None = None
    text_mode: TextMode = "normal"
    edit_timestamp: int | None = None
    link_preview: LinkPreview | None = None
    mentions: list[MessageMention] | None = None
    notify_self: bool | None = None
    quote_author: str | None = None
    quote_mentions: list[MessageMention] | None = None
    quote_message: str | None = None
    quote_timestamp: int | None = None
    sticker: str | None = None
    view_once: bool | None = None


class SendMessageResponse(BaseModel):
    timestamp: str | None = None

    model_config = {"extra": "allow"}


# =============================================================================
# Receive
# =============================================================================


class ReceivedMessage(BaseModel):
    """One item returned by ``/v1/receive/{number}``.

    The envelope layout is owned by signal-cli and passed through as-is.
    """

    envelope: dict[str, Any] | None = None
    account: str | None = None

    model_config = {"extra": "allow"}


# =============================================================================
# Reactions, Receipts, Remote Delete, Typing
# =============================================================================


class Reaction(BaseModel):
    """Emoji reaction to a message identified by author and timestamp."""

    reaction: str
    recipient: str
    target_author: str
    timestamp: int


class Receipt(BaseModel):
    receipt_type: ReceiptType
    recipient: str
    timestamp: int


class RemoteDeleteRequest(BaseModel):
    recipient: str
    timestamp: int


class RemoteDeleteResponse(BaseModel):
    timestamp: str | None = None

    model_config = {"extra": "allow"}


class TypingIndicatorRequest(BaseModel):
    recipient: str
