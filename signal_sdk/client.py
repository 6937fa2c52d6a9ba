"""User-facing client for the Signal REST API.

Example usage:
    from signal_sdk import SignalClient
    from signal_sdk.models import SendMessage

    with SignalClient("http://localhost:8080") as client:
        response = client.send_message(
            SendMessage(number="+15550001", recipients=["+15550002"], message="hi")
        )
        print(response.timestamp)

Every method maps to exactly one endpoint in the catalog and raises a
SignalError subclass on failure. Use `execute()` to get a DispatchResult
instead of an exception.
"""

import os
import warnings
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel

from signal_sdk._internal.debug import close_debug_logger, create_debug_logger
from signal_sdk._internal.dispatch import endpoints
from signal_sdk._internal.dispatch.engine import DispatchEngine, QueryValue
from signal_sdk._internal.dispatch.models import Endpoint
from signal_sdk._internal.dispatch.result import DispatchResult
from signal_sdk._internal.http import DEFAULT_TIMEOUT_MS, create_http_client
from signal_sdk.exceptions import SignalClientClosedError, SignalConfigError
from signal_sdk.models import (
    About,
    AddDeviceRequest,
    AddStickerPackRequest,
    ChangeGroupAdminsRequest,
    ChangeGroupMembersRequest,
    Configuration,
    Contact,
    CreateGroupRequest,
    CreateGroupResponse,
    Device,
    GroupEntry,
    IdentityEntry,
    RateLimitChallengeRequest,
    Reaction,
    Receipt,
    ReceivedMessage,
    RegisterNumberRequest,
    RemoteDeleteRequest,
    RemoteDeleteResponse,
    SearchResult,
    SendMessage,
    SendMessageLegacy,
    SendMessageResponse,
    SetPinRequest,
    SetUsernameRequest,
    SetUsernameResponse,
    StickerPack,
    TrustIdentityRequest,
    TrustModeRequest,
    TrustModeResponse,
    TypingIndicatorRequest,
    UnregisterNumberRequest,
    UpdateAccountSettingsRequest,
    UpdateContactRequest,
    UpdateGroupRequest,
    UpdateProfileRequest,
    VerifyNumberSettings,
)


def _timeout_ms_of(http_client: httpx.Client) -> int | None:
    read = http_client.timeout.read
    return None if read is None else int(read * 1000)


class SignalClient:
    """Typed client for a signal-cli REST API gateway.

    The client owns one httpx.Client for its lifetime and may be shared across
    threads. Close it with `close()` or by using it as a context manager;
    closing twice is a no-op.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        http_client: httpx.Client | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the REST API, e.g. "http://localhost:8080".
            timeout_ms: Request timeout in milliseconds, applied to every call.
            http_client: Optional preconfigured httpx.Client. It is used as-is
                and never closed by this client. Its own base URL and timeout
                apply, and the `base_url` and `timeout_ms` properties report them.
            debug: Log this client's requests to stderr until it is closed.
        """
        if not base_url:
            raise SignalConfigError("base_url is required")
        if timeout_ms <= 0:
            raise SignalConfigError(f"timeout_ms must be positive, got {timeout_ms}")

        self._debug_logger = create_debug_logger() if debug else None
        self._owns_http = http_client is None
        if http_client is None:
            self._base_url = base_url
            self._timeout_ms: int | None = timeout_ms
            self._http = create_http_client(base_url=base_url, timeout_ms=timeout_ms)
        else:
            self._base_url = str(http_client.base_url)
            self._timeout_ms = _timeout_ms_of(http_client)
            self._http = http_client
        self._engine = DispatchEngine(self._http, self._debug_logger)
        self._closed = False

    @classmethod
    def from_env(cls) -> "SignalClient":
        """Create a client from environment variables.

        Required environment variables:
            SIGNAL_API_URL: Base URL of the REST API.

        Optional environment variables:
            SIGNAL_API_TIMEOUT_MS: Request timeout in milliseconds.
            SIGNAL_SDK_DEBUG: Set to "1" to enable debug logging.

        Raises:
            SignalConfigError: SIGNAL_API_URL is not set.
            ValueError: SIGNAL_API_TIMEOUT_MS is not an integer.
        """
        base_url = os.environ.get("SIGNAL_API_URL")
        if not base_url:
            raise SignalConfigError("SIGNAL_API_URL is not set")

        timeout_ms = int(os.environ.get("SIGNAL_API_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        debug = os.environ.get("SIGNAL_SDK_DEBUG", "") == "1"

        return cls(base_url, timeout_ms=timeout_ms, debug=debug)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_ms(self) -> int | None:
        """Read timeout in milliseconds, or None when the transport has none."""
        return self._timeout_ms

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the underlying transport. Calling this again does nothing."""
        if self._closed:
            return
        self._closed = True
        if self._owns_http:
            self._http.close()
        if self._debug_logger is not None:
            close_debug_logger(self._debug_logger)

    def __enter__(self) -> "SignalClient":
        return self

    def __exit__(self, exc_type: Any, exc: Any, traceback: Any) -> None:
        self.close()

    # =========================================================================
    # Dispatch
    # =========================================================================

    def execute(
        self,
        endpoint: Endpoint,
        *,
        path_params: Mapping[str, str] | None = None,
        query: Mapping[str, QueryValue] | None = None,
        body: BaseModel | Mapping[str, Any] | None = None,
    ) -> DispatchResult:
        """Execute one endpoint and return its classified result without raising.

        Raises:
            SignalClientClosedError: The client has been closed.
            SignalValidationError: Invalid path parameters, query or body.
        """
        if self._closed:
            raise SignalClientClosedError(f"cannot call {endpoint.name}: client is closed")
        return self._engine.execute(endpoint, path_params=path_params, query=query, body=body)

    def _call(self, endpoint: Endpoint, body: BaseModel | None = None, **path_params: str) -> Any:
        return self.execute(endpoint, path_params=path_params, body=body).unwrap()

    # =========================================================================
    # General
    # =========================================================================

    def get_about(self) -> About:
        return self._call(endpoints.GET_ABOUT)

    def get_configuration(self) -> Configuration:
        return self._call(endpoints.GET_CONFIGURATION)

    def set_configuration(self, config: Configuration) -> None:
        self._call(endpoints.SET_CONFIGURATION, config)

    def health_check(self) -> None:
        """Raise unless the service reports itself healthy."""
        self._call(endpoints.HEALTH_CHECK)

    def get_account_settings(self, number: str) -> TrustModeResponse:
        return self._call(endpoints.GET_ACCOUNT_SETTINGS, number=number)

    def set_account_settings(self, number: str, request: TrustModeRequest) -> None:
        self._call(endpoints.SET_ACCOUNT_SETTINGS, request, number=number)

    # =========================================================================
    # Accounts
    # =========================================================================

    def get_accounts(self) -> list[str]:
        return self._call(endpoints.GET_ACCOUNTS)

    def set_pin(self, number: str, pin: str) -> None:
        self._call(endpoints.SET_PIN, SetPinRequest(pin=pin), number=number)

    def remove_pin(self, number: str) -> None:
        self._call(endpoints.REMOVE_PIN, number=number)

    def rate_limit_challenge(self, number: str, request: RateLimitChallengeRequest) -> None:
        self._call(endpoints.RATE_LIMIT_CHALLENGE, request, number=number)

    def update_account_settings(self, number: str, request: UpdateAccountSettingsRequest) -> None:
        self._call(endpoints.UPDATE_ACCOUNT_SETTINGS, request, number=number)

    def set_username(self, number: str, request: SetUsernameRequest) -> SetUsernameResponse:
        return self._call(endpoints.SET_USERNAME, request, number=number)

    def remove_username(self, number: str) -> None:
        self._call(endpoints.REMOVE_USERNAME, number=number)

    def unregister_number(self, number: str, request: UnregisterNumberRequest) -> None:
        self._call(endpoints.UNREGISTER_NUMBER, request, number=number)

    # =========================================================================
    # Devices
    # =========================================================================

    def register_number(self, number: str, request: RegisterNumberRequest | None = None) -> None:
        """Register a number; without a request an SMS verification code is sent."""
        self._call(endpoints.REGISTER_NUMBER, request or RegisterNumberRequest(), number=number)

    def verify_number(
        self, number: str, token: str, settings: VerifyNumberSettings | None = None
    ) -> None:
        self._call(
            endpoints.VERIFY_NUMBER,
            settings or VerifyNumberSettings(),
            number=number,
            token=token,
        )

    def get_devices(self, number: str) -> list[Device]:
        return self._call(endpoints.GET_DEVICES, number=number)

    def link_device(self, number: str, request: AddDeviceRequest) -> None:
        self._call(endpoints.LINK_DEVICE, request, number=number)

    def generate_qr_code_link(self, device_name: str, qrcode_version: int | None = None) -> str:
        """Return the raw QR code image for linking a new device."""
        return self.execute(
            endpoints.GENERATE_QR_CODE_LINK,
            query={"device_name": device_name, "qrcode_version": qrcode_version},
        ).unwrap()

    # =========================================================================
    # Messages
    # =========================================================================

    def send_message_legacy(self, message: SendMessageLegacy) -> str:
        """Send through the deprecated ``/v1/send`` endpoint. Prefer `send_message`."""
        warnings.warn(
            "send_message_legacy uses the deprecated /v1/send endpoint; use send_message",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._call(endpoints.SEND_MESSAGE_LEGACY, message)

    def send_message(self, message: SendMessage) -> SendMessageResponse:
        return self._call(endpoints.SEND_MESSAGE, message)

    def receive_messages(
        self,
        number: str,
        *,
        timeout: int | None = None,
        ignore_attachments: bool | None = None,
        ignore_stories: bool | None = None,
        max_messages: int | None = None,
        send_read_receipts: bool | None = None,
    ) -> list[ReceivedMessage]:
        """Poll pending messages. Options left as None are not sent."""
        return self.execute(
            endpoints.RECEIVE_MESSAGES,
            path_params={"number": number},
            query={
                "timeout": timeout,
                "ignore_attachments": ignore_attachments,
                "ignore_stories": ignore_stories,
                "max_messages": max_messages,
                "send_read_receipts": send_read_receipts,
            },
        ).unwrap()

    def send_reaction(self, number: str, reaction: Reaction) -> None:
        self._call(endpoints.SEND_REACTION, reaction, number=number)

    def remove_reaction(self, number: str, reaction: Reaction) -> None:
        self._call(endpoints.REMOVE_REACTION, reaction, number=number)

    def send_receipt(self, number: str, receipt: Receipt) -> None:
        self._call(endpoints.SEND_RECEIPT, receipt, number=number)

    def remote_delete(self, number: str, request: RemoteDeleteRequest) -> RemoteDeleteResponse:
        return self._call(endpoints.REMOTE_DELETE, request, number=number)

    def show_typing_indicator(self, number: str, request: TypingIndicatorRequest) -> None:
        self._call(endpoints.SHOW_TYPING_INDICATOR, request, number=number)

    def hide_typing_indicator(self, number: str, request: TypingIndicatorRequest) -> None:
        self._call(endpoints.HIDE_TYPING_INDICATOR, request, number=number)

    # =========================================================================
    # Contacts
    # =========================================================================

    def get_contacts(self, number: str) -> list[Contact]:
        return self._call(endpoints.GET_CONTACTS, number=number)

    def update_contact(self, number: str, contact: UpdateContactRequest) -> None:
        self._call(endpoints.UPDATE_CONTACT, contact, number=number)

    def get_contact(self, number: str, uuid: str) -> Contact:
        return self._call(endpoints.GET_CONTACT, number=number, uuid=uuid)

    def get_contact_avatar(self, number: str, uuid: str) -> str:
        return self._call(endpoints.GET_CONTACT_AVATAR, number=number, uuid=uuid)

    def sync_contacts(self, number: str) -> None:
        self._call(endpoints.SYNC_CONTACTS, number=number)

    # =========================================================================
    # Attachments
    # =========================================================================

    def get_attachments(self) -> list[str]:
        return self._call(endpoints.GET_ATTACHMENTS)

    def get_attachment(self, attachment_id: str) -> str:
        return self._call(endpoints.GET_ATTACHMENT, attachment=attachment_id)

    def delete_attachment(self, attachment_id: str) -> None:
        self._call(endpoints.DELETE_ATTACHMENT, attachment=attachment_id)

    # =========================================================================
    # Groups
    # =========================================================================

    def get_groups(self, number: str) -> list[GroupEntry]:
        return self._call(endpoints.GET_GROUPS, number=number)

    def create_group(self, number: str, request: CreateGroupRequest) -> CreateGroupResponse:
        return self._call(endpoints.CREATE_GROUP, request, number=number)

    def get_group(self, number: str, groupid: str) -> GroupEntry:
        return self._call(endpoints.GET_GROUP, number=number, groupid=groupid)

    def update_group(self, number: str, groupid: str, request: UpdateGroupRequest) -> None:
        self._call(endpoints.UPDATE_GROUP, request, number=number, groupid=groupid)

    def delete_group(self, number: str, groupid: str) -> None:
        self._call(endpoints.DELETE_GROUP, number=number, groupid=groupid)

    def add_group_admins(
        self, number: str, groupid: str, request: ChangeGroupAdminsRequest
    ) -> None:
        self._call(endpoints.ADD_GROUP_ADMINS, request, number=number, groupid=groupid)

    def remove_group_admins(
        self, number: str, groupid: str, request: ChangeGroupAdminsRequest
    ) -> None:
        self._call(endpoints.REMOVE_GROUP_ADMINS, request, number=number, groupid=groupid)

    def get_group_avatar(self, number: str, groupid: str) -> str:
        return self._call(endpoints.GET_GROUP_AVATAR, number=number, groupid=groupid)

    def block_group(self, number: str, groupid: str) -> None:
        self._call(endpoints.BLOCK_GROUP, number=number, groupid=groupid)

    def join_group(self, number: str, groupid: str) -> None:
        self._call(endpoints.JOIN_GROUP, number=number, groupid=groupid)

    def add_group_members(
        self, number: str, groupid: str, request: ChangeGroupMembersRequest
    ) -> None:
        self._call(endpoints.ADD_GROUP_MEMBERS, request, number=number, groupid=groupid)

    def remove_group_members(
        self, number: str, groupid: str, request: ChangeGroupMembersRequest
    ) -> None:
        self._call(endpoints.REMOVE_GROUP_MEMBERS, request, number=number, groupid=groupid)

    def quit_group(self, number: str, groupid: str) -> None:
        self._call(endpoints.QUIT_GROUP, number=number, groupid=groupid)

    # =========================================================================
    # Identities, Profiles, Search, Sticker Packs
    # =========================================================================

    def get_identities(self, number: str) -> list[IdentityEntry]:
        return self._call(endpoints.GET_IDENTITIES, number=number)

    def trust_identity(
        self, number: str, number_to_trust: str, request: TrustIdentityRequest
    ) -> None:
        self._call(
            endpoints.TRUST_IDENTITY, request, number=number, number_to_trust=number_to_trust
        )

    def update_profile(self, number: str, profile: UpdateProfileRequest) -> None:
        self._call(endpoints.UPDATE_PROFILE, profile, number=number)

    def search(self, number: str, numbers: list[str]) -> list[SearchResult]:
        """Check which of `numbers` are registered, in one batch request."""
        return self.execute(
            endpoints.SEARCH, path_params={"number": number}, query={"numbers": numbers}
        ).unwrap()

    def get_sticker_packs(self, number: str) -> list[StickerPack]:
        return self._call(endpoints.GET_STICKER_PACKS, number=number)

    def add_sticker_pack(self, number: str, request: AddStickerPackRequest) -> None:
        self._call(endpoints.ADD_STICKER_PACK, request, number=number)
