"""Endpoint catalog for the Signal REST API.

One Endpoint per operation, grouped by resource family. SignalClient methods
are thin wrappers that hand these descriptors to the dispatch engine.
"""

from signal_sdk._internal.dispatch.models import Endpoint, ResponseShape
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

NONE = ResponseShape.NONE
TEXT = ResponseShape.TEXT
JSON = ResponseShape.JSON

# =============================================================================
# General
# =============================================================================

GET_ABOUT = Endpoint("get_about", "GET", "/v1/about", JSON, About)
GET_CONFIGURATION = Endpoint("get_configuration", "GET", "/v1/configuration", JSON, Configuration)
SET_CONFIGURATION = Endpoint("set_configuration", "POST", "/v1/configuration", body=Configuration)
HEALTH_CHECK = Endpoint("health_check", "GET", "/v1/health")
GET_ACCOUNT_SETTINGS = Endpoint(
    "get_account_settings", "GET", "/v1/configuration/{number}/settings", JSON, TrustModeResponse
)
SET_ACCOUNT_SETTINGS = Endpoint(
    "set_account_settings", "POST", "/v1/configuration/{number}/settings", body=TrustModeRequest
)

# =============================================================================
# Accounts
# =============================================================================

GET_ACCOUNTS = Endpoint("get_accounts", "GET", "/v1/accounts", JSON, list[str])
SET_PIN = Endpoint("set_pin", "POST", "/v1/accounts/{number}/pin", body=SetPinRequest)
REMOVE_PIN = Endpoint("remove_pin", "DELETE", "/v1/accounts/{number}/pin")
RATE_LIMIT_CHALLENGE = Endpoint(
    "rate_limit_challenge",
    "POST",
    "/v1/accounts/{number}/rate-limit-challenge",
    body=RateLimitChallengeRequest,
)
UPDATE_ACCOUNT_SETTINGS = Endpoint(
    "update_account_settings",
    "PUT",
    "/v1/accounts/{number}/settings",
    body=UpdateAccountSettingsRequest,
)
SET_USERNAME = Endpoint(
    "set_username",
    "POST",
    "/v1/accounts/{number}/username",
    JSON,
    SetUsernameResponse,
    body=SetUsernameRequest,
)
REMOVE_USERNAME = Endpoint("remove_username", "DELETE", "/v1/accounts/{number}/username")
UNREGISTER_NUMBER = Endpoint(
    "unregister_number", "POST", "/v1/unregister/{number}", body=UnregisterNumberRequest
)

# =============================================================================
# Devices
# =============================================================================

REGISTER_NUMBER = Endpoint(
    "register_number", "POST", "/v1/register/{number}", body=RegisterNumberRequest
)
VERIFY_NUMBER = Endpoint(
    "verify_number", "POST", "/v1/register/{number}/verify/{token}", body=VerifyNumberSettings
)
GET_DEVICES = Endpoint("get_devices", "GET", "/v1/devices/{number}", JSON, list[Device])
LINK_DEVICE = Endpoint("link_device", "POST", "/v1/devices/{number}", body=AddDeviceRequest)
GENERATE_QR_CODE_LINK = Endpoint(
    "generate_qr_code_link",
    "GET",
    "/v1/qrcodelink",
    TEXT,
    query=("device_name", "qrcode_version"),
)

# =============================================================================
# Messages
# =============================================================================

SEND_MESSAGE_LEGACY = Endpoint(
    "send_message_legacy",
    "POST",
    "/v1/send",
    TEXT,
    body=SendMessageLegacy,
    deprecated=True,
)
SEND_MESSAGE = Endpoint(
    "send_message", "POST", "/v2/send", JSON, SendMessageResponse, body=SendMessage
)
RECEIVE_MESSAGES = Endpoint(
    "receive_messages",
    "GET",
    "/v1/receive/{number}",
    JSON,
    list[ReceivedMessage],
    query=("timeout", "ignore_attachments", "ignore_stories", "max_messages", "send_read_receipts"),
)
SEND_REACTION = Endpoint("send_reaction", "POST", "/v1/reactions/{number}", body=Reaction)
REMOVE_REACTION = Endpoint("remove_reaction", "DELETE", "/v1/reactions/{number}", body=Reaction)
SEND_RECEIPT = Endpoint("send_receipt", "POST", "/v1/receipts/{number}", body=Receipt)
REMOTE_DELETE = Endpoint(
    "remote_delete",
    "DELETE",
    "/v1/remote-delete/{number}",
    JSON,
    RemoteDeleteResponse,
    body=RemoteDeleteRequest,
)
SHOW_TYPING_INDICATOR = Endpoint(
    "show_typing_indicator", "PUT", "/v1/typing-indicator/{number}", body=TypingIndicatorRequest
)
HIDE_TYPING_INDICATOR = Endpoint(
    "hide_typing_indicator", "DELETE", "/v1/typing-indicator/{number}", body=TypingIndicatorRequest
)

# =============================================================================
# Contacts
# =============================================================================

GET_CONTACTS = Endpoint("get_contacts", "GET", "/v1/contacts/{number}", JSON, list[Contact])
UPDATE_CONTACT = Endpoint(
    "update_contact", "PUT", "/v1/contacts/{number}", body=UpdateContactRequest
)
GET_CONTACT = Endpoint("get_contact", "GET", "/v1/contacts/{number}/{uuid}", JSON, Contact)
GET_CONTACT_AVATAR = Endpoint(
    "get_contact_avatar", "GET", "/v1/contacts/{number}/{uuid}/avatar", TEXT
)
SYNC_CONTACTS = Endpoint("sync_contacts", "POST", "/v1/contacts/{number}/sync")

# =============================================================================
# Attachments
# =============================================================================

GET_ATTACHMENTS = Endpoint("get_attachments", "GET", "/v1/attachments", JSON, list[str])
GET_ATTACHMENT = Endpoint("get_attachment", "GET", "/v1/attachments/{attachment}", TEXT)
DELETE_ATTACHMENT = Endpoint("delete_attachment", "DELETE", "/v1/attachments/{attachment}")

# =============================================================================
# Groups
# =============================================================================

GET_GROUPS = Endpoint("get_groups", "GET", "/v1/groups/{number}", JSON, list[GroupEntry])
CREATE_GROUP = Endpoint(
    "create_group",
    "POST",
    "/v1/groups/{number}",
    JSON,
    CreateGroupResponse,
    body=CreateGroupRequest,
)
GET_GROUP = Endpoint("get_group", "GET", "/v1/groups/{number}/{groupid}", JSON, GroupEntry)
UPDATE_GROUP = Endpoint(
    "update_group", "PUT", "/v1/groups/{number}/{groupid}", body=UpdateGroupRequest
)
DELETE_GROUP = Endpoint("delete_group", "DELETE", "/v1/groups/{number}/{groupid}")
ADD_GROUP_ADMINS = Endpoint(
    "add_group_admins",
    "POST",
    "/v1/groups/{number}/{groupid}/admins",
    body=ChangeGroupAdminsRequest,
)
REMOVE_GROUP_ADMINS = Endpoint(
    "remove_group_admins",
    "DELETE",
    "/v1/groups/{number}/{groupid}/admins",
    body=ChangeGroupAdminsRequest,
)
GET_GROUP_AVATAR = Endpoint(
    "get_group_avatar", "GET", "/v1/groups/{number}/{groupid}/avatar", TEXT
)
BLOCK_GROUP = Endpoint("block_group", "POST", "/v1/groups/{number}/{groupid}/block")
JOIN_GROUP = Endpoint("join_group", "POST", "/v1/groups/{number}/{groupid}/join")
ADD_GROUP_MEMBERS = Endpoint(
    "add_group_members",
    "POST",
    "/v1/groups/{number}/{groupid}/members",
    body=ChangeGroupMembersRequest,
)
REMOVE_GROUP_MEMBERS = Endpoint(
    "remove_group_members",
    "DELETE",
    "/v1/groups/{number}/{groupid}/members",
    body=ChangeGroupMembersRequest,
)
QUIT_GROUP = Endpoint("quit_group", "POST", "/v1/groups/{number}/{groupid}/quit")

# =============================================================================
# Identities, Profiles, Search, Sticker Packs
# =============================================================================

GET_IDENTITIES = Endpoint(
    "get_identities", "GET", "/v1/identities/{number}", JSON, list[IdentityEntry]
)
TRUST_IDENTITY = Endpoint(
    "trust_identity",
    "PUT",
    "/v1/identities/{number}/trust/{number_to_trust}",
    body=TrustIdentityRequest,
)
UPDATE_PROFILE = Endpoint(
    "update_profile", "PUT", "/v1/profiles/{number}", body=UpdateProfileRequest
)
SEARCH = Endpoint(
    "search", "GET", "/v1/search/{number}", JSON, list[SearchResult], query=("numbers",)
)
GET_STICKER_PACKS = Endpoint(
    "get_sticker_packs", "GET", "/v1/sticker-packs/{number}", JSON, list[StickerPack]
)
ADD_STICKER_PACK = Endpoint(
    "add_sticker_pack", "POST", "/v1/sticker-packs/{number}", body=AddStickerPackRequest
)

# =============================================================================
# Registry
# =============================================================================

ENDPOINTS: dict[str, Endpoint] = {
    endpoint.name: endpoint
    for endpoint in (
        GET_ABOUT,
        GET_CONFIGURATION,
        SET_CONFIGURATION,
        HEALTH_CHECK,
        GET_ACCOUNT_SETTINGS,
        SET_ACCOUNT_SETTINGS,
        GET_ACCOUNTS,
        SET_PIN,
        REMOVE_PIN,
        RATE_LIMIT_CHALLENGE,
        UPDATE_ACCOUNT_SETTINGS,
        SET_USERNAME,
        REMOVE_USERNAME,
        UNREGISTER_NUMBER,
        REGISTER_NUMBER,
        VERIFY_NUMBER,
        GET_DEVICES,
        LINK_DEVICE,
        GENERATE_QR_CODE_LINK,
        SEND_MESSAGE_LEGACY,
        SEND_MESSAGE,
        RECEIVE_MESSAGES,
        SEND_REACTION,
        REMOVE_REACTION,
        SEND_RECEIPT,
        REMOTE_DELETE,
        SHOW_TYPING_INDICATOR,
        HIDE_TYPING_INDICATOR,
        GET_CONTACTS,
        UPDATE_CONTACT,
        GET_CONTACT,
        GET_CONTACT_AVATAR,
        SYNC_CONTACTS,
        GET_ATTACHMENTS,
        GET_ATTACHMENT,
        DELETE_ATTACHMENT,
        GET_GROUPS,
        CREATE_GROUP,
        GET_GROUP,
        UPDATE_GROUP,
        DELETE_GROUP,
        ADD_GROUP_ADMINS,
        REMOVE_GROUP_ADMINS,
        GET_GROUP_AVATAR,
        BLOCK_GROUP,
        JOIN_GROUP,
        ADD_GROUP_MEMBERS,
        REMOVE_GROUP_MEMBERS,
        QUIT_GROUP,
        GET_IDENTITIES,
        TRUST_IDENTITY,
        UPDATE_PROFILE,
        SEARCH,
        GET_STICKER_PACKS,
        ADD_STICKER_PACK,
    )
}
