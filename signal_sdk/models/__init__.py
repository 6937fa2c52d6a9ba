"""Public request and response models for the Signal REST API.

    from signal_sdk.models import SendMessage

    message = SendMessage(number="+1555", recipients=["+1666"], message="hi")
"""

from signal_sdk.models.accounts import (
    RateLimitChallengeRequest,
    RegisterNumberRequest,
    SetPinRequest,
    SetUsernameRequest,
    SetUsernameResponse,
    UnregisterNumberRequest,
    UpdateAccountSettingsRequest,
    VerifyNumberSettings,
)
from signal_sdk.models.contacts import (
    Contact,
    ContactProfile,
    Nickname,
    UpdateContactRequest,
)
from signal_sdk.models.devices import AddDeviceRequest, Device
from signal_sdk.models.general import (
    About,
    Configuration,
    LoggingConfiguration,
    TrustModeRequest,
    TrustModeResponse,
)
from signal_sdk.models.groups import (
    ChangeGroupAdminsRequest,
    ChangeGroupMembersRequest,
    CreateGroupRequest,
    CreateGroupResponse,
    GroupEntry,
    GroupPermissions,
    UpdateGroupRequest,
)
from signal_sdk.models.identities import (
    AddStickerPackRequest,
    IdentityEntry,
    SearchResult,
    StickerPack,
    TrustIdentityRequest,
    UpdateProfileRequest,
)
from signal_sdk.models.messages import (
    LinkPreview,
    MessageMention,
    Reaction,
    Receipt,
    ReceivedMessage,
    RemoteDeleteRequest,
    RemoteDeleteResponse,
    SendMessage,
    SendMessageLegacy,
    SendMessageResponse,
    TypingIndicatorRequest,
)

__all__ = [
    # General
    "About",
    "Configuration",
    "LoggingConfiguration",
    "TrustModeRequest",
    "TrustModeResponse",
    # Accounts
    "RateLimitChallengeRequest",
    "RegisterNumberRequest",
    "SetPinRequest",
    "SetUsernameRequest",
    "SetUsernameResponse",
    "UnregisterNumberRequest",
    "UpdateAccountSettingsRequest",
    "VerifyNumberSettings",
    # Devices
    "AddDeviceRequest",
    "Device",
    # Messages
    "LinkPreview",
    "MessageMention",
    "Reaction",
    "Receipt",
    "ReceivedMessage",
    "RemoteDeleteRequest",
    "RemoteDeleteResponse",
    "SendMessage",
    "SendMessageLegacy",
    "SendMessageResponse",
    "TypingIndicatorRequest",
    # Contacts
    "Contact",
    "ContactProfile",
    "Nickname",
    "UpdateContactRequest",
    # Groups
    "ChangeGroupAdminsRequest",
    "ChangeGroupMembersRequest",
    "CreateGroupRequest",
    "CreateGroupResponse",
    "GroupEntry",
    "GroupPermissions",
    "UpdateGroupRequest",
    # Identities, profiles, search, stickers
    "AddStickerPackRequest",
    "IdentityEntry",
    "SearchResult",
    "StickerPack",
    "TrustIdentityRequest",
    "UpdateProfileRequest",
]
