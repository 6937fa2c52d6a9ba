"""Pydantic models for identities, profiles, search and sticker packs."""

from pydantic import BaseModel

# =============================================================================
# Identities
# =============================================================================


class IdentityEntry(BaseModel):
    number: str | None = None
    uuid: str | None = None
    fingerprint: str | None = None
    safety_number: str | None = None
    status: str | None = None
    added: str | None = None

    model_config = {"extra": "allow"}


class TrustIdentityRequest(BaseModel):
    """Either trust every known key or a single verified safety number."""

    trust_all_known_keys: bool | None = None
    verified_safety_number: str | None = None


# =============================================================================
# Profiles
# =============================================================================


class UpdateProfileRequest(BaseModel):
    name: str | None = None
    about: str | None = None
    base64_avatar: str | None = None


# =============================================================================
# Search
# =============================================================================


class SearchResult(BaseModel):
    number: str | None = None
    registered: bool = False

    model_config = {"extra": "allow"}


# =============================================================================
# Sticker Packs
# =============================================================================


class StickerPack(BaseModel):
    pack_id: str | None = None
    title: str | None = None
    author: str | None = None
    url: str | None = None
    installed: bool = False

    model_config = {"extra": "allow"}


class AddStickerPackRequest(BaseModel):
    pack_id: str
    pack_key: str
