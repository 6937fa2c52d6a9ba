"""Pydantic models for account registration and account settings."""

from pydantic import BaseModel

# =============================================================================
# Request Models
# =============================================================================


class SetPinRequest(BaseModel):
    pin: str


class RateLimitChallengeRequest(BaseModel):
    """Answer to a rate-limit challenge issued by the server.

    Required fields:
        challenge_token: Token received with the rate-limit error
        captcha: Solved captcha string
    """

    challenge_token: str
    captcha: str


class UpdateAccountSettingsRequest(BaseModel):
    """Account privacy settings. Only provided fields are updated."""

    discoverable_by_number: bool | None = None
    share_number: bool | None = None


class SetUsernameRequest(BaseModel):
    username: str


class RegisterNumberRequest(BaseModel):
    """Payload for registering a phone number.

    All fields are optional; an empty body requests an SMS verification code.
    """

    captcha: str | None = None
    use_voice: bool = False


class VerifyNumberSettings(BaseModel):
    """Registration lock PIN sent along with the verification token."""

    pin: str | None = None


class UnregisterNumberRequest(BaseModel):
    delete_account: bool = False
    delete_local_data: bool = False


# =============================================================================
# Response Models
# =============================================================================


class SetUsernameResponse(BaseModel):
    username: str | None = None
    username_link: str | None = None

    model_config = {"extra": "allow"}
