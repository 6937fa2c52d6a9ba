"""Tests for Pydantic request and response models."""

import pytest
from pydantic import ValidationError

from signal_sdk._internal.dispatch.models import ErrorEnvelope
from signal_sdk.models import (
    About,
    Contact,
    CreateGroupRequest,
    GroupPermissions,
    Receipt,
    SendMessage,
    StickerPack,
    UnregisterNumberRequest,
    UpdateAccountSettingsRequest,
)


class TestSendMessage:
    """Tests for SendMessage model."""

    def test_minimal(self):
        """Should default text_mode to normal."""
        message = SendMessage(number="+1", recipients=["+2"])
        assert message.text_mode == "normal"
        assert message.message is None

    def test_requires_recipients(self):
        """Should require recipients."""
        with pytest.raises(ValidationError):
            SendMessage(number="+1")  # type: ignore[call-arg]

    def test_rejects_unknown_text_mode(self):
        """Should reject an unknown text mode."""
        with pytest.raises(ValidationError):
            SendMessage(number="+1", recipients=["+2"], text_mode="bold")  # type: ignore[arg-type]

    def test_nested_mentions(self):
        """Should parse nested mentions."""
        message = SendMessage.model_validate(
            {
                "number": "+1",
                "recipients": ["+2"],
                "message": "hi @bob",
                "mentions": [{"author": "+3", "start": 3, "length": 4}],
            }
        )
        assert message.mentions[0].author == "+3"


class TestRequestDefaults:
    """Tests for request model defaults."""

    def test_group_permissions_defaults(self):
        """Should default to admin-only edits and open messaging."""
        permissions = GroupPermissions()
        assert permissions.add_members == "only-admins"
        assert permissions.edit_group == "only-admins"
        assert permissions.send_messages == "every-member"

    def test_create_group_requires_name_and_members(self):
        """Should require members alongside the name."""
        with pytest.raises(ValidationError):
            CreateGroupRequest(name="Team")  # type: ignore[call-arg]

    def test_unregister_defaults(self):
        """Should default both unregister flags to False."""
        assert UnregisterNumberRequest().model_dump() == {
            "delete_account": False,
            "delete_local_data": False,
        }

    def test_account_settings_all_optional(self):
        """Should serialize to an empty dict when nothing is set."""
        assert UpdateAccountSettingsRequest().model_dump(exclude_none=True) == {}

    def test_receipt_type(self):
        """Should accept only read and viewed receipts."""
        Receipt(receipt_type="read", recipient="+2", timestamp=1)
        with pytest.raises(ValidationError):
            Receipt(receipt_type="seen", recipient="+2", timestamp=1)  # type: ignore[arg-type]


class TestResponseModels:
    """Tests for response model parsing."""

    def test_about(self):
        """Should parse capabilities by endpoint."""
        about = About.model_validate(
            {
                "build": 2,
                "mode": "json-rpc",
                "version": "0.90",
                "versions": ["v1", "v2"],
                "capabilities": {"v2/send": ["quotes", "mentions"]},
            }
        )
        assert about.capabilities["v2/send"] == ["quotes", "mentions"]

    def test_unknown_fields_are_kept(self):
        """Should keep fields the model does not declare."""
        contact = Contact.model_validate({"number": "+2", "new_field": "x"})
        assert contact.model_extra == {"new_field": "x"}

    def test_sticker_pack_defaults(self):
        """Should default installed to False."""
        pack = StickerPack.model_validate({"pack_id": "abc"})
        assert pack.installed is False


class TestErrorEnvelope:
    """Tests for the error envelope."""

    def test_message(self):
        """Should read the error message."""
        assert ErrorEnvelope.model_validate_json('{"error": "boom"}').error == "boom"

    def test_missing_message(self):
        """Should allow a missing error field."""
        assert ErrorEnvelope.model_validate_json("{}").error is None

    def test_rejects_non_object(self):
        """Should reject a body that is not an object."""
        with pytest.raises(ValidationError):
            ErrorEnvelope.model_validate_json('"boom"')
