"""Pydantic models for groups."""

from typing import Literal

from pydantic import BaseModel, Field

PermissionLevel = Literal["only-admins", "every-member"]


class GroupPermissions(BaseModel):
    add_members: PermissionLevel = "only-admins"
    edit_group: PermissionLevel = "only-admins"
    send_messages: PermissionLevel = "every-member"


class GroupEntry(BaseModel):
    """Group as returned by ``/v1/groups/{number}``."""

    id: str | None = None
    internal_id: str | None = None
    name: str | None = None
    description: str | None = None
    members: list[str] = Field(default_factory=list)
    admins: list[str] = Field(default_factory=list)
    pending_invites: list[str] = Field(default_factory=list)
    pending_requests: list[str] = Field(default_factory=list)
    blocked: bool = False
    invite_link: str | None = None

    model_config = {"extra": "allow"}


class CreateGroupRequest(BaseModel):
    """Payload for creating a group.

    Required fields:
        name: Group name
        members: Initial members (phone numbers or UUIDs)
    """

    name: str
    members: list[str]
    description: str | None = None
    permissions: GroupPermissions | None = None
    expiration_time: int | None = None
    group_link: str | None = None


class CreateGroupResponse(BaseModel):
    id: str | None = None

    model_config = {"extra": "allow"}


class UpdateGroupRequest(BaseModel):
    """Fields to change on an existing group. Only provided fields are sent."""

    name: str | None = None
    description: str | None = None
    base64_avatar: str | None = None
    expiration_time: int | None = None
    group_link: str | None = None
    permissions: GroupPermissions | None = None


class ChangeGroupAdminsRequest(BaseModel):
    admins: list[str]


class ChangeGroupMembersRequest(BaseModel):
    members: list[str]
