"""
User group models
"""

from typing import List, Optional

from .base import SlackModel, SlackResponse


class UserGroupPrefs(SlackModel):
    channels: List[str] = []
    groups: List[str] = []


class UserGroup(SlackModel):
    id: str
    team_id: Optional[str] = None
    is_usergroup: bool = True
    is_subteam: Optional[bool] = None
    is_external: bool = False
    name: Optional[str] = None
    description: Optional[str] = None
    handle: Optional[str] = None
    auto_type: Optional[str] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    deleted_by: Optional[str] = None
    date_create: Optional[int] = None
    date_update: Optional[int] = None
    date_delete: Optional[int] = None
    prefs: Optional[UserGroupPrefs] = None
    users: Optional[List[str]] = None
    user_count: Optional[int] = None

    @property
    def is_disabled(self) -> bool:
        return bool(self.date_delete)


class UserGroupResponse(SlackResponse):
    usergroup: UserGroup


class UserGroupListResponse(SlackResponse):
    usergroups: List[UserGroup] = []


class UserGroupUsersResponse(SlackResponse):
    users: List[str] = []
