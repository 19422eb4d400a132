"""
User Groups API
Create, update, enable, disable and list User Groups
"""

from typing import Iterable, List, Optional

from slackkit.models.usergroups import UserGroup, UserGroupListResponse, UserGroupResponse
from .args import build_args
from .client import SlackApiClient


class UserGroupsApi:
    """Wrapper for the usergroups.* methods"""

    def __init__(self, client: SlackApiClient):
        self._client = client

    async def create(self, name: str,
                     channel_ids: Optional[Iterable[str]] = None,
                     description: Optional[str] = None,
                     handle: Optional[str] = None,
                     include_count: Optional[bool] = None) -> UserGroup:
        """
        Create a User Group

        Args:
            name: A name for the User Group. Must be unique among User Groups.
            channel_ids: Channel IDs the User Group uses as a default
            description: A short description of the User Group
            handle: A mention handle. Must be unique among channels, users and User Groups.
            include_count: Include the number of users in the User Group

        Returns:
            The created User Group
        """
        response = await self._client.post("usergroups.create", build_args({
            "name": name,
            "channels": _join_or_none(channel_ids),
            "description": description,
            "handle": handle,
            "include_count": include_count
        }), UserGroupResponse)
        return response.usergroup

    async def disable(self, usergroup_id: str,
                      include_count: Optional[bool] = None) -> UserGroup:
        """
        Disable an existing User Group

        Args:
            usergroup_id: ID of the User Group to disable
            include_count: Include the number of users in the User Group
        """
        response = await self._client.post("usergroups.disable", build_args({
            "usergroup": usergroup_id,
            "include_count": include_count
        }), UserGroupResponse)
        return response.usergroup

    async def enable(self, usergroup_id: str,
                     include_count: Optional[bool] = None) -> UserGroup:
        """
        Enable a User Group which was previously disabled

        Args:
            usergroup_id: ID of the User Group to enable
            include_count: Include the number of users in the User Group
        """
        response = await self._client.post("usergroups.enable", build_args({
            "usergroup": usergroup_id,
            "include_count": include_count
        }), UserGroupResponse)
        return response.usergroup

    async def list(self, include_count: Optional[bool] = None,
                   include_disabled: Optional[bool] = None,
                   include_users: Optional[bool] = None) -> List[UserGroup]:
        """
        List all User Groups in the team, optionally including disabled ones

        Args:
            include_count: Include the number of users in each User Group
            include_disabled: Include disabled User Groups
            include_users: Include the list of users for each User Group
        """
        response = await self._client.get("usergroups.list", build_args({
            "include_count": include_count,
            "include_disabled": include_disabled,
            "include_users": include_users
        }), UserGroupListResponse)
        return response.usergroups

    async def update(self, usergroup_id: str,
                     channel_ids: Optional[Iterable[str]] = None,
                     description: Optional[str] = None,
                     handle: Optional[str] = None,
                     include_count: Optional[bool] = None,
                     name: Optional[str] = None) -> UserGroup:
        """
        Update the properties of an existing User Group

        Args:
            usergroup_id: ID of the User Group to update
            channel_ids: Channel IDs the User Group uses as a default
            description: A short description of the User Group
            handle: A mention handle. Must be unique among channels, users and User Groups.
            include_count: Include the number of users in the User Group
            name: A name for the User Group. Must be unique among User Groups.
        """
        response = await self._client.post("usergroups.update", build_args({
            "usergroup": usergroup_id,
            "channels": _join_or_none(channel_ids),
            "description": description,
            "handle": handle,
            "include_count": include_count,
            "name": name
        }), UserGroupResponse)
        return response.usergroup


def _join_or_none(values: Optional[Iterable[str]]) -> Optional[str]:
    # None stays unset; an empty iterable clears the list
    return None if values is None else ",".join(values)
