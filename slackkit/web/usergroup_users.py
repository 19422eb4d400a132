"""
User Group membership API
"""

from typing import Iterable, List, Optional

from slackkit.models.usergroups import UserGroup, UserGroupResponse, UserGroupUsersResponse
from .args import build_args
from .client import SlackApiClient


class UserGroupUsersApi:
    """Wrapper for the usergroups.users.* methods"""

    def __init__(self, client: SlackApiClient):
        self._client = client

    async def list(self, usergroup_id: str,
                   include_disabled: Optional[bool] = None) -> List[str]:
        """List the IDs of all users in a User Group"""
        response = await self._client.get("usergroups.users.list", build_args({
            "usergroup": usergroup_id,
            "include_disabled": include_disabled
        }), UserGroupUsersResponse)
        return response.users

    async def update(self, usergroup_id: str, user_ids: Iterable[str],
                     include_count: Optional[bool] = None) -> UserGroup:
        """
        Replace the full list of users in a User Group

        Args:
            usergroup_id: ID of the User Group to update
            user_ids: IDs of the users that make up the group
            include_count: Include the number of users in the User Group
        """
        response = await self._client.post("usergroups.users.update", build_args({
            "usergroup": usergroup_id,
            "users": ",".join(user_ids),
            "include_count": include_count
        }), UserGroupResponse)
        return response.usergroup
