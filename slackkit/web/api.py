"""
SlackApi facade
One object exposing every Web API method group over a shared transport
"""

from typing import Optional

import httpx

from .chat import ChatApi
from .client import SlackApiClient
from .conversations import ConversationsApi
from .dialog import DialogApi
from .usergroup_users import UserGroupUsersApi
from .usergroups import UserGroupsApi
from .users import AuthApi, RtmApi, UsersApi
from .views import ViewsApi


class SlackApi:
    """Typed access to the Slack Web API

    Example:
        async with SlackApi(token) as api:
            group = await api.usergroups.create("Marketing", handle="marketing")
    """

    def __init__(self, token: Optional[str] = None,
                 base_url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 http_client: Optional[httpx.AsyncClient] = None,
                 client: Optional[SlackApiClient] = None):
        self.client = client or SlackApiClient(
            token=token,
            base_url=base_url,
            timeout=timeout,
            http_client=http_client
        )

        self.auth = AuthApi(self.client)
        self.chat = ChatApi(self.client)
        self.conversations = ConversationsApi(self.client)
        self.dialog = DialogApi(self.client)
        self.rtm = RtmApi(self.client)
        self.usergroups = UserGroupsApi(self.client)
        self.usergroup_users = UserGroupUsersApi(self.client)
        self.users = UsersApi(self.client)
        self.views = ViewsApi(self.client)

    async def close(self):
        await self.client.close()

    async def __aenter__(self) -> "SlackApi":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
