"""
Users, auth and rtm.connect API methods
"""

from typing import Optional

from slackkit.models.conversations import AuthTestResponse, ConnectResponse, User, UserResponse
from .args import build_args
from .client import SlackApiClient


class UsersApi:
    def __init__(self, client: SlackApiClient):
        self._client = client

    async def info(self, user_id: str, include_locale: Optional[bool] = None) -> User:
        """Get information about a user"""
        response = await self._client.get("users.info", build_args({
            "user": user_id,
            "include_locale": include_locale
        }), UserResponse)
        return response.user


class AuthApi:
    def __init__(self, client: SlackApiClient):
        self._client = client

    async def test(self) -> AuthTestResponse:
        """Check authentication and identify the token's user and team"""
        return await self._client.post("auth.test", None, AuthTestResponse)


class RtmApi:
    def __init__(self, client: SlackApiClient):
        self._client = client

    async def connect(self, batch_presence_aware: Optional[bool] = None,
                      presence_sub: Optional[bool] = None) -> ConnectResponse:
        """Start a Real Time Messaging session; returns the websocket URL"""
        return await self._client.get("rtm.connect", build_args({
            "batch_presence_aware": batch_presence_aware,
            "presence_sub": presence_sub
        }), ConnectResponse)
