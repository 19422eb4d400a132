"""
Conversations API
Read channel information, history, members and thread replies
"""

import logging
from typing import Optional

from slackkit.models.conversations import (
    Conversation,
    ConversationHistoryResponse,
    ConversationListResponse,
    ConversationMembersResponse,
    ConversationResponse,
)
from .args import build_args
from .client import SlackApiClient

logger = logging.getLogger(__name__)


class ConversationsApi:
    """Wrapper for the conversations.* methods"""

    def __init__(self, client: SlackApiClient):
        self._client = client

    async def list(self, cursor: Optional[str] = None,
                   limit: Optional[int] = None,
                   types: Optional[str] = None,
                   exclude_archived: Optional[bool] = None) -> ConversationListResponse:
        """
        List conversations in the workspace

        Args:
            cursor: Pagination cursor from a previous page
            limit: Maximum number of conversations per page
            types: Comma-separated conversation types, e.g. "public_channel,private_channel"
            exclude_archived: Leave archived channels out of the list
        """
        return await self._client.get("conversations.list", build_args({
            "cursor": cursor,
            "limit": limit,
            "types": types,
            "exclude_archived": exclude_archived
        }), ConversationListResponse)

    async def history(self, channel: str,
                      cursor: Optional[str] = None,
                      limit: Optional[int] = None,
                      oldest: Optional[str] = None,
                      latest: Optional[str] = None,
                      inclusive: Optional[bool] = None) -> ConversationHistoryResponse:
        """Fetch a page of a conversation's message history"""
        return await self._client.get("conversations.history", build_args({
            "channel": channel,
            "cursor": cursor,
            "limit": limit,
            "oldest": oldest,
            "latest": latest,
            "inclusive": inclusive
        }), ConversationHistoryResponse)

    async def info(self, channel: str,
                   include_num_members: Optional[bool] = None) -> Conversation:
        """Get information about a conversation"""
        response = await self._client.get("conversations.info", build_args({
            "channel": channel,
            "include_num_members": include_num_members
        }), ConversationResponse)
        return response.channel

    async def members(self, channel: str,
                      cursor: Optional[str] = None,
                      limit: Optional[int] = None) -> ConversationMembersResponse:
        """Get a page of a conversation's member IDs"""
        return await self._client.get("conversations.members", build_args({
            "channel": channel,
            "cursor": cursor,
            "limit": limit
        }), ConversationMembersResponse)

    async def replies(self, channel: str, ts: str,
                      cursor: Optional[str] = None,
                      limit: Optional[int] = None) -> ConversationHistoryResponse:
        """Get a page of a thread's messages, parent first"""
        return await self._client.get("conversations.replies", build_args({
            "channel": channel,
            "ts": ts,
            "cursor": cursor,
            "limit": limit
        }), ConversationHistoryResponse)

    async def resolve_channel_id(self, channel: str) -> str:
        """
        Convert a channel name to an ID if needed

        Args:
            channel: Channel name (with or without #) or channel ID

        Returns:
            Channel ID

        Raises:
            ValueError: No channel with that name is visible to the token
        """
        # Already an ID
        if channel.startswith(('C', 'D', 'G')):
            return channel

        channel_name = channel.lstrip('#')

        cursor = None
        while True:
            page = await self.list(cursor=cursor, types="public_channel,private_channel")
            for conversation in page.channels:
                if conversation.name == channel_name:
                    return conversation.id

            cursor = page.next_cursor
            if not cursor:
                break

        logger.debug(f"Channel '{channel_name}' not found")
        raise ValueError(f"Channel '{channel_name}' not found")
