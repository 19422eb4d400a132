"""
Chat API
Post, update and delete messages
"""

from typing import List, Optional

from slackkit.blocks.blocks import Block
from slackkit.models.messages import (
    Attachment,
    MessageTsResponse,
    PostEphemeralResponse,
    PostMessageResponse,
)
from .args import build_args
from .client import SlackApiClient


class ChatApi:
    """Wrapper for the chat.* methods"""

    def __init__(self, client: SlackApiClient):
        self._client = client

    async def post_message(self, channel: str,
                           text: Optional[str] = None,
                           blocks: Optional[List[Block]] = None,
                           attachments: Optional[List[Attachment]] = None,
                           thread_ts: Optional[str] = None,
                           reply_broadcast: Optional[bool] = None,
                           mrkdwn: Optional[bool] = None,
                           unfurl_links: Optional[bool] = None,
                           unfurl_media: Optional[bool] = None,
                           username: Optional[str] = None,
                           icon_emoji: Optional[str] = None,
                           icon_url: Optional[str] = None) -> PostMessageResponse:
        """
        Send a message to a channel

        Args:
            channel: Channel, private group or IM channel ID to send to
            text: Message text; the notification fallback when blocks are given
            blocks: Block Kit layout blocks
            attachments: Legacy secondary attachments
            thread_ts: Timestamp of the parent message to reply in its thread
            reply_broadcast: Also show a thread reply in the channel
            mrkdwn: Disable Slack markup parsing by setting to false

        Returns:
            The channel, ts and echoed message
        """
        return await self._client.post("chat.postMessage", build_args({
            "channel": channel,
            "text": text,
            "blocks": blocks,
            "attachments": attachments,
            "thread_ts": thread_ts,
            "reply_broadcast": reply_broadcast,
            "mrkdwn": mrkdwn,
            "unfurl_links": unfurl_links,
            "unfurl_media": unfurl_media,
            "username": username,
            "icon_emoji": icon_emoji,
            "icon_url": icon_url
        }), PostMessageResponse)

    async def post_ephemeral(self, channel: str, user: str,
                             text: Optional[str] = None,
                             blocks: Optional[List[Block]] = None,
                             attachments: Optional[List[Attachment]] = None,
                             thread_ts: Optional[str] = None) -> str:
        """Send a message only visible to one user; returns its message_ts"""
        response = await self._client.post("chat.postEphemeral", build_args({
            "channel": channel,
            "user": user,
            "text": text,
            "blocks": blocks,
            "attachments": attachments,
            "thread_ts": thread_ts
        }), PostEphemeralResponse)
        return response.message_ts

    async def update(self, channel: str, ts: str,
                     text: Optional[str] = None,
                     blocks: Optional[List[Block]] = None,
                     attachments: Optional[List[Attachment]] = None,
                     reply_broadcast: Optional[bool] = None) -> MessageTsResponse:
        """Update an existing message"""
        return await self._client.post("chat.update", build_args({
            "channel": channel,
            "ts": ts,
            "text": text,
            "blocks": blocks,
            "attachments": attachments,
            "reply_broadcast": reply_broadcast
        }), MessageTsResponse)

    async def delete(self, channel: str, ts: str,
                     as_user: Optional[bool] = None) -> None:
        """Delete a message"""
        await self._client.post("chat.delete", build_args({
            "channel": channel,
            "ts": ts,
            "as_user": as_user
        }))
