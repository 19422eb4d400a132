"""
Message, attachment and chat response models
"""

from typing import Any, Dict, List, Optional

from .base import SlackModel, SlackResponse


class AttachmentField(SlackModel):
    title: str
    value: str
    short: bool = False


class Attachment(SlackModel):
    fallback: Optional[str] = None
    color: Optional[str] = None
    pretext: Optional[str] = None
    author_name: Optional[str] = None
    author_link: Optional[str] = None
    title: Optional[str] = None
    title_link: Optional[str] = None
    text: Optional[str] = None
    fields: Optional[List[AttachmentField]] = None
    image_url: Optional[str] = None
    thumb_url: Optional[str] = None
    footer: Optional[str] = None
    ts: Optional[str] = None


class Reaction(SlackModel):
    name: str
    count: int = 0
    users: List[str] = []


class MessageEvent(SlackModel):
    """A message as delivered by the RTM stream or conversations.history"""

    type: str = "message"
    subtype: Optional[str] = None
    channel: Optional[str] = None
    user: Optional[str] = None
    bot_id: Optional[str] = None
    username: Optional[str] = None
    text: str = ""
    ts: Optional[str] = None
    thread_ts: Optional[str] = None
    reply_count: Optional[int] = None
    attachments: List[Attachment] = []
    blocks: List[Dict[str, Any]] = []
    reactions: List[Reaction] = []
    channel_type: Optional[str] = None


class PostMessageResponse(SlackResponse):
    channel: str
    ts: str
    message: Optional[MessageEvent] = None


class MessageTsResponse(SlackResponse):
    channel: Optional[str] = None
    ts: Optional[str] = None
    text: Optional[str] = None


class PostEphemeralResponse(SlackResponse):
    message_ts: str
