"""
Conversation, user and identity models
"""

from typing import List, Optional

from pydantic import Field

from .base import SlackModel, SlackResponse
from .messages import MessageEvent


class Topic(SlackModel):
    value: str = ""
    creator: Optional[str] = None
    last_set: Optional[int] = None


class Conversation(SlackModel):
    id: str
    name: Optional[str] = None
    is_channel: bool = False
    is_group: bool = False
    is_im: bool = False
    is_mpim: bool = False
    is_private: bool = False
    is_archived: bool = False
    is_member: bool = False
    user: Optional[str] = None  # the other party of an IM
    created: Optional[int] = None
    creator: Optional[str] = None
    topic: Optional[Topic] = None
    purpose: Optional[Topic] = None
    num_members: Optional[int] = None


class ConversationResponse(SlackResponse):
    channel: Conversation


class ConversationListResponse(SlackResponse):
    channels: List[Conversation] = []


class ConversationMembersResponse(SlackResponse):
    members: List[str] = []


class ConversationHistoryResponse(SlackResponse):
    messages: List[MessageEvent] = []
    has_more: bool = False


class UserProfile(SlackModel):
    real_name: Optional[str] = None
    display_name: Optional[str] = None
    email: Optional[str] = None
    title: Optional[str] = None
    status_text: Optional[str] = None


class User(SlackModel):
    id: str
    team_id: Optional[str] = None
    name: Optional[str] = None
    real_name: Optional[str] = None
    deleted: bool = False
    is_bot: bool = False
    is_admin: bool = False
    tz: Optional[str] = None
    profile: Optional[UserProfile] = None


class UserResponse(SlackResponse):
    user: User


class AuthTestResponse(SlackResponse):
    url: Optional[str] = None
    team: Optional[str] = None
    user: Optional[str] = None
    team_id: Optional[str] = None
    user_id: Optional[str] = None
    bot_id: Optional[str] = None


class ConnectSelf(SlackModel):
    id: str
    name: str


class ConnectTeam(SlackModel):
    id: str
    name: Optional[str] = None
    domain: Optional[str] = None


class ConnectResponse(SlackResponse):
    """rtm.connect: the websocket URL plus the connecting bot's identity"""

    url: str
    self_: ConnectSelf = Field(alias="self")
    team: Optional[ConnectTeam] = None
