"""
Slack Web API bindings
"""

from .api import SlackApi
from .args import build_args, encode_args, encode_value
from .chat import ChatApi
from .client import SlackApiClient
from .conversations import ConversationsApi
from .dialog import DialogApi
from .usergroup_users import UserGroupUsersApi
from .usergroups import UserGroupsApi
from .users import AuthApi, RtmApi, UsersApi
from .views import ViewsApi

__all__ = [
    "SlackApi",
    "SlackApiClient",
    "build_args",
    "encode_args",
    "encode_value",
    "AuthApi",
    "ChatApi",
    "ConversationsApi",
    "DialogApi",
    "RtmApi",
    "UserGroupsApi",
    "UserGroupUsersApi",
    "UsersApi",
    "ViewsApi"
]
