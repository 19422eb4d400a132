"""
slackkit
Typed async client for the Slack Web and RTM APIs, with a small bot framework
"""

from .errors import RtmError, SlackApiError, SlackError
from .config.settings import configure_logging, settings
from .blocks import markdown_to_blocks
from .models.dialogs import Dialog
from .models.usergroups import UserGroup
from .models.views import HomeViewDefinition, ModalViewDefinition, View, ViewResponse
from .web.api import SlackApi
from .web.client import SlackApiClient
from .rtm.client import RtmClient
from .bot import BotMessage, Hub, SlackBot, SlackMessage

__version__ = "0.1.0"

__all__ = [
    "SlackError",
    "SlackApiError",
    "RtmError",
    "configure_logging",
    "settings",
    "markdown_to_blocks",
    "Dialog",
    "UserGroup",
    "HomeViewDefinition",
    "ModalViewDefinition",
    "View",
    "ViewResponse",
    "SlackApi",
    "SlackApiClient",
    "RtmClient",
    "BotMessage",
    "Hub",
    "SlackBot",
    "SlackMessage"
]
