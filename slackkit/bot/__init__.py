"""
Bot framework: incoming SlackMessage objects and reply helpers
"""

from .bot import SlackBot
from .message import BotMessage, Hub, SlackMessage, ts_to_datetime

__all__ = [
    "SlackBot",
    "BotMessage",
    "Hub",
    "SlackMessage",
    "ts_to_datetime"
]
