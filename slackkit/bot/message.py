"""Messages received and sent by a SlackBot"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Awaitable, Callable, List, Optional, Union

import pytz

from slackkit.blocks.blocks import Block
from slackkit.models.conversations import User
from slackkit.models.messages import Attachment, MessageEvent

if TYPE_CHECKING:
    from .bot import SlackBot


def ts_to_datetime(ts: Optional[str]) -> Optional[datetime]:
    """Convert a Slack message timestamp ("1503435956.000247") to a UTC datetime"""
    if not ts:
        return None
    try:
        return datetime.fromtimestamp(float(ts), pytz.UTC)
    except (ValueError, OverflowError, OSError):
        return None


@dataclass
class Hub:
    """The conversation (channel, group or IM) a message belongs to"""
    id: str
    name: Optional[str] = None
    is_im: bool = False

    @classmethod
    def from_event(cls, event: MessageEvent) -> "Hub":
        channel = event.channel or ""
        return cls(id=channel, is_im=event.channel_type == "im" or channel.startswith("D"))


@dataclass
class BotMessage:
    """A message for the bot to send

    Set ``hub`` to post to a conversation, or let ``SlackMessage.reply_with``
    fill in ``reply_to`` so the reply lands next to (or under) the original.
    """
    text: Optional[str] = None
    blocks: Optional[List[Block]] = None
    attachments: List[Attachment] = field(default_factory=list)
    hub: Optional[Hub] = None
    reply_to: Optional["SlackMessage"] = None
    create_thread: bool = False
    reply_broadcast: bool = False


ReplyFactory = Callable[[], Awaitable[Optional[BotMessage]]]


class SlackMessage:
    """A message received by the bot"""

    def __init__(self, message_event: MessageEvent, bot: "SlackBot",
                 hub: Optional[Hub] = None, user: Optional[User] = None):
        self._bot = bot
        self.message_event = message_event
        self.hub = hub or Hub.from_event(message_event)
        self.user = user
        self.text: str = message_event.text or ""
        self.ts: Optional[str] = message_event.ts
        self.thread_ts: Optional[str] = message_event.thread_ts
        self.attachments: List[Attachment] = list(message_event.attachments)

    @property
    def timestamp(self) -> Optional[datetime]:
        return ts_to_datetime(self.ts)

    @property
    def thread_timestamp(self) -> Optional[datetime]:
        return ts_to_datetime(self.thread_ts)

    @property
    def is_in_thread(self) -> bool:
        return self.thread_ts is not None

    @property
    def mentions_bot(self) -> bool:
        """True if the text names the bot by id or name, or the message is a DM"""
        text = self.text.lower()
        for token in (self._bot.id, self._bot.name):
            if token and token.lower() in text:
                return True
        return self.hub.is_im

    async def reply_with(self, reply: Union[str, BotMessage, ReplyFactory],
                         create_thread: bool = False):
        """
        Reply to this message

        Args:
            reply: Reply text, a BotMessage, or an async callable producing a
                BotMessage. A callable runs while the bot shows as typing; if
                it returns None nothing is sent.
            create_thread: Start a thread under this message if it is not
                already in one
        """
        if isinstance(reply, str):
            reply = BotMessage(text=reply)
        elif callable(reply):
            await self._reply_while_typing(reply, create_thread)
            return

        if reply is None:
            raise ValueError("reply message is required")

        reply.reply_to = self
        reply.create_thread = create_thread
        await self._bot.send(reply)

    async def _reply_while_typing(self, create_reply: ReplyFactory, create_thread: bool):
        async def build_and_send():
            message = await create_reply()
            if message is not None:
                await self.reply_with(message, create_thread)

        await self._bot.while_typing(self.hub.id, build_and_send)

    def __repr__(self) -> str:
        return f"SlackMessage(hub={self.hub.id!r}, ts={self.ts!r}, text={self.text!r})"
