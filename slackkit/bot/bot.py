"""
SlackBot
Receives messages over RTM and sends replies through the Web API
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, List, Optional, TypeVar

import aiohttp

from slackkit.config.settings import settings
from slackkit.errors import RtmError, SlackApiError
from slackkit.models.conversations import User
from slackkit.models.messages import MessageEvent, PostMessageResponse
from slackkit.rtm.client import RtmClient
from slackkit.web.api import SlackApi
from .message import BotMessage, Hub, SlackMessage

logger = logging.getLogger(__name__)

T = TypeVar("T")
MessageHandler = Callable[[SlackMessage], Awaitable[None]]


class SlackBot:
    """Minimal bot built on the Web API and an RTM connection"""

    def __init__(self, api: SlackApi, rtm: Optional[RtmClient] = None,
                 typing_interval: Optional[float] = None):
        self.api = api
        self.rtm = rtm or RtmClient(api)
        self.typing_interval = typing_interval or settings.typing_interval

        # Filled in by connect()
        self.id: Optional[str] = None
        self.name: Optional[str] = None

        self._handlers: List[MessageHandler] = []
        self._users: Dict[str, User] = {}

    async def connect(self):
        """Open the RTM connection and learn the bot's own identity"""
        connection = await self.rtm.connect()
        self.id = connection.self_.id
        self.name = connection.self_.name

    def on_message(self, handler: MessageHandler) -> MessageHandler:
        """Register a coroutine called for every incoming message

        Can be used as a decorator.
        """
        self._handlers.append(handler)
        return handler

    async def send(self, message: BotMessage) -> PostMessageResponse:
        """
        Post a BotMessage

        The target conversation comes from ``message.hub`` or, for replies,
        the replied-to message's hub. Replies to a threaded message stay in
        that thread; ``create_thread`` starts a thread under the original.
        """
        reply_to = message.reply_to
        hub = message.hub or (reply_to.hub if reply_to else None)
        if hub is None:
            raise ValueError("BotMessage needs a hub or a message to reply to")

        thread_ts = None
        if reply_to is not None:
            if reply_to.is_in_thread:
                thread_ts = reply_to.thread_ts
            elif message.create_thread:
                thread_ts = reply_to.ts

        return await self.api.chat.post_message(
            channel=hub.id,
            text=message.text,
            blocks=message.blocks,
            attachments=message.attachments or None,
            thread_ts=thread_ts,
            reply_broadcast=True if thread_ts and message.reply_broadcast else None
        )

    async def while_typing(self, channel_id: str, action: Callable[[], Awaitable[T]]) -> T:
        """Run ``action`` while showing the bot as typing in a channel"""
        typing = asyncio.create_task(self._keep_typing(channel_id))
        try:
            return await action()
        finally:
            typing.cancel()
            # The indicator never replaces the action's own result or error
            outcome, = await asyncio.gather(typing, return_exceptions=True)
            if isinstance(outcome, Exception):
                logger.warning(f"Typing indicator for {channel_id} failed: {outcome!r}")

    async def _keep_typing(self, channel_id: str):
        while True:
            try:
                await self.rtm.send_typing(channel_id)
            except (RtmError, aiohttp.ClientError, ConnectionError) as e:
                logger.debug(f"Could not send typing indicator to {channel_id}: {e}")
            await asyncio.sleep(self.typing_interval)

    async def get_user(self, user_id: str) -> User:
        """Look up a user, caching the result for the life of the bot"""
        if user_id not in self._users:
            self._users[user_id] = await self.api.users.info(user_id)
        return self._users[user_id]

    async def _to_slack_message(self, event: MessageEvent) -> SlackMessage:
        user = None
        if event.user:
            try:
                user = await self.get_user(event.user)
            except SlackApiError as e:
                logger.warning(f"Could not look up user {event.user}: {e.error}")
        return SlackMessage(event, self, hub=Hub.from_event(event), user=user)

    async def handle_event(self, event: dict):
        """Dispatch one RTM event to the registered message handlers"""
        if event.get("type") != "message" or event.get("subtype"):
            return

        message_event = MessageEvent.model_validate(event)
        if message_event.bot_id or (self.id and message_event.user == self.id):
            return

        message = await self._to_slack_message(message_event)
        for handler in self._handlers:
            try:
                await handler(message)
            except Exception as e:
                logger.exception(f"Message handler {getattr(handler, '__name__', handler)} failed: {e}")

    async def run(self):
        """Connect if needed and process events until the connection closes"""
        if not self.rtm.connected:
            await self.connect()

        try:
            async for event in self.rtm.events():
                await self.handle_event(event)
        finally:
            await self.rtm.close()
