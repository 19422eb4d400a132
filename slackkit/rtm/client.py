"""
Real Time Messaging client
Websocket connection used to receive events and send typing indicators
"""

import itertools
import json
import logging
from typing import Any, AsyncIterator, Dict, Optional

import aiohttp

from slackkit.errors import RtmError
from slackkit.models.conversations import ConnectResponse
from slackkit.web.api import SlackApi

logger = logging.getLogger(__name__)


class RtmClient:
    """Simple RTM websocket client"""

    def __init__(self, api: SlackApi):
        self.api = api
        self.connection: Optional[ConnectResponse] = None
        self._session: Optional[aiohttp.ClientSession] = None
        self._ws: Optional[aiohttp.ClientWebSocketResponse] = None
        self._ids = itertools.count(1)

    @property
    def connected(self) -> bool:
        return self._ws is not None and not self._ws.closed

    async def connect(self) -> ConnectResponse:
        """Call rtm.connect and open the returned websocket URL"""
        self.connection = await self.api.rtm.connect()
        self._session = aiohttp.ClientSession()
        try:
            self._ws = await self._session.ws_connect(self.connection.url)
        except aiohttp.ClientError as e:
            await self._session.close()
            self._session = None
            raise RtmError(f"Failed to open RTM websocket: {e}") from e

        logger.info(f"Connected to RTM as {self.connection.self_.name} ({self.connection.self_.id})")
        return self.connection

    async def send(self, event: Dict[str, Any]) -> int:
        """Send an event over the websocket; returns the id it was sent with"""
        if not self.connected:
            raise RtmError("RTM client is not connected")

        message_id = next(self._ids)
        await self._ws.send_str(json.dumps({"id": message_id, **event}))
        return message_id

    async def send_typing(self, channel: str) -> int:
        """Show the bot as typing in a channel"""
        return await self.send({"type": "typing", "channel": channel})

    async def events(self) -> AsyncIterator[Dict[str, Any]]:
        """Yield decoded events until the websocket closes"""
        if not self.connected:
            raise RtmError("RTM client is not connected")

        async for msg in self._ws:
            if msg.type == aiohttp.WSMsgType.TEXT:
                yield json.loads(msg.data)
            elif msg.type == aiohttp.WSMsgType.ERROR:
                logger.error(f"RTM websocket error: {self._ws.exception()}")
                break

    async def close(self):
        """Close the websocket and its session"""
        if self._ws is not None:
            await self._ws.close()
            self._ws = None
        if self._session is not None:
            await self._session.close()
            self._session = None
