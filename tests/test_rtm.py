"""Tests for the RTM client that do not need a live websocket."""

import json
from unittest.mock import MagicMock

import pytest

from slackkit.errors import RtmError
from slackkit.rtm.client import RtmClient


class FakeWebSocket:
    def __init__(self):
        self.closed = False
        self.sent = []

    async def send_str(self, data):
        self.sent.append(json.loads(data))

    async def close(self):
        self.closed = True


@pytest.mark.asyncio
async def test_send_requires_connection():
    client = RtmClient(MagicMock())

    assert not client.connected
    with pytest.raises(RtmError):
        await client.send_typing("C1")


@pytest.mark.asyncio
async def test_events_requires_connection():
    client = RtmClient(MagicMock())

    with pytest.raises(RtmError):
        async for _ in client.events():
            pass


@pytest.mark.asyncio
async def test_send_typing_uses_increasing_ids():
    client = RtmClient(MagicMock())
    ws = FakeWebSocket()
    client._ws = ws

    assert await client.send_typing("C1") == 1
    assert await client.send({"type": "ping"}) == 2

    assert ws.sent == [
        {"id": 1, "type": "typing", "channel": "C1"},
        {"id": 2, "type": "ping"},
    ]


@pytest.mark.asyncio
async def test_close_closes_websocket():
    client = RtmClient(MagicMock())
    ws = FakeWebSocket()
    client._ws = ws

    await client.close()

    assert ws.closed
    assert not client.connected
