"""
Dialog API
"""

from slackkit.models.dialogs import Dialog
from .args import build_args
from .client import SlackApiClient


class DialogApi:
    """Wrapper for dialog.open"""

    def __init__(self, client: SlackApiClient):
        self._client = client

    async def open(self, trigger_id: str, dialog: Dialog) -> None:
        """Open a dialog with a user, exchanging a trigger_id from an interaction"""
        await self._client.post("dialog.open", build_args({
            "dialog": dialog,
            "trigger_id": trigger_id
        }))
