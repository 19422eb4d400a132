"""
Views API
Open, push, publish and update modal and App Home views
"""

from typing import Optional

from slackkit.models.views import HomeViewDefinition, ViewDefinition, ViewResponse
from .args import build_args
from .client import SlackApiClient


class ViewsApi:
    """Wrapper for the views.* methods"""

    def __init__(self, client: SlackApiClient):
        self._client = client

    async def open(self, trigger_id: str, view: ViewDefinition) -> ViewResponse:
        """
        Open a view for a user

        Args:
            trigger_id: Exchange a trigger to post to the user
            view: The view definition to open
        """
        return await self._client.post("views.open", build_args({
            "trigger_id": trigger_id,
            "view": view
        }), ViewResponse)

    async def publish(self, user_id: str, view: HomeViewDefinition,
                      hash: Optional[str] = None) -> ViewResponse:
        """
        Publish a static view for a user's App Home tab

        Args:
            user_id: ID of the user you want to publish a view to
            view: The home tab view definition
            hash: The hash of the view being replaced, to protect against races
        """
        return await self._client.post("views.publish", build_args({
            "user_id": user_id,
            "view": view,
            "hash": hash
        }), ViewResponse)

    async def push(self, trigger_id: str, view: ViewDefinition) -> ViewResponse:
        """Push a view onto the stack of a root view"""
        return await self._client.post("views.push", build_args({
            "trigger_id": trigger_id,
            "view": view
        }), ViewResponse)

    async def update_by_external_id(self, view: ViewDefinition, external_id: str,
                                    hash: Optional[str] = None) -> ViewResponse:
        """Update an existing view identified by its developer-set external_id"""
        return await self._client.post("views.update", build_args({
            "view": view,
            "external_id": external_id,
            "hash": hash
        }), ViewResponse)

    async def update_by_view_id(self, view: ViewDefinition, view_id: str,
                                hash: Optional[str] = None) -> ViewResponse:
        """Update an existing view identified by its view_id"""
        return await self._client.post("views.update", build_args({
            "view": view,
            "view_id": view_id,
            "hash": hash
        }), ViewResponse)
