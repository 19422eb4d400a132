"""
View models for modals and the App Home tab
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import SerializeAsAny

from slackkit.blocks.blocks import Block
from slackkit.blocks.text import PlainText
from .base import SlackModel, SlackResponse


class ViewDefinition(SlackModel):
    """Common fields of every view surface sent to views.* methods"""

    type: str
    blocks: List[SerializeAsAny[Block]] = []
    private_metadata: Optional[str] = None
    callback_id: Optional[str] = None
    external_id: Optional[str] = None


class ModalViewDefinition(ViewDefinition):
    type: Literal["modal"] = "modal"
    title: PlainText
    close: Optional[PlainText] = None
    submit: Optional[PlainText] = None
    clear_on_close: Optional[bool] = None
    notify_on_close: Optional[bool] = None
    submit_disabled: Optional[bool] = None


class HomeViewDefinition(ViewDefinition):
    type: Literal["home"] = "home"


class ViewState(SlackModel):
    # block_id -> action_id -> element value payload
    values: Dict[str, Dict[str, Dict[str, Any]]] = {}


class View(SlackModel):
    """A view as returned by Slack, with its server-assigned identity"""

    id: str
    type: str
    team_id: Optional[str] = None
    app_id: Optional[str] = None
    bot_id: Optional[str] = None
    hash: Optional[str] = None
    root_view_id: Optional[str] = None
    previous_view_id: Optional[str] = None
    callback_id: Optional[str] = None
    external_id: Optional[str] = None
    private_metadata: Optional[str] = None
    title: Optional[PlainText] = None
    blocks: List[Dict[str, Any]] = []
    state: Optional[ViewState] = None


class ViewResponse(SlackResponse):
    view: View
