"""
Block Kit layout blocks
"""

from typing import List, Literal, Optional, Union

from pydantic import SerializeAsAny

from slackkit.models.base import SlackModel
from .elements import BlockElement, ImageElement
from .text import Markdown, PlainText, TextObject


class Block(SlackModel):
    type: str
    block_id: Optional[str] = None


class SectionBlock(Block):
    type: Literal["section"] = "section"
    text: Optional[SerializeAsAny[TextObject]] = None
    fields: Optional[List[SerializeAsAny[TextObject]]] = None
    accessory: Optional[SerializeAsAny[BlockElement]] = None


class DividerBlock(Block):
    type: Literal["divider"] = "divider"


class HeaderBlock(Block):
    type: Literal["header"] = "header"
    text: PlainText


class ImageBlock(Block):
    type: Literal["image"] = "image"
    image_url: str
    alt_text: str
    title: Optional[PlainText] = None


class ContextBlock(Block):
    type: Literal["context"] = "context"
    elements: List[Union[PlainText, Markdown, ImageElement]]


class ActionsBlock(Block):
    type: Literal["actions"] = "actions"
    elements: List[SerializeAsAny[BlockElement]]


class InputBlock(Block):
    """Collects information from users inside modals and home tabs

    Attributes:
        label: Label shown above the input element
        element: The input element (plain text input, select, date picker...)
        hint: Optional help text shown below the element
        optional: Whether the input may be left empty when the view is submitted
        dispatch_action: Send a block_actions payload when the element changes
    """

    type: Literal["input"] = "input"
    label: PlainText
    element: SerializeAsAny[BlockElement]
    hint: Optional[PlainText] = None
    optional: bool = False
    dispatch_action: Optional[bool] = None
