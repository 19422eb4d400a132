"""
Block Kit elements

Interactive and display elements that live inside section, actions, context
and input blocks.
"""

from typing import List, Literal, Optional

from slackkit.models.base import SlackModel
from .text import ConfirmationDialog, Option, OptionGroup, PlainText


class BlockElement(SlackModel):
    type: str


class ActionElement(BlockElement):
    """Element that sends an interaction payload when used"""

    action_id: Optional[str] = None
    confirm: Optional[ConfirmationDialog] = None


class Button(ActionElement):
    type: Literal["button"] = "button"
    text: PlainText
    value: Optional[str] = None
    url: Optional[str] = None
    style: Optional[Literal["primary", "danger"]] = None
    accessibility_label: Optional[str] = None


class ImageElement(BlockElement):
    type: Literal["image"] = "image"
    image_url: str
    alt_text: str


class PlainTextInput(ActionElement):
    type: Literal["plain_text_input"] = "plain_text_input"
    placeholder: Optional[PlainText] = None
    initial_value: Optional[str] = None
    multiline: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    focus_on_load: Optional[bool] = None


class StaticSelectMenu(ActionElement):
    type: Literal["static_select"] = "static_select"
    placeholder: Optional[PlainText] = None
    options: Optional[List[Option]] = None
    option_groups: Optional[List[OptionGroup]] = None
    initial_option: Optional[Option] = None


class DatePicker(ActionElement):
    type: Literal["datepicker"] = "datepicker"
    placeholder: Optional[PlainText] = None
    initial_date: Optional[str] = None  # YYYY-MM-DD


class Checkboxes(ActionElement):
    type: Literal["checkboxes"] = "checkboxes"
    options: List[Option]
    initial_options: Optional[List[Option]] = None
