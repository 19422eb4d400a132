"""
Legacy dialog models
"""

from typing import List, Literal, Optional

from pydantic import SerializeAsAny

from .base import SlackModel


class DialogOption(SlackModel):
    label: str
    value: str


class DialogElement(SlackModel):
    type: str
    label: str
    name: str
    optional: bool = False
    placeholder: Optional[str] = None
    value: Optional[str] = None


class TextElement(DialogElement):
    type: Literal["text"] = "text"
    subtype: Optional[Literal["email", "number", "tel", "url"]] = None
    hint: Optional[str] = None
    max_length: Optional[int] = None
    min_length: Optional[int] = None


class TextAreaElement(DialogElement):
    type: Literal["textarea"] = "textarea"
    hint: Optional[str] = None
    max_length: Optional[int] = None
    min_length: Optional[int] = None


class SelectElement(DialogElement):
    type: Literal["select"] = "select"
    options: Optional[List[DialogOption]] = None
    data_source: Optional[Literal["static", "users", "channels", "conversations", "external"]] = None
    min_query_length: Optional[int] = None


class Dialog(SlackModel):
    callback_id: str
    title: str
    elements: List[SerializeAsAny[DialogElement]]
    submit_label: Optional[str] = None
    notify_on_cancel: bool = False
    state: Optional[str] = None
