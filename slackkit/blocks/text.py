"""
Block Kit composition objects: text, options and confirmation dialogs
"""

from typing import List, Literal, Optional

from pydantic import SerializeAsAny

from slackkit.models.base import SlackModel


class TextObject(SlackModel):
    type: str
    text: str


class PlainText(TextObject):
    type: Literal["plain_text"] = "plain_text"
    emoji: Optional[bool] = None


class Markdown(TextObject):
    type: Literal["mrkdwn"] = "mrkdwn"
    verbatim: Optional[bool] = None


class Option(SlackModel):
    """An item in a select menu, checkbox group or radio group"""

    text: SerializeAsAny[TextObject]
    value: str
    description: Optional[PlainText] = None
    url: Optional[str] = None


class OptionGroup(SlackModel):
    label: PlainText
    options: List[Option]


class ConfirmationDialog(SlackModel):
    """Asks the user to confirm before an interactive element fires"""

    title: PlainText
    text: SerializeAsAny[TextObject]
    confirm: PlainText
    deny: PlainText
    style: Optional[str] = None
