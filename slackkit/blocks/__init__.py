"""
Block Kit model: composition objects, elements and layout blocks
"""

from .text import ConfirmationDialog, Markdown, Option, OptionGroup, PlainText, TextObject
from .elements import (
    ActionElement,
    BlockElement,
    Button,
    Checkboxes,
    DatePicker,
    ImageElement,
    PlainTextInput,
    StaticSelectMenu,
)
from .blocks import (
    ActionsBlock,
    Block,
    ContextBlock,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    InputBlock,
    SectionBlock,
)
from .markdown import header, markdown_to_blocks, section

__all__ = [
    "TextObject",
    "PlainText",
    "Markdown",
    "Option",
    "OptionGroup",
    "ConfirmationDialog",
    "BlockElement",
    "ActionElement",
    "Button",
    "Checkboxes",
    "DatePicker",
    "ImageElement",
    "PlainTextInput",
    "StaticSelectMenu",
    "Block",
    "ActionsBlock",
    "ContextBlock",
    "DividerBlock",
    "HeaderBlock",
    "ImageBlock",
    "InputBlock",
    "SectionBlock",
    "header",
    "markdown_to_blocks",
    "section"
]
