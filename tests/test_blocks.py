"""Tests for the Block Kit models and markdown conversion."""

from slackkit.blocks import (
    ActionsBlock,
    Button,
    Checkboxes,
    ConfirmationDialog,
    ContextBlock,
    DividerBlock,
    HeaderBlock,
    ImageElement,
    InputBlock,
    Markdown,
    Option,
    PlainText,
    PlainTextInput,
    SectionBlock,
    markdown_to_blocks,
)
from slackkit.web.args import dump_model


def test_input_block_defaults():
    block = InputBlock(label=PlainText(text="Title"), element=PlainTextInput())

    assert block.type == "input"
    assert block.optional is False
    assert block.hint is None
    assert dump_model(block) == {
        "type": "input",
        "label": {"type": "plain_text", "text": "Title"},
        "element": {"type": "plain_text_input"},
        "optional": False,
    }


def test_input_block_with_checkboxes_keeps_element_fields():
    block = InputBlock(
        label=PlainText(text="Notify"),
        element=Checkboxes(action_id="notify", options=[Option(text=Markdown(text="*Email*"), value="email")]),
        dispatch_action=True,
    )

    dumped = dump_model(block)

    assert dumped["dispatch_action"] is True
    assert dumped["element"]["options"] == [{"text": {"type": "mrkdwn", "text": "*Email*"}, "value": "email"}]


def test_actions_block_with_confirmed_danger_button():
    block = ActionsBlock(
        block_id="actions",
        elements=[
            Button(
                text=PlainText(text="Delete"),
                action_id="delete",
                value="42",
                style="danger",
                confirm=ConfirmationDialog(
                    title=PlainText(text="Are you sure?"),
                    text=Markdown(text="This cannot be undone."),
                    confirm=PlainText(text="Delete"),
                    deny=PlainText(text="Cancel"),
                ),
            )
        ],
    )

    button = dump_model(block)["elements"][0]

    assert button["style"] == "danger"
    assert button["confirm"]["text"] == {"type": "mrkdwn", "text": "This cannot be undone."}


def test_context_block_mixes_text_and_images():
    block = ContextBlock(elements=[
        Markdown(text="Posted by *alice*"),
        ImageElement(image_url="https://example.com/a.png", alt_text="avatar"),
    ])

    assert dump_model(block)["elements"] == [
        {"type": "mrkdwn", "text": "Posted by *alice*"},
        {"type": "image", "image_url": "https://example.com/a.png", "alt_text": "avatar"},
    ]


def test_unknown_fields_from_slack_are_kept():
    block = SectionBlock.model_validate({"type": "section", "text": {"type": "mrkdwn", "text": "x"}, "expand": True})

    assert dump_model(block)["expand"] is True


def test_markdown_to_blocks_headers_lists_and_dividers():
    blocks = markdown_to_blocks(
        "# Release notes\n"
        "Some **important** changes.\n"
        "\n"
        "## Fixes\n"
        "- first fix\n"
        "- second fix\n"
        "---\n"
        "1. step one\n"
        "2. step two\n"
    )

    assert [type(block) for block in blocks] == [
        HeaderBlock,
        SectionBlock,
        SectionBlock,
        SectionBlock,
        DividerBlock,
        SectionBlock,
    ]
    assert blocks[0].text.text == "Release notes"
    assert blocks[0].text.emoji is True
    assert blocks[1].text.text == "Some *important* changes."
    assert blocks[2].text.text == "*Fixes*"
    assert blocks[3].text.text == "• first fix\n• second fix"
    assert blocks[5].text.text == "1. step one\n2. step two"


def test_markdown_to_blocks_code_fence():
    blocks = markdown_to_blocks("Before\n```\nx = 1\n- not a list\n```\nAfter")

    assert [block.text.text for block in blocks] == ["Before", "```x = 1\n- not a list```", "After"]


def test_markdown_to_blocks_empty():
    assert markdown_to_blocks("") == []
