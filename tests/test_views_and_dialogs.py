"""Tests for the Views and Dialog API wrappers."""

import pytest
from respx import MockRouter

from slackkit.blocks import (
    DatePicker,
    InputBlock,
    Option,
    PlainText,
    PlainTextInput,
    SectionBlock,
    Markdown,
    StaticSelectMenu,
)
from slackkit.errors import SlackApiError
from slackkit.models.dialogs import Dialog, DialogOption, SelectElement, TextAreaElement, TextElement
from slackkit.models.views import HomeViewDefinition, ModalViewDefinition, ViewResponse
from slackkit.web.api import SlackApi

from utils import VIEW, failure, form_params, ok, sent_json, url


def build_modal() -> ModalViewDefinition:
    return ModalViewDefinition(
        title=PlainText(text="Request time off"),
        submit=PlainText(text="Submit"),
        callback_id="time_off",
        private_metadata="C123",
        blocks=[
            InputBlock(
                block_id="dates",
                label=PlainText(text="Start date"),
                element=DatePicker(action_id="start", initial_date="2026-10-18"),
            ),
            InputBlock(
                block_id="reason",
                label=PlainText(text="Reason"),
                element=PlainTextInput(action_id="reason_input", multiline=True),
                hint=PlainText(text="Optional, visible to your manager"),
                optional=True,
            ),
            InputBlock(
                block_id="type",
                label=PlainText(text="Type"),
                element=StaticSelectMenu(
                    action_id="type_select",
                    options=[
                        Option(text=PlainText(text="Vacation"), value="vacation"),
                        Option(text=PlainText(text="Sick"), value="sick"),
                    ],
                ),
            ),
        ],
    )


@pytest.mark.asyncio
async def test_open_sends_view_json_and_returns_response(api: SlackApi, respx_mock: MockRouter):
    route = respx_mock.post(url("views.open")).mock(return_value=ok(view=VIEW))

    response = await api.views.open("12345.98765.abcd2358fdea", build_modal())

    assert isinstance(response, ViewResponse)
    assert response.view.id == "VMHU10V25"
    assert response.view.hash == "156772938.1827394"

    request = route.calls.last.request
    assert form_params(request)["trigger_id"] == "12345.98765.abcd2358fdea"
    view = sent_json(request, "view")
    assert view["type"] == "modal"
    assert view["title"] == {"type": "plain_text", "text": "Request time off"}
    assert view["callback_id"] == "time_off"
    assert "close" not in view

    date_block, reason_block, type_block = view["blocks"]
    assert date_block == {
        "type": "input",
        "block_id": "dates",
        "label": {"type": "plain_text", "text": "Start date"},
        "element": {"type": "datepicker", "action_id": "start", "initial_date": "2026-10-18"},
        "optional": False,
    }
    assert reason_block["hint"] == {"type": "plain_text", "text": "Optional, visible to your manager"}
    assert reason_block["optional"] is True
    assert reason_block["element"]["multiline"] is True
    assert type_block["element"]["options"][1] == {"text": {"type": "plain_text", "text": "Sick"}, "value": "sick"}


@pytest.mark.asyncio
async def test_publish_home_view(api: SlackApi, respx_mock: MockRouter):
    route = respx_mock.post(url("views.publish")).mock(return_value=ok(view={**VIEW, "type": "home"}))
    home = HomeViewDefinition(blocks=[SectionBlock(text=Markdown(text="*Welcome*"))])

    response = await api.views.publish("U061F7AUR", home, hash="156772938.1827394")

    assert response.view.type == "home"
    params = form_params(route.calls.last.request)
    assert params["user_id"] == "U061F7AUR"
    assert params["hash"] == "156772938.1827394"
    assert sent_json(route.calls.last.request, "view") == {
        "type": "home",
        "blocks": [{"type": "section", "text": {"type": "mrkdwn", "text": "*Welcome*"}}],
    }


@pytest.mark.asyncio
async def test_update_by_view_id_hash_conflict(api: SlackApi, respx_mock: MockRouter):
    respx_mock.post(url("views.update")).mock(return_value=failure("hash_conflict"))

    with pytest.raises(SlackApiError) as exc_info:
        await api.views.update_by_view_id(build_modal(), "VMHU10V25", hash="stale")

    assert exc_info.value.error == "hash_conflict"


@pytest.mark.asyncio
async def test_view_state_values_are_decoded(api: SlackApi, respx_mock: MockRouter):
    state = {"values": {"reason": {"reason_input": {"type": "plain_text_input", "value": "Trip"}}}}
    respx_mock.post(url("views.push")).mock(return_value=ok(view={**VIEW, "state": state}))

    response = await api.views.push("trigger", build_modal())

    assert response.view.state.values["reason"]["reason_input"]["value"] == "Trip"


@pytest.mark.asyncio
async def test_dialog_open_sends_dialog_json(api: SlackApi, respx_mock: MockRouter):
    route = respx_mock.post(url("dialog.open")).mock(return_value=ok())
    dialog = Dialog(
        callback_id="ryde-46e2b0",
        title="Request a Ride",
        submit_label="Request",
        state="Limo",
        elements=[
            TextElement(label="Pickup Location", name="loc_origin"),
            TextAreaElement(label="Notes", name="notes", optional=True, hint="Anything else?"),
            SelectElement(
                label="Car",
                name="car",
                options=[DialogOption(label="Sedan", value="sedan"), DialogOption(label="SUV", value="suv")],
            ),
        ],
    )

    result = await api.dialog.open("13345224609.738474920.8088930838d88f008e0", dialog)

    assert result is None
    request = route.calls.last.request
    assert form_params(request)["trigger_id"] == "13345224609.738474920.8088930838d88f008e0"
    sent = sent_json(request, "dialog")
    assert sent["callback_id"] == "ryde-46e2b0"
    assert sent["notify_on_cancel"] is False
    assert sent["elements"][0] == {"type": "text", "label": "Pickup Location", "name": "loc_origin", "optional": False}
    assert sent["elements"][1]["type"] == "textarea"
    assert sent["elements"][1]["hint"] == "Anything else?"
    assert sent["elements"][2]["options"] == [{"label": "Sedan", "value": "sedan"}, {"label": "SUV", "value": "suv"}]


@pytest.mark.asyncio
async def test_dialog_open_failure(api: SlackApi, respx_mock: MockRouter):
    respx_mock.post(url("dialog.open")).mock(
        return_value=failure("validation_errors", response_metadata={"messages": ["[ERROR] missing required field: title"]})
    )

    with pytest.raises(SlackApiError) as exc_info:
        await api.dialog.open("trigger", Dialog(callback_id="c", title="t", elements=[]))

    assert exc_info.value.messages == ["[ERROR] missing required field: title"]
