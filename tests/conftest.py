"""Shared fixtures for slackkit tests."""

import pytest

from slackkit.web.api import SlackApi

from utils import BASE_URL, TOKEN


@pytest.fixture
def api() -> SlackApi:
    """SlackApi pointed at a fake base URL for respx mocking."""
    return SlackApi(TOKEN, base_url=BASE_URL)
