"""
Exceptions raised by slackkit
"""

from typing import Any, Dict, List, Optional


class SlackError(Exception):
    """Base class for all slackkit errors"""


class SlackApiError(SlackError):
    """The Slack API decoded the request but answered with ``ok: false``

    Attributes:
        method: API method that was called (e.g. "usergroups.create")
        error: Error code returned by Slack (e.g. "name_already_exists")
        messages: Extra detail from ``response_metadata.messages``
        response: The raw decoded response body
    """

    def __init__(self, method: str, error: str, response: Optional[Dict[str, Any]] = None):
        self.method = method
        self.error = error
        self.response = response or {}
        self.messages: List[str] = (
            self.response.get("response_metadata", {}) or {}
        ).get("messages", []) or []

        message = f"{method} failed: {error}"
        if self.messages:
            message = f"{message} ({'; '.join(self.messages)})"
        super().__init__(message)


class RtmError(SlackError):
    """Real-time messaging client used incorrectly or connection failed"""
