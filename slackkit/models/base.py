"""
Shared pydantic base classes for Slack schema objects and responses
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class SlackModel(BaseModel):
    """Base for every Slack JSON object

    Unknown fields sent by Slack are kept rather than rejected, since the
    platform adds fields over time.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ResponseMetadata(SlackModel):
    next_cursor: Optional[str] = None
    messages: List[str] = []
    warnings: List[str] = []


class SlackResponse(SlackModel):
    """Envelope common to every Web API response"""

    ok: bool = True
    warning: Optional[str] = None
    response_metadata: Optional[ResponseMetadata] = None

    @property
    def next_cursor(self) -> Optional[str]:
        """Cursor for the next page, or None when this is the last page"""
        if self.response_metadata and self.response_metadata.next_cursor:
            return self.response_metadata.next_cursor
        return None
