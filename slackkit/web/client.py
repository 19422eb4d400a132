"""
Slack Client Module
Core transport for calling Slack Web API methods
"""

import logging
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from slackkit.config.settings import settings
from slackkit.errors import SlackApiError
from .args import encode_args

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class SlackApiClient:
    """Sends API method calls and decodes the response envelope"""

    def __init__(self, token: Optional[str] = None,
                 base_url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 http_client: Optional[httpx.AsyncClient] = None):
        self.token = token or settings.slack_bot_token
        self.base_url = (base_url or settings.slack_api_url).rstrip("/")
        self.headers = {}
        if self.token:
            self.headers["Authorization"] = f"Bearer {self.token}"

        # Injected clients belong to the caller
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(
            timeout=timeout or settings.request_timeout
        )

    async def post(self, method: str,
                   args: Optional[Mapping[str, Any]] = None,
                   response_model: Optional[Type[T]] = None) -> Union[T, Dict[str, Any]]:
        """
        Call an API method with a form-encoded POST

        Args:
            method: API method name, e.g. "usergroups.create"
            args: Argument bag; None values are not sent
            response_model: Envelope model to decode the response into

        Returns:
            The decoded envelope, or the raw dict if no model was given

        Raises:
            SlackApiError: Slack answered with ok=false
            httpx.HTTPError: The request itself failed
        """
        response = await self.client.post(
            f"{self.base_url}/{method}",
            data=encode_args(args),
            headers=self.headers
        )
        return self._decode(method, response, response_model)

    async def get(self, method: str,
                  args: Optional[Mapping[str, Any]] = None,
                  response_model: Optional[Type[T]] = None) -> Union[T, Dict[str, Any]]:
        """Call an API method with the arguments in the query string"""
        response = await self.client.get(
            f"{self.base_url}/{method}",
            params=encode_args(args),
            headers=self.headers
        )
        return self._decode(method, response, response_model)

    def _decode(self, method: str, response: httpx.Response,
                response_model: Optional[Type[T]]) -> Union[T, Dict[str, Any]]:
        response.raise_for_status()
        data = response.json()
        logger.debug(f"{method} -> ok={data.get('ok')}")

        if not data.get("ok"):
            error = data.get("error", "unknown_error")
            logger.warning(f"Slack API call {method} failed: {error}")
            raise SlackApiError(method, error, data)

        if response_model is None:
            return data
        return response_model.model_validate(data)

    async def close(self):
        """Close the HTTP client"""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "SlackApiClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
