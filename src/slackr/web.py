""" Plain request/response calls to the Slack Web API. None of this touches
    the Socket Mode connection; every call is authorized with the bot token
    (``SLACK_OAUTH_TOKEN``), never with the app-level token used for the
    handshake.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import httpx

from . import config
from . import json
from .protocol import fields

logger = logging.getLogger(__name__)


class WebAPIError(RuntimeError):
    """A Web API call could not be completed or its response decoded."""


@dataclass(frozen=True)
class Member:
    user_id: str
    name: str
    real_name: Optional[str]
    deleted: bool


@dataclass(frozen=True)
class Channel:
    channel_id: str
    name: str
    is_private: bool


class WebClient:
    """Thin async wrapper around the handful of Web API methods in use."""

    timeout = 10.0

    def __init__(self, token: Optional[str] = None, http: Optional[httpx.AsyncClient] = None):
        self.token = config.oauth_token(token)

        if http is None:
            http = httpx.AsyncClient(timeout=self.timeout)
            self._owned = True
        else:
            self._owned = False

        self.http = http

    async def __aenter__(self) -> "WebClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owned:
            await self.http.aclose()

    async def call(self, method: str, data: Optional[dict] = None) -> dict:
        """POST to the named Web API *method* and return the decoded body."""
        url = config.api_url(method)
        headers = {"Authorization": "Bearer " + self.token}

        try:
            response = await self.http.post(url, headers=headers, data=data)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise WebAPIError(f"{method}: request failed: {e}") from e

        try:
            body = json.loads(response.content)
        except (json.DecodeError, ValueError) as e:
            raise WebAPIError(f"{method}: response is not JSON") from e

        if not isinstance(body, dict):
            raise WebAPIError(f"{method}: response is not a JSON object")

        if not body.get("ok", False):
            logger.warning("%s: Slack API responded with an error: %s", method, body.get("error"))

        return body

    async def fetch_members(self) -> List[Member]:
        body = await self.call(fields.USERS_LIST)
        members = []

        try:
            for raw in body["members"]:
                members.append(Member(
                    user_id=raw["id"],
                    name=raw["name"],
                    real_name=raw.get("real_name"),
                    deleted=bool(raw.get("deleted", False)),
                ))
        except (KeyError, TypeError) as e:
            raise WebAPIError(f"{fields.USERS_LIST}: unexpected response: {e!r}") from e

        return members

    async def fetch_channels(self) -> List[Channel]:
        body = await self.call(fields.CONVERSATIONS_LIST)
        channels = []

        try:
            for raw in body["channels"]:
                channels.append(Channel(
                    channel_id=raw["id"],
                    name=raw["name"],
                    is_private=bool(raw.get("is_private", False)),
                ))
        except (KeyError, TypeError) as e:
            raise WebAPIError(f"{fields.CONVERSATIONS_LIST}: unexpected response: {e!r}") from e

        return channels

    async def send_text(self, channel_id: str, text: str) -> bool:
        """Post *text* to *channel_id*; True if Slack accepted it."""
        body = await self.call(fields.POST_MESSAGE, data={"channel": channel_id, "text": text})
        return bool(body.get("ok", False))
