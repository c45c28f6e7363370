"""WebSocket transport, built on the ``websockets`` library."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

from .base import (
    Frame,
    Transport,
    TransportConnectionError,
    TransportError,
    TransportReadError,
)

logger = logging.getLogger(__name__)


class WebSocketTransport(Transport):
    """A single WebSocket connection to a one-time Socket Mode URL.

    A closed connection, clean or otherwise, is reported by :meth:`recv`
    as the end of the stream. There is no reconnection.
    """

    def __init__(self, url: str, open_timeout: Optional[float] = 10.0):
        self.url = url
        self.open_timeout = open_timeout
        self._ws = None
        self._ended = False

    @property
    def is_open(self) -> bool:
        return self._ws is not None and not self._ended

    async def open(self) -> None:
        try:
            self._ws = await websockets.connect(self.url, open_timeout=self.open_timeout)
        except (WebSocketException, OSError, asyncio.TimeoutError) as e:
            raise TransportConnectionError(f"failed to connect to socket: {e}") from e

        self._ended = False
        logger.info("WebSocket connected")

    async def close(self) -> None:
        ws = self._ws
        self._ended = True
        if ws is None:
            return
        try:
            await ws.close()
        except (WebSocketException, OSError):
            logger.debug("error closing WebSocket", exc_info=True)

    async def send(self, frame: str) -> None:
        if self._ws is None or self._ended:
            raise TransportError("WebSocket is not connected")
        try:
            await self._ws.send(frame)
        except (WebSocketException, OSError) as e:
            raise TransportError(f"send failed: {e}") from e

    async def recv(self) -> Optional[Frame]:
        if self._ws is None or self._ended:
            return None
        try:
            return await self._ws.recv()
        except ConnectionClosed as e:
            self._ended = True
            logger.debug("WebSocket closed: %s", e)
            return None
        except WebSocketException as e:
            raise TransportReadError(str(e)) from e
