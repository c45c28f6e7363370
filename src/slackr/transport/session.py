"""Transport-agnostic session layer."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from .. import json
from ..protocol.factory import ack
from ..protocol.message import Envelope
from .base import AckError, Frame, Transport, TransportError

logger = logging.getLogger(__name__)


class Session:
    """Exclusive owner of one duplex connection.

    There is exactly one reader of the inbound half. The outbound half is
    shared: every write goes through :meth:`send`, which serializes writers
    with a lock, so a handler given this session may write without
    interleaving with the acknowledgments.
    """

    def __init__(self, transport: Transport):
        self.transport = transport
        self._send_lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self.transport.is_open

    async def open(self) -> None:
        """Establish the transport; failures propagate, no retry."""
        await self.transport.open()

    async def close(self) -> None:
        await self.transport.close()

    async def recv(self) -> Optional[Frame]:
        """Next inbound frame in delivery order, or None at stream end."""
        return await self.transport.recv()

    async def send(self, thing: Any) -> None:
        """JSON-encode *thing* and write it as a single text frame."""
        frame = json.dumps_text(thing)
        async with self._send_lock:
            await self.transport.send(frame)

    async def ack(self, envelope: Envelope) -> None:
        """Acknowledge receipt of *envelope*.

        Raises :class:`AckError` if the reply could not be written.
        """
        try:
            await self.send(ack(envelope))
        except TransportError as e:
            raise AckError(f"{envelope.envelope_id}: acknowledgment failed: {e}") from e

        logger.debug("acknowledged %s", envelope.envelope_id)
