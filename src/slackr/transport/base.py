"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`slackr.protocol` so the protocol remains
transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union


Frame = Union[str, bytes]


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class HandshakeError(TransportError):
    """The control plane refused to issue a connection URL, or omitted it."""


class TransportConnectionError(TransportError):
    """The transport could not be established."""


class TransportReadError(TransportError):
    """An error surfaced while reading the next frame.

    The connection is presumed usable; the reader should log and carry on.
    """


class AckError(TransportError):
    """An acknowledgment could not be written."""


class Transport(ABC):
    """Minimal contract for a duplex, frame-oriented transport."""

    @abstractmethod
    async def open(self) -> None:
        """Establish the underlying connection."""

    @abstractmethod
    async def close(self) -> None:
        """Tear down the underlying connection."""

    @abstractmethod
    async def send(self, frame: str) -> None:
        """Write one text frame."""

    @abstractmethod
    async def recv(self) -> Optional[Frame]:
        """Receive the next frame; None once the stream has ended."""

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False
