"""Transport layer: handshake, connection, and session."""

from .base import (
    AckError,
    HandshakeError,
    Transport,
    TransportConnectionError,
    TransportError,
    TransportReadError,
)

from . import handshake
from . import session
from . import websocket
