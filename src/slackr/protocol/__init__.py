"""
slackr Protocol Layer
=====================

This package defines the Socket Mode wire vocabulary: the shape of inbound
envelopes and of the acknowledgments sent in reply.

The protocol layer MUST NOT depend on any transport implementation.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Client (client.py)
    Listen loop: read, parse, acknowledge, dispatch

    │
    ▼
Dispatch Registry (dispatch.py)
    Ordered (predicate, handler) pairs

    │
    ▼
Frame Construction (factory.py)
    Acknowledgment replies

    │
    ▼
Message Model (message.py)
    Immutable Envelope / Payload / Event, and parse()

    │
    ▼
Field Vocabulary (fields.py)
    Canonical names for wire keys

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Session Layer (transport/session.py)
    Exclusive owner of the connection, serialized writes

Transport Layer (transport/websocket.py)
    Moves frames; the handshake (transport/handshake.py) obtains the URL

---------------------------------------------------------------------
"""

from . import fields
from . import message
from . import factory


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
