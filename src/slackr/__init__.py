""" Python implementation of a Slack Socket Mode client. This includes the
    handshake and connection handling, acknowledgment of every delivered
    envelope, and predicate-routed dispatch to registered handlers; plus
    small conveniences for the Web API and for resolving ids to names.
"""

__version__ = '0.1.0'

# Utility components.

from . import json
from . import config

# Submodules used by multiple other components.

from . import protocol
from . import transport
from . import dispatch

# Primary public-facing interfaces.

from .client import Client, State
from .dispatch import Registry
from .protocol.message import Envelope, Event, Payload, ParseError
from .transport import AckError, HandshakeError, TransportConnectionError, TransportReadError
from .web import WebClient
from .alias import Database

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
