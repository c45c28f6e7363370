""" The Socket Mode client. A :class:`Client` performs the handshake, owns
    the resulting :class:`slackr.transport.session.Session`, and drives the
    listen loop: read a frame, parse it, acknowledge it, dispatch it.
"""

import enum
import logging

from . import dispatch
from .protocol import message
from .transport import handshake
from .transport.base import AckError, TransportReadError
from .transport.session import Session
from .transport.websocket import WebSocketTransport

logger = logging.getLogger(__name__)


class State(enum.Enum):
    IDLE = 'idle'
    CONNECTED = 'connected'
    TERMINATED = 'terminated'


class Client:
    """ Receive Socket Mode envelopes and route them to registered handlers.
        Handlers are registered with :func:`register` and are invoked by
        :func:`listen`; see :class:`slackr.dispatch.Registry` for the
        ordering and failure semantics.

        A *registry* can be shared or pre-populated; otherwise one is
        created, with *handler_timeout* applied to each handler invocation.
        The *transport_factory* accepts the one-time URL from the handshake
        and returns an unopened :class:`slackr.transport.base.Transport`.
        An already established *session* can be supplied instead of calling
        :func:`connect`.

        :ivar session: The connection in use, if any. Handlers that need to
            write to the connection should be handed this object explicitly.
        :ivar state: One of the :class:`State` values.
    """

    def __init__(self, registry=None, handler_timeout=None, transport_factory=None, session=None):

        if registry is None:
            registry = dispatch.Registry(timeout=handler_timeout)

        if transport_factory is None:
            transport_factory = WebSocketTransport

        self.registry = registry
        self.transport_factory = transport_factory
        self.session = session

        if session is None:
            self.state = State.IDLE
        else:
            self.state = State.CONNECTED


    async def __aenter__(self):
        return self


    async def __aexit__(self, *exc_info):
        await self.close()


    async def connect(self, token=None, http=None):
        """ Obtain a one-time URL via the handshake, then open the connection.
            The app-level *token* defaults to ``SLACK_APP_TOKEN``; *http* is an
            optional :class:`httpx.AsyncClient` for the handshake request.
            Failures raise :class:`slackr.transport.HandshakeError` or
            :class:`slackr.transport.TransportConnectionError`; nothing is
            retried. A connection already held by this client is closed
            first.
        """

        if self.session is not None:
            await self.session.close()
            self.session = None
            self.state = State.IDLE

        url = await handshake.open_connection(token, http=http)

        session = Session(self.transport_factory(url))
        await session.open()

        self.session = session
        self.state = State.CONNECTED
        logger.info("Socket Mode connection established")


    def register(self, predicate, handler):
        """ Invoke *handler* for every envelope accepted by *predicate*.
        """

        self.registry.register(predicate, handler)


    def register_callback(self, event_type, handler):
        """ Invoke *handler* for every envelope whose event type is
            *event_type*, for example 'message'.
        """

        self.registry.register(dispatch.event_type(event_type), handler)


    def on(self, predicate):
        return self.registry.on(predicate)


    async def listen(self):
        """ Process inbound frames until the stream ends. Frames are handled
            strictly in delivery order; each valid envelope is acknowledged
            before any handler sees it, and all matching handlers complete
            before the next frame is read.

            Frames that do not parse are dropped without acknowledgment.
            Read errors are logged and the loop continues. A failure to
            acknowledge is fatal: :class:`slackr.transport.AckError`
            propagates and the loop terminates. The end of the stream is a
            normal return.
        """

        if self.session is None:
            raise RuntimeError('listen() requires an established connection, call connect() first')

        self.state = State.CONNECTED

        while True:
            try:
                frame = await self.session.recv()
            except TransportReadError as e:
                logger.error("error reading frame: %s", e)
                continue

            if frame is None:
                logger.info("stream ended")
                self.state = State.TERMINATED
                return

            try:
                envelope = message.parse(frame)
            except message.ParseError as e:
                logger.debug("dropped frame: %s", e)
                continue

            try:
                await self.session.ack(envelope)
            except AckError:
                self.state = State.TERMINATED
                raise

            await self.registry.dispatch(envelope)


    async def close(self):
        """ Close the connection, if any. A :func:`listen` in progress will
            see the end of the stream and return.
        """

        if self.session is None:
            return

        await self.session.close()


# end of class Client


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
