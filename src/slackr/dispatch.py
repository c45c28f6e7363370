""" Predicate-routed dispatch of inbound envelopes. A :class:`Registry` holds
    an ordered list of (predicate, handler) pairs; every pair whose predicate
    accepts an envelope has its handler invoked, strictly one after the other
    in registration order.

    The helper functions at the bottom of this module build common
    predicates, such as :func:`event_type`, which reproduces the simpler
    routing-by-event-type that predicates replaced.
"""

import asyncio
import inspect
import logging

logger = logging.getLogger(__name__)


class Registry:
    """ Ordered collection of (predicate, handler) pairs. A predicate is a
        side-effect-free callable accepting an
        :class:`slackr.protocol.message.Envelope` and returning a boolean;
        a handler is a callable, normally a coroutine function, accepting the
        same envelope. Handlers have no return channel: any value they
        return is ignored, and any exception that escapes them is logged
        and otherwise discarded.

        If *timeout* is set, each handler is allowed at most that many
        seconds before it is cancelled. The default is no timeout, which
        means a stalled handler stalls everything behind it.
    """

    def __init__(self, timeout=None):

        self.pairs = list()
        self.timeout = timeout


    def __len__(self):
        return len(self.pairs)


    def register(self, predicate, handler):
        """ Append a (*predicate*, *handler*) pair. There is no deduplication;
            registering the same pair twice will invoke the handler twice.
        """

        if callable(predicate):
            pass
        else:
            raise TypeError('the predicate must be callable')

        if callable(handler):
            pass
        else:
            raise TypeError('the registered handler must be callable')

        self.pairs.append((predicate, handler))


    def on(self, predicate):
        """ Decorator form of :func:`register`::

                @registry.on(event_type('message'))
                async def echo(envelope):
                    ...
        """

        def decorator(handler):
            self.register(predicate, handler)
            return handler

        return decorator


    async def dispatch(self, envelope):
        """ Invoke every handler whose predicate matches *envelope*, awaiting
            each to completion before evaluating the next pair. Returns the
            number of handlers invoked.
        """

        invoked = 0

        for predicate, handler in tuple(self.pairs):
            if self._match(predicate, envelope) == False:
                continue

            invoked += 1
            await self._invoke(handler, envelope)

        return invoked


    def _match(self, predicate, envelope):

        # A faulty predicate must not take down the listen loop. Treat it
        # as a non-match and keep going.

        try:
            return bool(predicate(envelope))
        except Exception:
            logger.warning("predicate %r failed for envelope %s, treated as no match",
                           predicate, envelope.envelope_id, exc_info=True)
            return False


    async def _invoke(self, handler, envelope):

        try:
            result = handler(envelope)

            if inspect.isawaitable(result):
                await self._complete(result, handler, envelope)

        except Exception:
            logger.exception("handler %r failed for envelope %s",
                             handler, envelope.envelope_id)


    async def _complete(self, result, handler, envelope):

        if self.timeout is None:
            await result
            return

        try:
            await asyncio.wait_for(result, self.timeout)
        except asyncio.TimeoutError:
            logger.warning("handler %r exceeded %.1fs for envelope %s, cancelled",
                           handler, self.timeout, envelope.envelope_id)


# end of class Registry



def event_type(*names):
    """ Match envelopes whose event type is one of *names*, for example
        ``event_type('message')``.
    """

    names = frozenset(names)

    def predicate(envelope):
        return envelope.payload.event.event_type in names

    return predicate


def message_type(*names):
    """ Match envelopes whose outer frame type is one of *names*, for example
        ``message_type('events_api')``.
    """

    names = frozenset(names)

    def predicate(envelope):
        return envelope.message_type in names

    return predicate


def user_is(*users):
    users = frozenset(users)

    def predicate(envelope):
        return envelope.payload.event.user in users

    return predicate


def user_is_not(*users):
    """ Match envelopes sent by anyone other than *users*. The usual way for
        a bot to ignore its own messages.
    """

    users = frozenset(users)

    def predicate(envelope):
        return envelope.payload.event.user not in users

    return predicate


def channel_is(*channels):
    channels = frozenset(channels)

    def predicate(envelope):
        return envelope.payload.event.channel in channels

    return predicate


def all_of(*predicates):

    def predicate(envelope):
        for test in predicates:
            if not test(envelope):
                return False
        return True

    return predicate


def any_of(*predicates):

    def predicate(envelope):
        for test in predicates:
            if test(envelope):
                return True
        return False

    return predicate


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
