import asyncio
import logging
import pytest
import slackr

from slackr import dispatch

import unittransport


def always(envelope):
    return True


def never(envelope):
    return False


def test_registration_order():
    """ Given predicates registered in order, the handlers for the matching
        subset run in that same order.
    """

    calls = list()
    registry = slackr.Registry()

    def recorder(name):
        async def handler(envelope):
            calls.append(name)
        return handler

    registry.register(always, recorder('first'))
    registry.register(never, recorder('second'))
    registry.register(always, recorder('third'))
    registry.register(dispatch.user_is('U2'), recorder('fourth'))
    registry.register(dispatch.user_is('U1'), recorder('fifth'))

    envelope = unittransport.envelope(user='U1')
    invoked = asyncio.run(registry.dispatch(envelope))

    assert invoked == 3
    assert calls == ['first', 'third', 'fifth']


def test_sequential_handlers():
    """ Each handler completes before the next one starts, even when the
        first one yields to the event loop.
    """

    log = list()
    registry = slackr.Registry()

    async def slow(envelope):
        log.append('slow begin')
        await asyncio.sleep(0.02)
        log.append('slow end')

    async def fast(envelope):
        log.append('fast')

    registry.register(always, slow)
    registry.register(always, fast)

    asyncio.run(registry.dispatch(unittransport.envelope()))

    assert log == ['slow begin', 'slow end', 'fast']


def test_non_exclusive():
    """ Two independently registered handlers that both match see the same
        envelope exactly once each.
    """

    seen = list()
    registry = slackr.Registry()

    async def one(envelope):
        seen.append(('one', envelope.envelope_id))

    async def two(envelope):
        seen.append(('two', envelope.envelope_id))

    registry.register(dispatch.event_type('message'), one)
    registry.register(dispatch.channel_is('C1'), two)

    asyncio.run(registry.dispatch(unittransport.envelope(envelope_id='E7')))

    assert seen == [('one', 'E7'), ('two', 'E7')]


def test_duplicate_registration():

    seen = list()
    registry = slackr.Registry()

    async def handler(envelope):
        seen.append(envelope.envelope_id)

    registry.register(always, handler)
    registry.register(always, handler)
    assert len(registry) == 2

    asyncio.run(registry.dispatch(unittransport.envelope()))
    assert seen == ['E1', 'E1']


def test_no_match():

    registry = slackr.Registry()

    async def handler(envelope):
        raise AssertionError('should not be invoked')

    registry.register(never, handler)

    invoked = asyncio.run(registry.dispatch(unittransport.envelope()))
    assert invoked == 0


def test_failing_predicate(caplog):
    """ A predicate that raises counts as no match; dispatch carries on with
        the remaining pairs and the fault is logged.
    """

    seen = list()
    registry = slackr.Registry()

    def broken(envelope):
        raise ZeroDivisionError('broken predicate')

    async def unreachable(envelope):
        seen.append('unreachable')

    async def reachable(envelope):
        seen.append('reachable')

    registry.register(broken, unreachable)
    registry.register(always, reachable)

    with caplog.at_level(logging.WARNING, logger='slackr.dispatch'):
        invoked = asyncio.run(registry.dispatch(unittransport.envelope()))

    assert invoked == 1
    assert seen == ['reachable']
    assert 'treated as no match' in caplog.text


def test_failing_handler(caplog):
    """ There is no failure channel for handlers. An exception that escapes
        one is logged and the next matching handler still runs.
    """

    seen = list()
    registry = slackr.Registry()

    async def broken(envelope):
        raise RuntimeError('handler fault')

    async def after(envelope):
        seen.append('after')

    registry.register(always, broken)
    registry.register(always, after)

    with caplog.at_level(logging.ERROR, logger='slackr.dispatch'):
        invoked = asyncio.run(registry.dispatch(unittransport.envelope()))

    assert invoked == 2
    assert seen == ['after']
    assert 'handler fault' in caplog.text


def test_plain_handler():

    seen = list()
    registry = slackr.Registry()

    registry.register(always, lambda envelope: seen.append(envelope.event.text))

    asyncio.run(registry.dispatch(unittransport.envelope(text='plain')))
    assert seen == ['plain']


def test_timeout(caplog):

    seen = list()
    registry = slackr.Registry(timeout=0.01)

    async def stalled(envelope):
        await asyncio.sleep(10)
        seen.append('stalled')

    async def after(envelope):
        seen.append('after')

    registry.register(always, stalled)
    registry.register(always, after)

    with caplog.at_level(logging.WARNING, logger='slackr.dispatch'):
        asyncio.run(registry.dispatch(unittransport.envelope()))

    assert seen == ['after']
    assert 'exceeded' in caplog.text


def test_not_callable():

    registry = slackr.Registry()

    async def handler(envelope):
        pass

    with pytest.raises(TypeError):
        registry.register('message', handler)

    with pytest.raises(TypeError):
        registry.register(always, None)

    assert len(registry) == 0


def test_decorator():

    seen = list()
    registry = slackr.Registry()

    @registry.on(dispatch.event_type('message'))
    async def handler(envelope):
        seen.append(envelope.envelope_id)

    assert callable(handler)
    asyncio.run(registry.dispatch(unittransport.envelope()))
    assert seen == ['E1']


def test_predicate_helpers():

    message = unittransport.envelope(user='U1', channel='C1', event_type='message')
    reaction = unittransport.envelope(user='BOT1', channel='C2', event_type='reaction_added',
                                      message_type='events_api')

    assert dispatch.event_type('message')(message) == True
    assert dispatch.event_type('message')(reaction) == False
    assert dispatch.event_type('message', 'reaction_added')(reaction) == True

    assert dispatch.message_type('events_api')(message) == True
    assert dispatch.message_type('slash_commands')(message) == False

    assert dispatch.user_is('U1')(message) == True
    assert dispatch.user_is_not('BOT1')(message) == True
    assert dispatch.user_is_not('BOT1')(reaction) == False

    assert dispatch.channel_is('C1', 'C3')(message) == True
    assert dispatch.channel_is('C1', 'C3')(reaction) == False

    both = dispatch.all_of(dispatch.event_type('message'), dispatch.user_is_not('BOT1'))
    assert both(message) == True
    assert both(reaction) == False

    either = dispatch.any_of(dispatch.user_is('BOT1'), dispatch.channel_is('C1'))
    assert either(message) == True
    assert either(reaction) == True
    assert dispatch.any_of()(message) == False
    assert dispatch.all_of()(message) == True


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
