""" Representations of the inbound Socket Mode frame. An :class:`Envelope` is
    the unit of delivery: it carries the correlation id that must be echoed
    back in the acknowledgment, and a :class:`Payload` wrapping the business
    :class:`Event`. Envelopes are constructed exclusively via :func:`parse`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .. import json
from . import fields


class ParseError(ValueError):
    """ A frame is not text, is not valid JSON, or does not match the
        envelope schema. Such frames are dropped without acknowledgment.
    """


@dataclass(frozen=True)
class Event:
    event_type: str
    user: str
    text: str
    channel: str


@dataclass(frozen=True)
class Payload:
    event: Event
    event_id: str


@dataclass(frozen=True)
class Envelope:
    """ One delivered frame. The *envelope_id* is used solely to correlate
        the acknowledgment; it says nothing about the underlying event,
        which has its own *event_id* in the :class:`Payload`.
    """

    envelope_id: str
    message_type: str
    payload: Payload

    @property
    def event(self) -> Event:
        return self.payload.event


def _field(mapping, key, where):

    try:
        value = mapping[key]
    except KeyError:
        raise ParseError("%s: missing field %r" % (where, key))

    if isinstance(value, str):
        return value

    raise ParseError("%s: field %r is %s, expected str" % (where, key, type(value).__name__))


def _mapping(mapping, key, where):

    try:
        value = mapping[key]
    except KeyError:
        raise ParseError("%s: missing field %r" % (where, key))

    if isinstance(value, dict):
        return value

    raise ParseError("%s: field %r is %s, expected object" % (where, key, type(value).__name__))


def parse(frame) -> Envelope:
    """ Interpret a single inbound *frame* as an :class:`Envelope`. Only text
        frames are considered; binary frames, malformed JSON, and JSON that
        does not have every required field raise :class:`ParseError`.
        Unrecognized extra fields are ignored.
    """

    if isinstance(frame, str):
        pass
    else:
        raise ParseError('not a text frame: ' + type(frame).__name__)

    try:
        raw = json.loads(frame)
    except (json.DecodeError, ValueError, TypeError) as e:
        raise ParseError('invalid JSON: ' + str(e)) from e

    if isinstance(raw, dict):
        pass
    else:
        raise ParseError('frame is not a JSON object')

    payload = _mapping(raw, fields.PAYLOAD, 'envelope')
    event = _mapping(payload, fields.EVENT, 'payload')

    event = Event(
        event_type=_field(event, fields.TYPE, 'event'),
        user=_field(event, fields.USER, 'event'),
        text=_field(event, fields.TEXT, 'event'),
        channel=_field(event, fields.CHANNEL, 'event'),
    )

    payload = Payload(
        event=event,
        event_id=_field(payload, fields.EVENT_ID, 'payload'),
    )

    return Envelope(
        envelope_id=_field(raw, fields.ENVELOPE_ID, 'envelope'),
        message_type=_field(raw, fields.TYPE, 'envelope'),
        payload=payload,
    )


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
