"""Convenience constructors for outbound Socket Mode frames."""

from __future__ import annotations

from typing import Any, Dict

from .fields import ENVELOPE_ID, PAYLOAD
from .message import Envelope


def ack(envelope: Envelope) -> Dict[str, Any]:
    """Create the acknowledgment confirming receipt of an envelope.

    The reply carries exactly the envelope id, copied verbatim, and an
    empty payload.
    """
    return {ENVELOPE_ID: envelope.envelope_id, PAYLOAD: {}}
