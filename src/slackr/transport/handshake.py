""" The control-plane exchange that yields a one-time Socket Mode URL. This
    is a single HTTP POST; it is never retried here, any retry policy belongs
    to the caller.
"""

import logging

import httpx

from .. import config
from .. import json
from ..protocol import fields
from .base import HandshakeError

logger = logging.getLogger(__name__)

timeout = 10.0


async def open_connection(token=None, http=None, url=None):
    """ Request a WebSocket URL from the ``apps.connections.open`` endpoint
        and return it. The app-level *token* defaults to the
        ``SLACK_APP_TOKEN`` environment variable; :class:`MissingCredential`
        is raised, and no request is made, if neither is available.

        An existing :class:`httpx.AsyncClient` can be supplied as *http*;
        otherwise a short-lived one is created. The *url* defaults to the
        Web API location established by :mod:`slackr.config`.

        :class:`HandshakeError` is raised if the request fails, if the
        response says ``ok`` is false, or if no URL is present.
    """

    token = config.app_token(token)

    if url is None:
        url = config.api_url(fields.CONNECTIONS_OPEN)

    headers = {'Authorization': 'Bearer ' + token}

    if http is None:
        async with httpx.AsyncClient(timeout=timeout) as http:
            return await _request(http, url, headers)
    else:
        return await _request(http, url, headers)


async def _request(http, url, headers):

    try:
        response = await http.post(url, headers=headers)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise HandshakeError('connection request failed: ' + str(e)) from e

    try:
        parsed = json.loads(response.content)
    except (json.DecodeError, ValueError) as e:
        raise HandshakeError('connection response is not JSON') from e

    if isinstance(parsed, dict):
        pass
    else:
        raise HandshakeError('connection response is not a JSON object')

    if parsed.get('ok') is not True:
        error = parsed.get('error')
        if error:
            raise HandshakeError('Slack API responded with an error: ' + str(error))
        raise HandshakeError('Slack API responded with an error')

    socket_url = parsed.get('url')

    if isinstance(socket_url, str) and socket_url != '':
        pass
    else:
        raise HandshakeError('URL not found in connection response')

    logger.debug("handshake complete, socket URL issued")
    return socket_url


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
