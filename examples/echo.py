""" Example bot: log every message, and echo the text back to the channel it
    came from, unless the bot itself sent it. Credentials are read from the
    environment, or from a .env file named by SLACKR_ENV.

    Usage: python echo.py BOT_USER_ID [alias-database]
"""

import asyncio
import logging
import sys

import slackr
from slackr import dispatch
from slackr.protocol import fields


async def main(bot_user, database=None):

    slackr.config.load_env()

    web = slackr.WebClient()
    aliases = None

    if database is not None:
        aliases = slackr.Database(database)
        await aliases.setup(web)

    def describe(envelope):
        event = envelope.event
        if aliases is None:
            return event.user, event.channel

        try:
            return aliases.resolve_user_name(event.user), aliases.resolve_channel_name(event.channel)
        except KeyError:
            return event.user, event.channel

    async def log(envelope):
        user, channel = describe(envelope)
        logging.info("Received message: %r from %s in %s", envelope.event.text, user, channel)

    async def echo(envelope):
        event = envelope.event
        try:
            sent = await web.send_text(event.channel, event.text)
        except slackr.web.WebAPIError:
            logging.exception("echo failed")
            return

        if sent == False:
            logging.warning("echo to %s was rejected", event.channel)

    client = slackr.Client()
    client.register_callback(fields.MESSAGE, log)
    client.register(dispatch.all_of(dispatch.event_type(fields.MESSAGE),
                                    dispatch.user_is_not(bot_user)), echo)

    try:
        async with client:
            await client.connect()
            await client.listen()
    finally:
        await web.close()
        if aliases is not None:
            aliases.close()


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    asyncio.run(main(*sys.argv[1:3]))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
