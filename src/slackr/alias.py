""" Durable mapping of opaque user and channel ids to human-readable names,
    backed by SQLite. This is an optional convenience for handlers; the
    Socket Mode client never consults it.
"""

import logging
import sqlite3

logger = logging.getLogger(__name__)


class Database:
    """ The alias cache. The *path* is the SQLite database file, created if
        it does not already exist; ':memory:' is acceptable for transient
        use. Populate it with :func:`setup`, then look names up with
        :func:`resolve_user_name` and :func:`resolve_channel_name`.
    """

    def __init__(self, path):

        self.path = str(path)
        self.connection = sqlite3.connect(self.path)

        self._initialize_users()
        self._initialize_channels()


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.close()


    def close(self):
        self.connection.close()


    async def setup(self, web):
        """ Use the supplied :class:`slackr.web.WebClient` to fetch the current
            member and channel lists, and insert or update every entry.
        """

        members = await web.fetch_members()
        self.insert_members(members)

        channels = await web.fetch_channels()
        self.insert_channels(channels)

        logger.info("alias cache loaded %d members, %d channels", len(members), len(channels))


    def resolve_user_name(self, user_id):
        """ Return the real name for *user_id*, or the user handle if no real
            name is known. Raises KeyError for an unknown id.
        """

        cursor = self.connection.execute('SELECT name, real_name FROM users WHERE id = ?', (user_id,))
        row = cursor.fetchone()

        if row is None:
            raise KeyError('unknown user: ' + str(user_id))

        name, real_name = row

        if real_name:
            return real_name
        else:
            return name


    def resolve_channel_name(self, channel_id):
        """ Return the name of *channel_id*. Raises KeyError for an unknown id.
        """

        cursor = self.connection.execute('SELECT name FROM channels WHERE id = ?', (channel_id,))
        row = cursor.fetchone()

        if row is None:
            raise KeyError('unknown channel: ' + str(channel_id))

        return row[0]


    def insert_user(self, user_id, name, real_name=None):

        with self.connection:
            self.connection.execute('''
                INSERT OR REPLACE INTO users (id, name, real_name, updated_at)
                VALUES (?, ?, ?, CURRENT_TIMESTAMP)
                ''', (user_id, name, real_name))


    def insert_members(self, members):
        """ Insert each :class:`slackr.web.Member`; deleted accounts are
            skipped.
        """

        for member in members:
            if member.deleted == True:
                continue
            self.insert_user(member.user_id, member.name, member.real_name)


    def insert_channel(self, channel_id, name, is_private=False):

        with self.connection:
            self.connection.execute('''
                INSERT OR REPLACE INTO channels (id, name, is_private, updated_at)
                VALUES (?, ?, ?, CURRENT_TIMESTAMP)
                ''', (channel_id, name, int(bool(is_private))))


    def insert_channels(self, channels):

        for channel in channels:
            self.insert_channel(channel.channel_id, channel.name, channel.is_private)


    def _initialize_users(self):

        with self.connection:
            self.connection.execute('''
                CREATE TABLE IF NOT EXISTS users (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    real_name TEXT,
                    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
                ''')


    def _initialize_channels(self):

        with self.connection:
            self.connection.execute('''
                CREATE TABLE IF NOT EXISTS channels (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL UNIQUE,
                    is_private INTEGER DEFAULT 0,
                    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
                ''')


# end of class Database


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
