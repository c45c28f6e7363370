""" Configuration for slackr. Everything here is sourced from the environment,
    optionally seeded from a dotenv file; there are two distinct credentials,
    one for the Socket Mode handshake and one for all plain Web API calls,
    and they are never interchangeable.
"""

import os

import dotenv


APP_TOKEN = 'SLACK_APP_TOKEN'
OAUTH_TOKEN = 'SLACK_OAUTH_TOKEN'
API_URL = 'SLACKR_API_URL'
ENV_FILE = 'SLACKR_ENV'

default_api_url = 'https://slack.com/api/'


class MissingCredential(RuntimeError):
    """ Raised when a credential was neither passed explicitly nor set in
        the environment.
    """

    def __init__(self, variable):
        self.variable = variable
        RuntimeError.__init__(self, 'credential not set: ' + variable)



def parse_env(path):
    """ Parse the dotenv file at *path* into a dictionary, using the same
        rules as python-dotenv: comments, ``export`` prefixes and quoting
        are handled. Keys without a value are skipped. A missing file
        yields an empty dictionary.
    """

    parsed = dict()

    if path is None or os.path.isfile(path) == False:
        return parsed

    for key, value in dotenv.dotenv_values(path, encoding='utf-8').items():
        if value is None:
            continue
        parsed[key] = value

    return parsed



def load_env(path=None):
    """ Load a dotenv file into the process environment. The *path* defaults
        to the ``SLACKR_ENV`` environment variable, then ``.env`` in the
        current working directory. Values already present in the environment
        take precedence over the file. The parsed contents are returned.
    """

    if path is None:
        path = os.environ.get(ENV_FILE)

    if path is None:
        path = os.path.join(os.getcwd(), '.env')

    path = os.path.expanduser(str(path))
    parsed = parse_env(path)

    for key, value in parsed.items():
        os.environ.setdefault(key, value)

    return parsed



def _credential(variable, token):

    if token:
        return token

    token = (os.environ.get(variable) or '').strip()

    if token == '':
        raise MissingCredential(variable)

    return token


def app_token(token=None):
    """ Return the app-level token that authorizes the Socket Mode handshake:
        *token* if provided, otherwise ``SLACK_APP_TOKEN``.
    """

    return _credential(APP_TOKEN, token)


def oauth_token(token=None):
    """ Return the bot token that authorizes Web API calls: *token* if
        provided, otherwise ``SLACK_OAUTH_TOKEN``.
    """

    return _credential(OAUTH_TOKEN, token)



def api_url(method):
    """ Return the full URL for the named Web API *method*, for example
        ``apps.connections.open``.
    """

    base = os.environ.get(API_URL) or default_api_url

    if base.endswith('/'):
        pass
    else:
        base = base + '/'

    return base + method


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
