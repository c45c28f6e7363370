import pytest


@pytest.fixture
def environment(monkeypatch):
    """ Known credentials, and no stray configuration from the caller's
        environment.
    """

    monkeypatch.setenv('SLACK_APP_TOKEN', 'xapp-test')
    monkeypatch.setenv('SLACK_OAUTH_TOKEN', 'xoxb-test')
    monkeypatch.delenv('SLACKR_API_URL', raising=False)
    monkeypatch.delenv('SLACKR_ENV', raising=False)


@pytest.fixture
def bare_environment(monkeypatch):
    """ No credentials at all.
    """

    for variable in ('SLACK_APP_TOKEN', 'SLACK_OAUTH_TOKEN', 'SLACKR_API_URL', 'SLACKR_ENV'):
        monkeypatch.delenv(variable, raising=False)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
