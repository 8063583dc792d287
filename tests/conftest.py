"""
Shared fixtures for the help subsystem tests.
"""

import pytest

from helpdocumentation import HelpIndex, HelpRegistry, default_registry
from helpentry import HelpEntryType
from helpresolver import HelpResolver


class RecordingClient:
    """Stands in for a Client and remembers everything sent to it."""

    def __init__(self, nick="tester", is_operator=False):
        self.nick = nick
        self.is_operator = is_operator
        self.sent = []

    def send(self, source, numeric, args):
        self.sent.append((source, numeric, list(args)))


class RecordingLog:
    """Stands in for a PastlyLogger."""

    def __init__(self):
        self.lines = []

    def _record(self, level, *s):
        self.lines.append((level, " ".join(str(m) for m in s)))

    def __call__(self, *s):
        self._record("notice", *s)

    def debug(self, *s):
        self._record("debug", *s)

    def info(self, *s):
        self._record("info", *s)

    def notice(self, *s):
        self._record("notice", *s)

    def warn(self, *s):
        self._record("warn", *s)

    def error(self, *s):
        self._record("error", *s)


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def resolver(registry):
    return HelpResolver(registry, index=HelpIndex(registry))


@pytest.fixture
def small_topics():
    return {
        "zeta": {"str": "ZETA <thing>\n\nDoes zeta things."},
        "alpha": {"str": "ALPHA\n\nDoes alpha things."},
        "smite": {"str": "SMITE <nick>\n\nOpers only.", "oper": True},
        "colours": {
            "str": "== Colours ==\n\nRed, green.",
            "type": HelpEntryType.INFORMATION,
        },
        "colors": {
            "str": "== Colours ==\n\nRed, green.",
            "type": HelpEntryType.INFORMATION,
            "alias": True,
        },
        "network": {
            "str": "RPL_ISUPPORT NETWORK\n\nThe network name.",
            "type": HelpEntryType.ISUPPORT,
        },
    }


@pytest.fixture
def small_registry(small_topics):
    return HelpRegistry(small_topics)


@pytest.fixture
def recording_client():
    return RecordingClient()


@pytest.fixture
def recording_log():
    return RecordingLog()


@pytest.fixture
def make_client():
    return RecordingClient
