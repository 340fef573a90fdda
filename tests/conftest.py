"""Fixtures for the test suite."""

from unittest import mock

import pytest

from campaign.subscriptions.activity import BaseActivityTracker
from campaign.subscriptions.backends.base import BaseBackend
from campaign.subscriptions.enums import HookEvent
from campaign.subscriptions.hooks import HookBus


class HookRecorder:
    """Observer registering every event it receives, in order."""

    def __init__(self, journal):
        """Share the journal with the other collaborators."""
        self.journal = journal
        self.payloads = {}

    def observer(self, name):
        """Return an observer recording the events of `name`."""

        def receive(sender, event, **kwargs):
            self.journal.append(name)
            self.payloads.setdefault(name, []).append(event)

        return receive

    def count(self, name):
        """Return how many times an event was received."""
        return len(self.payloads.get(name, []))


@pytest.fixture
def journal():
    """Ordered list of the calls made to the collaborators."""
    return []


@pytest.fixture
def backend(journal):
    """Mailing lists backend journaling its calls."""
    backend = mock.Mock(spec=BaseBackend)
    backend.add_contact_interaction.side_effect = lambda *args, **kwargs: journal.append("record")
    backend.save_contact.side_effect = lambda contact: journal.append("save") or True
    return backend


@pytest.fixture
def activity(journal):
    """Activity tracker journaling its calls."""
    activity = mock.Mock(spec=BaseActivityTracker)
    activity.touch.side_effect = lambda contact: journal.append("touch")
    return activity


@pytest.fixture
def hooks():
    """A fresh hook bus."""
    return HookBus()


@pytest.fixture
def recorder(hooks, journal):
    """A recorder observing every event of the hook bus."""
    recorder = HookRecorder(journal)
    for event in HookEvent:
        hooks.subscribe(event, recorder.observer(str(event)))
    return recorder
