"""Lifecycle hooks fired around contact state changes."""

import logging
from dataclasses import dataclass

from django.dispatch import Signal
from django.utils.inspect import func_accepts_kwargs

from campaign.subscriptions.elements import Contact, MailingList
from campaign.subscriptions.enums import HookEvent, HookResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubscribeContactEvent:
    """Snapshot of a subscribe operation inputs."""

    contact: Contact
    mailing_list: MailingList
    source_type: str = ""
    source: str = ""


@dataclass(frozen=True)
class UnsubscribeContactEvent:
    """Snapshot of an unsubscribe operation inputs, the list is absent when leaving all lists."""

    contact: Contact
    mailing_list: MailingList | None = None


@dataclass(frozen=True)
class UpdateContactEvent:
    """Snapshot of a contact update operation inputs."""

    contact: Contact


class HookBus:
    """
    Registry of lifecycle observers, one Django signal per event.

    Observers are plain signal receivers called as ``observer(sender, event, **kwargs)``,
    synchronously and in registration order. An observer raising an exception stops
    the emission and the exception reaches the caller. An observer returning
    ``HookResult.ABORT`` vetoes the operation once every observer has run.
    """

    def __init__(self):
        """Create the signals of every known event."""
        self._signals = {event: Signal() for event in HookEvent}

    def signal(self, event) -> Signal:
        """Return the signal backing an event."""
        try:
            return self._signals[HookEvent(event)]
        except ValueError as err:
            raise ValueError(f"Unknown hook event {event!r}") from err

    def subscribe(self, event, observer, dispatch_uid=None):
        """Register an observer for an event, observers must accept keyword arguments."""
        if not callable(observer):
            raise TypeError(f"Observer {observer!r} is not callable")
        if not func_accepts_kwargs(observer):
            raise ValueError(f"Observer {observer!r} must accept keyword arguments")
        self.signal(event).connect(observer, weak=False, dispatch_uid=dispatch_uid)

    register = subscribe

    def unsubscribe(self, event, observer=None, dispatch_uid=None) -> bool:
        """Remove an observer, return whether it was registered."""
        return self.signal(event).disconnect(observer, dispatch_uid=dispatch_uid)

    def has_observers(self, event) -> bool:
        """Return whether any observer is registered for an event."""
        return self.signal(event).has_listeners()

    def emit(self, event, payload, sender=None) -> HookResult:
        """Notify the observers of an event and report whether one of them vetoed it."""
        signal = self.signal(event)
        if not signal.has_listeners(sender):
            return HookResult.CONTINUE

        responses = signal.send(sender=sender, event=payload)
        if any(response == HookResult.ABORT for _receiver, response in responses):
            logger.warning("Observer aborted %s", event)
            return HookResult.ABORT
        return HookResult.CONTINUE
