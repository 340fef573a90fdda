"""Contact activity trackers."""

from abc import ABC, abstractmethod

from django.utils import timezone

from campaign.subscriptions.elements import Contact


class BaseActivityTracker(ABC):
    """Base class for all activity trackers, touched whenever a contact engagement changes."""

    @abstractmethod
    def touch(self, contact: Contact) -> None:
        """Signal an engagement change of the contact, never fails."""


class ContactActivityTracker(BaseActivityTracker):
    """Stamp the contact last activity with the current time."""

    def touch(self, contact: Contact) -> None:
        """Update the contact last activity."""
        contact.last_activity = timezone.now()


class DummyActivityTracker(BaseActivityTracker):
    """Activity tracker doing nothing."""

    def touch(self, contact: Contact) -> None:
        """Do nothing."""
