"""Mailing lists backend base module."""

from abc import ABC, abstractmethod

from campaign.subscriptions.elements import Contact, MailingList
from campaign.subscriptions.enums import InteractionType


class BaseBackend(ABC):
    """Base class for all mailing lists persistence backends."""

    @abstractmethod
    def add_contact_interaction(
        self,
        contact: Contact,
        mailing_list: MailingList | None,
        interaction_type: InteractionType,
        source_type: str = "",
        source: str = "",
        verify: bool = False,
    ) -> None:
        """
        Record an interaction of a contact with a mailing list.

        Args:
            contact: Contact interacting with the list
            mailing_list: Mailing list, None to target every list of the contact
            interaction_type: Subscribed or unsubscribed
            source_type: Provenance type tag
            source: Free text provenance
            verify: Whether the interaction was verified

        Raises:
            ElementPersistenceError: If the interaction cannot be saved

        """

    @abstractmethod
    def save_contact(self, contact: Contact) -> bool:
        """
        Save a contact.

        Returns:
            bool: Whether the contact was saved

        Raises:
            ElementPersistenceError: If the contact cannot be saved

        """
