"""In-memory mailing lists backend, for development and tests."""

import logging

from campaign.subscriptions.elements import Interaction
from campaign.subscriptions.enums import InteractionType
from campaign.subscriptions.exceptions import ElementPersistenceError

from .base import BaseBackend

logger = logging.getLogger(__name__)


class LocMemBackend(BaseBackend):
    """
    Keep interactions and contacts in memory.

    Interactions are appended in order, the latest interaction of a contact with a
    list gives its subscription status. Saved contacts are indexed by id.
    """

    def __init__(self, read_only: bool = False):
        """Start with no interaction and no contact."""
        self.read_only = read_only
        self.interactions: list[Interaction] = []
        self.contacts = {}

    def add_contact_interaction(self, contact, mailing_list, interaction_type, source_type="", source="", verify=False):
        """Append an interaction, on every subscribed list of the contact when no list is given."""
        if self.read_only:
            raise ElementPersistenceError(f"Cannot record interaction of contact {contact.id}")

        interaction_type = InteractionType(interaction_type)
        if mailing_list is None:
            mailing_lists = self.get_mailing_lists(contact) or [None]
        else:
            mailing_lists = [mailing_list]

        for target in mailing_lists:
            self.interactions.append(
                Interaction(
                    contact=contact,
                    mailing_list=target,
                    type=interaction_type,
                    source_type=source_type,
                    source=source,
                    verify=verify,
                )
            )
        logger.debug("Recorded %s interaction for contact %s", interaction_type, contact.id)

    def save_contact(self, contact) -> bool:
        """Index the contact by id, contacts without id cannot be saved."""
        if self.read_only or contact.id is None:
            return False
        self.contacts[contact.id] = contact
        return True

    def get_status(self, contact, mailing_list):
        """Return the latest interaction type of a contact with a list, None if unknown."""
        for interaction in reversed(self.interactions):
            if interaction.contact.id != contact.id or interaction.mailing_list is None:
                continue
            if interaction.mailing_list.id == mailing_list.id:
                return interaction.type
        return None

    def get_mailing_lists(self, contact):
        """Return the lists a contact is currently subscribed to."""
        mailing_lists = {
            interaction.mailing_list.id: interaction.mailing_list
            for interaction in self.interactions
            if interaction.contact.id == contact.id and interaction.mailing_list is not None
        }
        return [
            mailing_list
            for mailing_list in mailing_lists.values()
            if self.get_status(contact, mailing_list) == InteractionType.SUBSCRIBED
        ]
