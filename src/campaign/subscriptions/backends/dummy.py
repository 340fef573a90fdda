"""Dummy mailing lists backend."""

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """Dummy mailing lists backend doing nothing."""

    def add_contact_interaction(self, contact, mailing_list, interaction_type, source_type="", source="", verify=False):
        """Record nothing."""

    def save_contact(self, contact) -> bool:
        """Pretend the contact was saved."""
        return True
