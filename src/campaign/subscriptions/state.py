"""Subscription state transitions of a contact on a mailing list."""

import logging

from campaign.subscriptions.enums import HookEvent, HookResult, InteractionType
from campaign.subscriptions.exceptions import ElementPersistenceError, OperationAbortedError
from campaign.subscriptions.hooks import (
    HookBus,
    SubscribeContactEvent,
    UnsubscribeContactEvent,
    UpdateContactEvent,
)

logger = logging.getLogger(__name__)


class SubscriptionStateMachine:
    """
    Apply subscribe, unsubscribe and update transitions to contacts.

    Every transition runs the same sequence: before hook, persistence through the
    mailing lists backend, activity touch, after hook. The sequence always runs in
    full even when the backend treats the transition as a no-op.
    """

    def __init__(self, backend, activity, hooks: HookBus | None = None):
        """Store the collaborators, a private hook bus is created when none is given."""
        self.backend = backend
        self.activity = activity
        self.hooks = hooks if hooks is not None else HookBus()

    def _before(self, event, payload):
        """Fire a before hook and refuse to go on when an observer vetoed it."""
        if self.hooks.emit(event, payload, sender=self.__class__) == HookResult.ABORT:
            raise OperationAbortedError(event)

    def _after(self, event, payload):
        """Fire an after hook, vetoes are meaningless once the change is done."""
        self.hooks.emit(event, payload, sender=self.__class__)

    def subscribe(self, contact, mailing_list, source_type=None, source=None, verify=None):
        """
        Subscribe a contact to a mailing list.

        Args:
            contact: Contact to subscribe
            mailing_list: Mailing list to subscribe to
            source_type: Provenance type of the subscription, empty by default
            source: Free text provenance of the subscription, empty by default
            verify: Whether the subscription was verified, false by default

        Raises:
            OperationAbortedError: If a before-subscribe observer vetoed the operation
            ElementPersistenceError: If the backend failed to record the interaction

        """
        source_type = source_type if source_type is not None else ""
        source = source if source is not None else ""
        verify = verify if verify is not None else False

        event = SubscribeContactEvent(
            contact=contact,
            mailing_list=mailing_list,
            source_type=source_type,
            source=source,
        )
        self._before(HookEvent.BEFORE_SUBSCRIBE, event)

        self.backend.add_contact_interaction(
            contact, mailing_list, InteractionType.SUBSCRIBED, source_type, source, verify
        )
        logger.info("Contact %s subscribed to mailing list %s", contact.id, mailing_list.id)

        self.activity.touch(contact)

        self._after(HookEvent.AFTER_SUBSCRIBE, event)

    def unsubscribe(self, contact, mailing_list=None):
        """
        Unsubscribe a contact from a mailing list.

        Without a mailing list the contact leaves every list: the interaction is still
        recorded and the activity touched, but no after-unsubscribe hook is fired.
        """
        event = UnsubscribeContactEvent(contact=contact, mailing_list=mailing_list)
        self._before(HookEvent.BEFORE_UNSUBSCRIBE, event)

        self.backend.add_contact_interaction(contact, mailing_list, InteractionType.UNSUBSCRIBED)
        logger.info(
            "Contact %s unsubscribed from mailing list %s",
            contact.id,
            mailing_list.id if mailing_list is not None else "(all)",
        )

        self.activity.touch(contact)

        if mailing_list is not None:
            self._after(HookEvent.AFTER_UNSUBSCRIBE, event)

    def update_contact_profile(self, contact) -> bool:
        """Save a contact, return False instead of raising when the backend cannot save it."""
        event = UpdateContactEvent(contact=contact)
        self._before(HookEvent.BEFORE_UPDATE, event)

        try:
            saved = self.backend.save_contact(contact)
        except ElementPersistenceError as err:
            logger.warning("Could not save contact %s: %s", contact.id, err)
            return False

        if not saved:
            logger.warning("Could not save contact %s", contact.id)
            return False

        self.activity.touch(contact)

        self._after(HookEvent.AFTER_UPDATE, event)
        return True
