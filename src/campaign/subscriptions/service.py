"""Forms service, subscription changes and their confirmation emails."""

from django.conf import settings
from django.utils.translation import gettext

from campaign.subscriptions.elements import NotificationMessage
from campaign.subscriptions.hooks import HookBus
from campaign.subscriptions.notifications.composer import NotificationComposer
from campaign.subscriptions.notifications.dispatcher import MailDispatcher
from campaign.subscriptions.state import SubscriptionStateMachine

DEFAULT_VERIFY_EMAIL_PATH = "actions/campaign/forms/verify-email"
DEFAULT_UNSUBSCRIBE_EMAIL_PATH = "actions/campaign/forms/unsubscribe-email"


class FormsService:
    """
    Entry point of the subscription forms.

    Subscription changes go through the state machine and its hooks. Verification
    and unsubscribe emails are composed and sent on the site of the mailing list,
    whatever the site of the current request.
    """

    def __init__(self, backend, activity, renderer, url_builder, hooks=None, dispatcher=None):
        """Wire the collaborators."""
        self.state = SubscriptionStateMachine(backend, activity, hooks if hooks is not None else HookBus())
        self.composer = NotificationComposer(renderer)
        self.url_builder = url_builder
        self.dispatcher = dispatcher if dispatcher is not None else MailDispatcher()

    @property
    def hooks(self) -> HookBus:
        """Return the hook bus observers register on."""
        return self.state.hooks

    def send_verification_email(self, pending_contact, mailing_list) -> bool:
        """Send the email a pending contact must follow to verify its subscription."""
        path = getattr(settings, "CAMPAIGN_VERIFY_EMAIL_PATH", DEFAULT_VERIFY_EMAIL_PATH)
        url = self.url_builder.build_site_url(path, {"pid": pending_contact.pid}, mailing_list.site_id)

        mailing_list_type = mailing_list.mailing_list_type
        composition = self.composer.compose(
            gettext("Verify your email address"),
            gettext(
                "Thank you for subscribing to the mailing list. "
                "Please verify your email address by clicking on the following link:"
            ),
            url,
            subject_override=mailing_list_type.verify_email_subject,
            template=mailing_list_type.verify_email_template,
            context={"mailing_list": mailing_list, "pending_contact": pending_contact},
        )

        return self.dispatcher.send(
            NotificationMessage(
                subject=composition.subject,
                body=composition.body,
                to_email=pending_contact.email,
                site_id=mailing_list.site_id,
            )
        )

    def send_unsubscribe_email(self, contact, mailing_list) -> bool:
        """Send the email a contact must follow to confirm leaving a mailing list."""
        path = getattr(settings, "CAMPAIGN_UNSUBSCRIBE_EMAIL_PATH", DEFAULT_UNSUBSCRIBE_EMAIL_PATH)
        url = self.url_builder.build_site_url(
            path,
            {"cid": contact.cid, "uid": contact.uid, "mlid": mailing_list.reference},
            mailing_list.site_id,
        )

        mailing_list_type = mailing_list.mailing_list_type
        composition = self.composer.compose(
            gettext("Confirm unsubscribe"),
            gettext(
                "Please confirm that you would like to unsubscribe from the mailing list "
                "by clicking on the following link:"
            ),
            url,
            subject_override=mailing_list_type.unsubscribe_email_subject,
            template=mailing_list_type.unsubscribe_email_template,
            context={"mailing_list": mailing_list, "contact": contact},
        )

        return self.dispatcher.send(
            NotificationMessage(
                subject=composition.subject,
                body=composition.body,
                to_email=contact.email,
                site_id=mailing_list.site_id,
            )
        )

    def subscribe_contact(self, contact, mailing_list, source_type=None, source=None, verify=None):
        """Subscribe a contact to a mailing list."""
        self.state.subscribe(contact, mailing_list, source_type, source, verify)

    def unsubscribe_contact(self, contact, mailing_list=None):
        """Unsubscribe a contact from a mailing list, or from every list."""
        self.state.unsubscribe(contact, mailing_list)

    def update_contact(self, contact) -> bool:
        """Update a contact."""
        return self.state.update_contact_profile(contact)
