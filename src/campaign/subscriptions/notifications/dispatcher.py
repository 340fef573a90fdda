"""Delivery of composed notifications."""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from campaign.subscriptions.elements import FromNameEmail, NotificationMessage

from .mailer import create_mailer

logger = logging.getLogger(__name__)


def get_from_name_email(site_id: int | None = None) -> FromNameEmail:
    """
    Return the sender identity of a site.

    The first entry of `settings.CAMPAIGN_FROM_NAMES_EMAILS` bound to the site wins,
    then the first entry bound to no site, then `settings.DEFAULT_FROM_EMAIL`.
    """
    from_names_emails = getattr(settings, "CAMPAIGN_FROM_NAMES_EMAILS", None) or []

    candidates = [entry for entry in from_names_emails if entry.get("site_id") == site_id]
    candidates += [entry for entry in from_names_emails if entry.get("site_id") is None]
    for entry in candidates:
        try:
            return FromNameEmail(
                name=entry.get("name") or "",
                email=entry["email"],
                reply_to=entry.get("reply_to") or "",
                site_id=entry.get("site_id"),
            )
        except KeyError as e:
            raise ImproperlyConfigured("Each CAMPAIGN_FROM_NAMES_EMAILS entry requires an email") from e

    return FromNameEmail(name="", email=settings.DEFAULT_FROM_EMAIL)


class MailDispatcher:
    """Send composed notifications through the mail transport."""

    def __init__(self, mailer_factory=create_mailer, sender_resolver=get_from_name_email):
        """Configure how mailers are created and how senders are resolved."""
        self.mailer_factory = mailer_factory
        self.sender_resolver = sender_resolver

    def send(self, message: NotificationMessage) -> bool:
        """
        Send a notification to its recipient.

        The same body is used for the HTML and the plain text parts. The reply-to
        address is only set when the site sender defines one.

        Raises:
            MailerUnavailableError: If the mailer cannot be constructed

        """
        mailer = self.mailer_factory()
        sender = self.sender_resolver(message.site_id)

        email = (
            mailer.compose()
            .set_from(sender.email, sender.name)
            .set_to(message.to_email)
            .set_subject(message.subject)
            .set_html_body(message.body)
            .set_text_body(message.body)
        )

        if sender.reply_to:
            email.set_reply_to(sender.reply_to)

        sent = email.send()
        if not sent:
            logger.warning("Notification %r was not sent to %s", message.subject, message.to_email)
        return sent
