"""Mail transport built on the Django email backends."""

import logging
import smtplib
from email.utils import formataddr

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.mail import EmailMultiAlternatives, get_connection

from campaign.subscriptions.exceptions import MailerUnavailableError

logger = logging.getLogger(__name__)


class MessageBuilder:
    """Fluent builder of a single email message."""

    def __init__(self, connection):
        """Start an empty message sent through the given connection."""
        self.connection = connection
        self.from_email = None
        self.to = []
        self.subject = ""
        self.html_body = ""
        self.text_body = ""
        self.reply_to = []

    def set_from(self, email: str, name: str = ""):
        """Set the sender, with an optional display name."""
        self.from_email = formataddr((name, email)) if name else email
        return self

    def set_to(self, email: str):
        """Set the single recipient."""
        self.to = [email]
        return self

    def set_subject(self, subject: str):
        """Set the subject."""
        self.subject = subject
        return self

    def set_html_body(self, body: str):
        """Set the HTML body."""
        self.html_body = body
        return self

    def set_text_body(self, body: str):
        """Set the plain text body."""
        self.text_body = body
        return self

    def set_reply_to(self, email: str):
        """Set the reply-to address."""
        self.reply_to = [email]
        return self

    def build(self) -> EmailMultiAlternatives:
        """Build the Django email message."""
        message = EmailMultiAlternatives(
            subject=self.subject,
            body=self.text_body,
            from_email=self.from_email,
            to=self.to,
            reply_to=self.reply_to,
            connection=self.connection,
        )
        if self.html_body:
            message.attach_alternative(self.html_body, "text/html")
        return message

    def send(self) -> bool:
        """Send the message, transport failures are logged and reported as False."""
        try:
            return bool(self.build().send())
        except (smtplib.SMTPException, OSError) as err:
            logger.warning("Failed to send email to %s: %s", ", ".join(self.to), err)
            return False


class Mailer:
    """Compose messages sharing a Django email connection."""

    def __init__(self, connection):
        """Configure the mailer connection."""
        self.connection = connection

    def compose(self) -> MessageBuilder:
        """Start a new message."""
        return MessageBuilder(self.connection)


def create_mailer(backend: str | None = None) -> Mailer:
    """
    Create a mailer from `settings.CAMPAIGN_EMAIL_BACKEND`, or Django's `EMAIL_BACKEND`.

    Raises:
        MailerUnavailableError: If the email backend cannot be constructed

    """
    backend = backend or getattr(settings, "CAMPAIGN_EMAIL_BACKEND", None)
    try:
        connection = get_connection(backend)
    except (ImportError, ImproperlyConfigured, TypeError, ValueError) as e:
        raise MailerUnavailableError(f"Could not create mailer with backend {backend!r}: {e}") from e
    return Mailer(connection)
