"""Contacts, mailing lists and the records exchanged with collaborators."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from django.utils.crypto import get_random_string

from campaign.subscriptions.enums import InteractionType

PENDING_CONTACT_PID_LENGTH = 32


@dataclass
class Contact:
    """A mailing list contact, owned by the persistence backend."""

    id: int | None
    email: str
    cid: str = ""
    uid: str = ""
    site_id: int | None = None
    last_activity: datetime | None = None


@dataclass(frozen=True)
class MailingListType:
    """Mailing list type settings, with optional custom email subjects and templates."""

    verify_email_subject: str | None = None
    verify_email_template: str | None = None
    unsubscribe_email_subject: str | None = None
    unsubscribe_email_template: str | None = None


@dataclass(frozen=True)
class MailingList:
    """A mailing list belonging to a site."""

    id: int
    site_id: int
    mailing_list_type: MailingListType = field(default_factory=MailingListType)
    mlid: str = ""
    title: str = ""

    @property
    def reference(self) -> str:
        """Return the reference used to identify the list in public links."""
        return self.mlid or str(self.id)


@dataclass
class PendingContact:
    """An unconfirmed subscription request waiting for email verification."""

    email: str
    pid: str
    mailing_list_id: int | None = None
    source: str = ""
    field_data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, email: str, mailing_list: MailingList | None = None, source: str = "", field_data=None):
        """Start a subscribe-with-verification flow with a fresh pending identifier."""
        return cls(
            email=email,
            pid=get_random_string(PENDING_CONTACT_PID_LENGTH),
            mailing_list_id=mailing_list.id if mailing_list else None,
            source=source,
            field_data=field_data or {},
        )


@dataclass(frozen=True)
class Interaction:
    """A subscribe or unsubscribe event tying a contact to a mailing list."""

    contact: Contact
    mailing_list: MailingList | None
    type: InteractionType
    source_type: str = ""
    source: str = ""
    verify: bool = False


@dataclass(frozen=True)
class NotificationMessage:
    """A composed notification ready to be dispatched."""

    subject: str
    body: str
    to_email: str
    site_id: int | None = None


@dataclass(frozen=True)
class FromNameEmail:
    """Sender identity used for a site's notifications."""

    name: str
    email: str
    reply_to: str = ""
    site_id: int | None = None
