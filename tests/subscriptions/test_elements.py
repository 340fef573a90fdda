"""Test the subscription elements."""

from campaign.subscriptions.elements import PENDING_CONTACT_PID_LENGTH, PendingContact
from tests.factories import MailingListFactory


def test_pending_contact_create():
    """Test a pending contact gets a fresh random pid."""
    mailing_list = MailingListFactory()

    first = PendingContact.create("b@y.com", mailing_list, source="homepage", field_data={"name": "B"})
    second = PendingContact.create("b@y.com")

    assert len(first.pid) == PENDING_CONTACT_PID_LENGTH
    assert first.pid != second.pid
    assert first.mailing_list_id == mailing_list.id
    assert first.source == "homepage"
    assert first.field_data == {"name": "B"}
    assert second.mailing_list_id is None
    assert second.field_data == {}


def test_mailing_list_reference():
    """Test the mailing list public reference falls back to its id."""
    assert MailingListFactory(id=9, mlid="abcdef").reference == "abcdef"
    assert MailingListFactory(id=9, mlid="").reference == "9"
