"""Subscriptions exceptions module."""


class CampaignError(Exception):
    """Base exception for all campaign subscription exceptions."""


class CampaignInvalidBackendError(CampaignError):
    """Exception raised when a configured backend cannot be imported."""


class ElementPersistenceError(CampaignError):
    """Exception raised when a contact or an interaction cannot be saved."""


class RenderingFault(CampaignError):
    """Exception raised when a custom email template cannot be rendered."""


class MailerUnavailableError(CampaignError):
    """Exception raised when the mailer cannot be constructed."""


class OperationAbortedError(CampaignError):
    """Exception raised when a before hook observer vetoes an operation."""

    def __init__(self, event):
        """Keep track of the event that was vetoed."""
        super().__init__(f"Operation aborted by a {event} observer")
        self.event = event
