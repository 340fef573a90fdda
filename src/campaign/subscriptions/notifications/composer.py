"""Notification subject and body composition."""

import logging
from typing import NamedTuple

from campaign.subscriptions.exceptions import RenderingFault

logger = logging.getLogger(__name__)


class Composition(NamedTuple):
    """Subject and body of a notification."""

    subject: str
    body: str


def default_body(message: str, url: str) -> str:
    """Return the plain body used when no custom template applies."""
    return f"{message}\n{url}"


class NotificationComposer:
    """Build notification subjects and bodies from defaults and optional customizations."""

    def __init__(self, renderer):
        """Configure the renderer used for custom templates."""
        self.renderer = renderer

    def compose(
        self,
        subject: str,
        message: str,
        url: str,
        *,
        subject_override: str | None = None,
        template: str | None = None,
        context: dict | None = None,
    ) -> Composition:
        """
        Compose a notification.

        Args:
            subject: Default subject
            message: Default instructional text
            url: Link the recipient must follow
            subject_override: Custom subject, used when non empty
            template: Custom template rendering the body, when set
            context: Extra template context, next to `message` and `url`

        Returns:
            Composition: The subject and the body

        Note:
            Only rendering faults fall back to the default body, any other error
            raised by the renderer reaches the caller.

        """
        body = default_body(message, url)

        if template:
            try:
                body = self.renderer.render(template, {**(context or {}), "message": message, "url": url})
            except RenderingFault as err:
                logger.warning("Falling back to the default body, template %s failed: %s", template, err)

        return Composition(subject=subject_override or subject, body=body)
