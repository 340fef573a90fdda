"""Enums for contact subscriptions."""

from enum import StrEnum


class InteractionType(StrEnum):
    """Type of a contact interaction with a mailing list."""

    SUBSCRIBED = "subscribed"
    UNSUBSCRIBED = "unsubscribed"


class HookEvent(StrEnum):
    """Lifecycle events fired around each state changing operation."""

    BEFORE_SUBSCRIBE = "before-subscribe"
    AFTER_SUBSCRIBE = "after-subscribe"
    BEFORE_UNSUBSCRIBE = "before-unsubscribe"
    AFTER_UNSUBSCRIBE = "after-unsubscribe"
    BEFORE_UPDATE = "before-update"
    AFTER_UPDATE = "after-update"


class HookResult(StrEnum):
    """Outcome of an event emission, also returned by observers to veto."""

    CONTINUE = "continue"
    ABORT = "abort"
