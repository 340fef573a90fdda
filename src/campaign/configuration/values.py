"""Custom value classes for django-configurations."""

import json

from configurations import values
from django.core.exceptions import ValidationError
from django.core.validators import validate_email


class FromNamesEmailsValue(values.Value):
    """
    Class used to interpret the per-site sender identities from an environment variable.

    The variable holds a JSON list of objects, each one with an ``email``, and optionally
    a ``name``, a ``reply_to`` address and the ``site_id`` it is bound to, e.g.::

        [{"name": "News", "email": "news@example.com", "reply_to": "", "site_id": 1}]
    """

    allowed_keys = frozenset({"name", "email", "reply_to", "site_id"})

    def __init__(self, *args, **kwargs):
        """Initialize the value, defaulting to no sender identity."""
        kwargs.setdefault("default", [])
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        """Parse and validate the JSON list of sender identities."""
        try:
            entries = json.loads(value)
        except json.JSONDecodeError as err:
            raise ValueError(f"Cannot interpret value {value!r} as JSON: {err}") from err

        if not isinstance(entries, list):
            raise ValueError(f"Value {value!r} is not a JSON list")

        return [self.clean_entry(entry) for entry in entries]

    def clean_entry(self, entry):
        """Validate one sender identity."""
        if not isinstance(entry, dict) or "email" not in entry:
            raise ValueError(f"Sender identity {entry!r} requires an email")

        unknown_keys = set(entry) - self.allowed_keys
        if unknown_keys:
            raise ValueError(f"Sender identity {entry!r} has unknown keys: {', '.join(sorted(unknown_keys))}")

        for key in ("email", "reply_to"):
            if entry.get(key):
                try:
                    validate_email(entry[key])
                except ValidationError as err:
                    raise ValueError(f"Invalid {key} {entry[key]!r} in sender identity") from err

        return {
            "name": entry.get("name") or "",
            "email": entry["email"],
            "reply_to": entry.get("reply_to") or "",
            "site_id": entry.get("site_id"),
        }
