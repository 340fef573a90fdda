"""Contact subscriptions module."""

from django.utils.functional import LazyObject

from .handler import FormsHandler


class DefaultForms(LazyObject):
    """Lazy object to handle the forms service."""

    def _setup(self):
        """Configure the forms service."""
        self._wrapped = forms_handler()


forms_handler = FormsHandler()
forms = DefaultForms()
