"""Subscriptions components handler."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from campaign.subscriptions.exceptions import CampaignInvalidBackendError
from campaign.subscriptions.service import FormsService

MAILING_LISTS_BACKEND = "CAMPAIGN_MAILING_LISTS_BACKEND"
ACTIVITY_TRACKER = "CAMPAIGN_ACTIVITY_TRACKER"
TEMPLATE_RENDERER = "CAMPAIGN_TEMPLATE_RENDERER"
URL_BUILDER = "CAMPAIGN_URL_BUILDER"

# Components without default must be defined in the settings.
DEFAULT_COMPONENTS = {
    MAILING_LISTS_BACKEND: None,
    ACTIVITY_TRACKER: {"BACKEND": "campaign.subscriptions.activity.ContactActivityTracker"},
    TEMPLATE_RENDERER: {"BACKEND": "campaign.subscriptions.notifications.renderers.DjangoTemplateRenderer"},
    URL_BUILDER: {"BACKEND": "campaign.subscriptions.notifications.urls.SettingsUrlBuilder"},
}


def create_component(params):
    """Instantiate and configure a component from its `BACKEND` path and `PARAMETERS`."""
    params = params.copy()
    backend = params.pop("BACKEND")
    parameters = params.pop("PARAMETERS", {})
    try:
        klass = import_string(backend)
    except ImportError as e:
        raise CampaignInvalidBackendError(f"Could not find backend {backend!r}: {e}") from e
    return klass(**parameters)


class ComponentHandler:
    """Handler managing the instantiation of one component defined in the settings."""

    def __init__(self, setting_name, default=None, backend=None):
        """Initialize the component handler."""
        # backend is an optional component definition overriding the setting
        # (structured like settings.CAMPAIGN_MAILING_LISTS_BACKEND).
        self.setting_name = setting_name
        self.default = default
        self._backend = backend
        self._component = None

    @cached_property
    def backend(self):
        """Put in cache the component definition from the settings."""
        if self._backend is None:
            try:
                self._backend = getattr(settings, self.setting_name, self.default).copy()
            except AttributeError as e:
                raise ImproperlyConfigured(f"settings.{self.setting_name} is not configured") from e
        return self._backend

    def __call__(self):
        """Create if not existing the component and then return it."""
        if self._component is None:
            self._component = create_component(self.backend)
        return self._component


class FormsHandler:
    """Handler wiring the forms service from the components defined in the settings."""

    def __init__(self, components=None):
        """Initialize the forms handler."""
        # components is an optional dict of component definitions keyed by setting name.
        components = components or {}
        self.handlers = {
            name: ComponentHandler(name, default, components.get(name)) for name, default in DEFAULT_COMPONENTS.items()
        }
        self._forms = None

    def __call__(self):
        """Create if not existing the forms service and then return it."""
        if self._forms is None:
            self._forms = self.create_forms()
        return self._forms

    def create_forms(self):
        """Instantiate the forms service and its collaborators."""
        return FormsService(
            backend=self.handlers[MAILING_LISTS_BACKEND](),
            activity=self.handlers[ACTIVITY_TRACKER](),
            renderer=self.handlers[TEMPLATE_RENDERER](),
            url_builder=self.handlers[URL_BUILDER](),
        )
