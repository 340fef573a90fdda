"""Template renderers used for custom notification bodies."""

from abc import ABC, abstractmethod

from django.template import TemplateDoesNotExist, TemplateSyntaxError
from django.template.loader import render_to_string

from campaign.subscriptions.exceptions import RenderingFault


class BaseRenderer(ABC):
    """Base class for all template renderers."""

    @abstractmethod
    def render(self, template: str, context: dict) -> str:
        """
        Render a template.

        Raises:
            RenderingFault: If the template cannot be found or rendered

        """


class DjangoTemplateRenderer(BaseRenderer):
    """Render templates with the Django template engines."""

    def __init__(self, using: str | None = None):
        """Configure the renderer, `using` restricts rendering to one template engine."""
        self.using = using

    def render(self, template: str, context: dict) -> str:
        """Render a template, template lookup and syntax errors become rendering faults."""
        try:
            return render_to_string(template, context, using=self.using)
        except (TemplateDoesNotExist, TemplateSyntaxError) as err:
            raise RenderingFault(f"Could not render template {template!r}: {err}") from err
