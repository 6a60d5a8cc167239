from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


class FormkitConfig(AppConfig):
    name = "formkit"

    def ready(self):
        from .view import Doctype

        doctype = getattr(settings, "FORMKIT_DOCTYPE", Doctype.HTML5)
        if doctype not in Doctype.ALL:
            raise ImproperlyConfigured(
                f"FORMKIT_DOCTYPE must be one of: {', '.join(Doctype.ALL)}."
            )
