"""Rendering context shared by the form view helpers."""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.html import conditional_escape, escape
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class Doctype:
    XHTML11 = "XHTML11"
    XHTML1_STRICT = "XHTML1_STRICT"
    XHTML1_TRANSITIONAL = "XHTML1_TRANSITIONAL"
    XHTML1_FRAMESET = "XHTML1_FRAMESET"
    XHTML1_RDFA = "XHTML1_RDFA"
    XHTML5 = "XHTML5"
    HTML4_STRICT = "HTML4_STRICT"
    HTML4_LOOSE = "HTML4_LOOSE"
    HTML4_FRAMESET = "HTML4_FRAMESET"
    HTML5 = "HTML5"

    ALL = (
        XHTML11,
        XHTML1_STRICT,
        XHTML1_TRANSITIONAL,
        XHTML1_FRAMESET,
        XHTML1_RDFA,
        XHTML5,
        HTML4_STRICT,
        HTML4_LOOSE,
        HTML4_FRAMESET,
        HTML5,
    )

    @staticmethod
    def is_xhtml(doctype):
        return doctype.startswith("XHTML")

    @staticmethod
    def is_html5(doctype):
        return doctype in (Doctype.HTML5, Doctype.XHTML5)


# Helper name -> dotted path of the helper class.
DEFAULT_HELPERS = {
    "form_element": "formkit.helpers.element.FormElement",
    "form_input": "formkit.helpers.input.FormInput",
    "form_button": "formkit.helpers.button.FormButton",
    "form_captcha": "formkit.helpers.captcha.FormCaptcha",
    "form_captcha_dumb": "formkit.helpers.captcha.FormCaptchaDumb",
    "form_checkbox": "formkit.helpers.checkbox.FormCheckbox",
    "form_collection": "formkit.helpers.collection.FormCollection",
    "form_color": "formkit.helpers.input.FormColor",
    "form_date": "formkit.helpers.input.FormDate",
    "form_datetime": "formkit.helpers.input.FormDateTime",
    "form_datetime_local": "formkit.helpers.input.FormDateTimeLocal",
    "form_element_errors": "formkit.helpers.label.FormElementErrors",
    "form_email": "formkit.helpers.input.FormEmail",
    "form_file": "formkit.helpers.input.FormFile",
    "form_hidden": "formkit.helpers.input.FormHidden",
    "form_image": "formkit.helpers.input.FormImage",
    "form_label": "formkit.helpers.label.FormLabel",
    "form_month": "formkit.helpers.input.FormMonth",
    "form_multi_checkbox": "formkit.helpers.checkbox.FormMultiCheckbox",
    "form_number": "formkit.helpers.input.FormNumber",
    "form_password": "formkit.helpers.input.FormPassword",
    "form_radio": "formkit.helpers.checkbox.FormRadio",
    "form_range": "formkit.helpers.input.FormRange",
    "form_reset": "formkit.helpers.input.FormReset",
    "form_row": "formkit.helpers.row.FormRow",
    "form_search": "formkit.helpers.input.FormSearch",
    "form_select": "formkit.helpers.select.FormSelect",
    "form_submit": "formkit.helpers.input.FormSubmit",
    "form_tel": "formkit.helpers.input.FormTel",
    "form_text": "formkit.helpers.input.FormText",
    "form_textarea": "formkit.helpers.textarea.FormTextarea",
    "form_time": "formkit.helpers.input.FormTime",
    "form_url": "formkit.helpers.input.FormUrl",
    "form_week": "formkit.helpers.input.FormWeek",
}


def normalize_helper_name(name):
    return name.strip().lower().replace("-", "_")


class HelperRegistry:
    """Lazily instantiate helpers by name and bind them to a view."""

    def __init__(self, view, helpers=None):
        self.view = view
        self._factories = dict(DEFAULT_HELPERS)
        self._instances = {}
        for name, factory in (helpers or {}).items():
            self.register(name, factory)

    def register(self, name, factory):
        """Register a helper class, instance factory or dotted path."""
        name = normalize_helper_name(name)
        if name in self._factories:
            logger.debug("Overriding form helper %r with %r", name, factory)
        self._factories[name] = factory
        self._instances.pop(name, None)

    def has(self, name):
        return normalize_helper_name(name) in self._factories

    def get(self, name):
        name = normalize_helper_name(name)
        if name in self._instances:
            return self._instances[name]
        try:
            factory = self._factories[name]
        except KeyError:
            raise ImproperlyConfigured(
                f"No form helper registered under the name '{name}'."
            ) from None
        if isinstance(factory, str):
            factory = import_string(factory)
        helper = factory()
        helper.set_view(self.view)
        self._instances[name] = helper
        return helper


class View:
    """Doctype, escaping and helper lookup for rendering form elements."""

    def __init__(self, doctype=None, helpers=None):
        if doctype is None:
            doctype = getattr(settings, "FORMKIT_DOCTYPE", Doctype.HTML5)
        if doctype not in Doctype.ALL:
            raise ImproperlyConfigured(
                f"Unknown doctype '{doctype}'. "
                f"Expected one of: {', '.join(Doctype.ALL)}."
            )
        self.doctype = doctype
        self.helpers = HelperRegistry(self, helpers)

    def helper(self, name):
        return self.helpers.get(name)

    def is_xhtml(self):
        return Doctype.is_xhtml(self.doctype)

    def is_html5(self):
        return Doctype.is_html5(self.doctype)

    def escape_html(self, value):
        return conditional_escape(value)

    def escape_attr(self, value):
        return escape(value)
