"""Dispatcher choosing the helper that renders a given element."""

import logging

from django.utils.safestring import mark_safe

from ..elements import Button, Captcha, Collection, Csrf, Element
from .base import AbstractHelper

logger = logging.getLogger(__name__)

# Checked in order with isinstance(); entries added later go first.
DEFAULT_CLASS_MAP = {
    Button: "form_button",
    Captcha: "form_captcha",
    Csrf: "form_hidden",
    Collection: "form_collection",
}

DEFAULT_TYPE_MAP = {
    "checkbox": "form_checkbox",
    "color": "form_color",
    "date": "form_date",
    "datetime": "form_datetime",
    "datetime-local": "form_datetime_local",
    "email": "form_email",
    "file": "form_file",
    "hidden": "form_hidden",
    "image": "form_image",
    "month": "form_month",
    "multi_checkbox": "form_multi_checkbox",
    "number": "form_number",
    "password": "form_password",
    "radio": "form_radio",
    "range": "form_range",
    "reset": "form_reset",
    "search": "form_search",
    "select": "form_select",
    "submit": "form_submit",
    "tel": "form_tel",
    "text": "form_text",
    "textarea": "form_textarea",
    "time": "form_time",
    "url": "form_url",
    "week": "form_week",
}


class FormElement(AbstractHelper):
    """Render any element by delegating to a specialised helper.

    Resolution goes class map, then the ``type`` attribute, then the
    default helper. Calling the helper without an element returns the
    helper itself.
    """

    def __init__(self):
        super().__init__()
        self.class_map = dict(DEFAULT_CLASS_MAP)
        self.type_map = dict(DEFAULT_TYPE_MAP)
        self.default_helper = "form_input"

    def add_class(self, cls, helper_name):
        rest = {k: v for k, v in self.class_map.items() if k is not cls}
        self.class_map = {cls: helper_name, **rest}
        return self

    def add_type(self, element_type, helper_name):
        self.type_map[element_type] = helper_name
        return self

    def set_default_helper(self, helper_name):
        self.default_helper = helper_name
        return self

    def resolve_helper(self, element):
        for cls, helper_name in self.class_map.items():
            if isinstance(element, cls):
                return helper_name

        element_type = element.get_attribute("type")
        if element_type in self.type_map:
            return self.type_map[element_type]
        return self.default_helper

    def render(self, element):
        if not isinstance(element, Element):
            raise TypeError(
                f"{type(self).__name__} requires an Element; "
                f"received {type(element).__name__}"
            )
        if self.view is None:
            # No view to look helpers up in.
            return mark_safe("")

        helper_name = self.resolve_helper(element)
        logger.debug("Rendering %r with %s", element, helper_name)
        return self.helper(helper_name).render(element)
