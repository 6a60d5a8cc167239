"""Row helper: label, element and errors together."""

from django.utils.html import format_html

from ..elements import Button, MultiCheckbox
from .base import AbstractHelper

LABEL_APPEND = "append"
LABEL_PREPEND = "prepend"


class FormRow(AbstractHelper):
    def __init__(self):
        super().__init__()
        self.label_position = LABEL_PREPEND
        self.render_errors = True

    def set_label_position(self, position):
        position = position.lower()
        if position not in (LABEL_APPEND, LABEL_PREPEND):
            raise ValueError(
                f"{type(self).__name__}.set_label_position() expects "
                f"'{LABEL_APPEND}' or '{LABEL_PREPEND}'; "
                f"received '{position}'"
            )
        self.label_position = position
        return self

    def set_render_errors(self, flag):
        self.render_errors = bool(flag)
        return self

    def render(self, element, label_position=None):
        position = label_position or self.label_position
        element_markup = self.helper("form_element").render(element)

        errors = ""
        if self.render_errors:
            errors = self.helper("form_element_errors").render(element)

        label = element.get_label()
        # Buttons use their label as content.
        if label is None or label == "" or isinstance(element, Button):
            return format_html("{}{}", element_markup, errors)

        label = self.escape_label(element, self.translate(label))

        if isinstance(element, MultiCheckbox):
            legend = format_html("<legend>{}</legend>", label)
            markup = format_html(
                "<fieldset>{}{}</fieldset>", legend, element_markup
            )
        elif element.get_attribute("id"):
            label_markup = self.helper("form_label").render(element)
            if position == LABEL_APPEND:
                markup = format_html("{}{}", element_markup, label_markup)
            else:
                markup = format_html("{}{}", label_markup, element_markup)
        else:
            label_helper = self.helper("form_label")
            text = format_html("<span>{}</span>", label)
            if position == LABEL_APPEND:
                inner = format_html("{}{}", element_markup, text)
            else:
                inner = format_html("{}{}", text, element_markup)
            markup = format_html(
                "{}{}</label>", label_helper.open_label_tag(element), inner
            )

        return format_html("{}{}", markup, errors)
