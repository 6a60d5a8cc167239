"""<button> helper."""

from django.utils.html import format_html

from .base import AbstractHelper

VALID_BUTTON_TYPES = ("button", "reset", "submit")


class FormButton(AbstractHelper):
    """Render a <button> whose content is the element label.

    Button types other than button/reset/submit render as ``submit``.
    """

    valid_tag_attributes = frozenset(
        {
            "name",
            "autofocus",
            "disabled",
            "form",
            "formaction",
            "formenctype",
            "formmethod",
            "formnovalidate",
            "formtarget",
            "type",
            "value",
        }
    )

    def render(self, element, button_content=None):
        if button_content is None:
            button_content = element.get_label()
            if button_content is None:
                raise ValueError(
                    f"{type(self).__name__} expects either button content "
                    f"as the second argument, or that the element provided "
                    f"has a label value; neither found"
                )
            button_content = self.escape_label(
                element, self.translate(button_content)
            )
        return format_html(
            "{}{}</button>", self.open_button_tag(element), button_content
        )

    def open_button_tag(self, element):
        name = self.require_name(element)
        attributes = element.get_attributes()
        attributes["name"] = name
        attributes["type"] = self.get_type(element)
        value = element.get_value()
        if value is not None:
            attributes["value"] = value
        return self.open_tag("button", attributes)

    def get_type(self, element):
        button_type = element.get_attribute("type")
        if button_type not in VALID_BUTTON_TYPES:
            return "submit"
        return button_type
