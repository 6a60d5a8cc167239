"""<textarea> helper."""

from django.utils.html import format_html

from .base import AbstractHelper


class FormTextarea(AbstractHelper):
    valid_tag_attributes = frozenset(
        {
            "name",
            "autocomplete",
            "autofocus",
            "cols",
            "dirname",
            "disabled",
            "form",
            "maxlength",
            "minlength",
            "placeholder",
            "readonly",
            "required",
            "rows",
            "wrap",
        }
    )

    def render(self, element):
        name = self.require_name(element)
        attributes = element.get_attributes()
        attributes["name"] = name
        content = element.get_value()
        return format_html(
            "{}{}</textarea>",
            self.open_tag("textarea", attributes),
            "" if content is None else content,
        )
