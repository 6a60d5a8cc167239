"""Label and error-list helpers."""

from django.utils.html import format_html, format_html_join
from django.utils.safestring import mark_safe

from .base import AbstractHelper

LABEL_APPEND = "append"
LABEL_PREPEND = "prepend"


class FormLabel(AbstractHelper):
    """Render a <label> for an element, targeting its id."""

    valid_tag_attributes = frozenset({"for", "form"})

    def render(self, element, label_content=None, position=LABEL_PREPEND):
        label = element.get_label()
        if label is None and label_content is None:
            raise ValueError(
                f"{type(self).__name__} expects either label content as the "
                f"second argument, or that the element provided has a label "
                f"attribute; neither found"
            )

        if label is not None:
            label = self.escape_label(element, self.translate(label))
            if label_content is None:
                label_content = label
            elif position == LABEL_APPEND:
                label_content = format_html("{}{}", label_content, label)
            else:
                label_content = format_html("{}{}", label, label_content)

        return format_html(
            "{}{}</label>", self.open_label_tag(element), label_content
        )

    def open_label_tag(self, element=None):
        if element is None:
            return mark_safe("<label>")
        attributes = element.get_label_attributes()
        element_id = element.get_attribute("id")
        if element_id and "for" not in attributes:
            attributes["for"] = element_id
        return self.open_tag("label", attributes)


class FormElementErrors(AbstractHelper):
    """Render an element's messages as an unordered list."""

    def __init__(self):
        super().__init__()
        self.attributes = {}

    def set_attributes(self, attributes):
        self.attributes = dict(attributes)
        return self

    def render(self, element, attributes=None):
        messages = list(self.flatten_messages(element.get_messages()))
        if not messages:
            return mark_safe("")

        list_attributes = dict(self.attributes)
        list_attributes.update(attributes or {})
        return format_html(
            "{}{}</ul>",
            self.open_tag("ul", list_attributes),
            format_html_join(
                "",
                "<li>{}</li>",
                ((self.translate(message),) for message in messages),
            ),
        )

    def flatten_messages(self, messages):
        if isinstance(messages, dict):
            messages = messages.values()
        elif isinstance(messages, str):
            messages = [messages]
        for message in messages or []:
            if isinstance(message, (dict, list, tuple)):
                yield from self.flatten_messages(message)
            else:
                yield message
