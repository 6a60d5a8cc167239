"""Fieldset and collection helper."""

from django.utils.html import escape, format_html
from django.utils.safestring import mark_safe

from ..elements import Collection, Fieldset
from .base import AbstractHelper


class FormCollection(AbstractHelper):
    """Render a fieldset or collection as a <fieldset> with a <legend>.

    Child elements render through the row helper, nested fieldsets
    recursively. A collection flagged ``should_create_template`` also
    emits its target element, named after the template placeholder,
    escaped into a ``data-template`` attribute.
    """

    valid_tag_attributes = frozenset({"name", "disabled", "form"})

    def __init__(self):
        super().__init__()
        self.should_wrap = True
        self.row_helper = "form_row"

    def set_should_wrap(self, flag):
        self.should_wrap = bool(flag)
        return self

    def render(self, element):
        if not isinstance(element, Fieldset):
            raise TypeError(
                f"{type(self).__name__} requires a Fieldset element; "
                f"received {type(element).__name__}"
            )

        row = self.helper(self.row_helper)
        parts = []
        for child in element:
            if isinstance(child, Fieldset):
                parts.append(self.render(child))
            else:
                parts.append(row.render(child))

        if isinstance(element, Collection) and element.should_create_template:
            parts.append(self.render_template(element))

        content = mark_safe("".join(parts))
        if not self.should_wrap:
            return content

        legend = ""
        label = element.get_label()
        if label:
            legend = format_html(
                "<legend>{}</legend>",
                self.escape_label(element, self.translate(label)),
            )

        return format_html(
            "{}{}{}</fieldset>",
            self.open_tag("fieldset", element.get_attributes()),
            legend,
            content,
        )

    def render_template(self, collection):
        template = collection.create_template_element()
        if isinstance(template, Fieldset):
            markup = self.render(template)
        else:
            markup = self.helper(self.row_helper).render(template)
        return format_html(
            '<span data-template="{}"></span>', escape(markup)
        )
