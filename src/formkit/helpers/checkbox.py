"""Checkbox, multi-checkbox and radio helpers."""

from django.utils.html import format_html
from django.utils.safestring import mark_safe

from ..elements import Checkbox, MultiCheckbox
from .base import LABEL_ATTRIBUTES, iter_value_options, normalize_selected
from .input import FormInput

LABEL_APPEND = "append"
LABEL_PREPEND = "prepend"


class FormCheckbox(FormInput):
    """Checkbox preceded by an optional hidden unchecked-value input."""

    def render(self, element):
        if not isinstance(element, Checkbox):
            raise TypeError(
                f"{type(self).__name__} requires a Checkbox element; "
                f"received {type(element).__name__}"
            )
        name = self.require_name(element)

        attributes = element.get_attributes()
        attributes["name"] = name
        attributes["type"] = "checkbox"
        attributes["value"] = element.checked_value
        if element.is_checked():
            attributes["checked"] = True
        rendered = self.render_input(attributes)

        if element.use_hidden_element:
            hidden = {
                "type": "hidden",
                "name": name,
                "value": element.unchecked_value,
            }
            if attributes.get("disabled"):
                hidden["disabled"] = True
            rendered = format_html("{}{}", self.render_input(hidden), rendered)
        return rendered


class FormMultiCheckbox(FormInput):
    """One labelled checkbox per value option."""

    input_type = "checkbox"

    def __init__(self):
        super().__init__()
        self.label_position = LABEL_APPEND
        self.separator = ""
        self.use_hidden_element = None
        self.label_attributes = {}

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

    def set_separator(self, separator):
        self.separator = separator
        return self

    def set_use_hidden_element(self, flag):
        self.use_hidden_element = flag
        return self

    def get_name(self, element):
        name = self.require_name(element)
        if not name.endswith("[]"):
            name = f"{name}[]"
        return name

    def render(self, element):
        if not isinstance(element, MultiCheckbox):
            raise TypeError(
                f"{type(self).__name__} requires a MultiCheckbox element; "
                f"received {type(element).__name__}"
            )
        name = self.get_name(element)

        attributes = element.get_attributes()
        attributes["name"] = name
        attributes["type"] = self.input_type
        selected = normalize_selected(element.get_value())

        rendered = self.render_options(
            element, element.get_value_options(), selected, attributes
        )

        use_hidden = self.use_hidden_element
        if use_hidden is None:
            use_hidden = element.use_hidden_element
        if use_hidden:
            hidden = {
                "type": "hidden",
                "name": name,
                "value": element.unchecked_value,
            }
            if attributes.get("disabled"):
                hidden["disabled"] = True
            rendered = format_html("{}{}", self.render_input(hidden), rendered)
        return rendered

    def render_options(self, element, options, selected, attributes):
        label_attributes = element.get_label_attributes() or dict(
            self.label_attributes
        )
        rendered = []
        for index, spec in enumerate(iter_value_options(options)):
            input_attributes = dict(attributes)
            input_attributes.update(spec.get("attributes") or {})
            if index and "id" in input_attributes:
                del input_attributes["id"]

            value = str(spec["value"])
            input_attributes["value"] = value
            input_attributes["checked"] = bool(
                spec.get("selected") or value in selected
            )
            if spec.get("disabled"):
                input_attributes["disabled"] = True

            opt_label_attributes = dict(label_attributes)
            opt_label_attributes.update(spec.get("label_attributes") or {})

            label = self.escape_label(element, self.translate(spec["label"]))
            control = self.render_input(input_attributes)
            if self.label_position == LABEL_PREPEND:
                inner = format_html("{}{}", label, control)
            else:
                inner = format_html("{}{}", control, label)
            rendered.append(
                format_html(
                    "{}{}</label>",
                    self.open_tag(
                        "label", opt_label_attributes, LABEL_ATTRIBUTES
                    ),
                    inner,
                )
            )
        return mark_safe(self.separator.join(rendered))


class FormRadio(FormMultiCheckbox):
    """One labelled radio button per value option."""

    input_type = "radio"

    def get_name(self, element):
        return self.require_name(element)
