"""Helpers rendering single <input> tags."""

from django.utils.html import format_html

from .base import AbstractHelper

VALID_INPUT_TYPES = frozenset(
    {
        "button",
        "checkbox",
        "color",
        "date",
        "datetime",
        "datetime-local",
        "email",
        "file",
        "hidden",
        "image",
        "month",
        "number",
        "password",
        "radio",
        "range",
        "reset",
        "search",
        "submit",
        "tel",
        "text",
        "time",
        "url",
        "week",
    }
)


class FormInput(AbstractHelper):
    """Render an element as a generic <input>.

    Unknown ``type`` attributes fall back to ``text``.
    """

    valid_tag_attributes = frozenset(
        {
            "name",
            "accept",
            "alt",
            "autocomplete",
            "autofocus",
            "checked",
            "dirname",
            "disabled",
            "form",
            "formaction",
            "formenctype",
            "formmethod",
            "formnovalidate",
            "formtarget",
            "height",
            "list",
            "max",
            "maxlength",
            "min",
            "minlength",
            "multiple",
            "pattern",
            "placeholder",
            "readonly",
            "required",
            "size",
            "src",
            "step",
            "type",
            "value",
            "width",
        }
    )

    def render(self, element):
        name = self.require_name(element)
        attributes = element.get_attributes()
        attributes["name"] = name
        attributes["type"] = self.get_type(element)
        value = element.get_value()
        attributes["value"] = "" if value is None else value
        return self.render_input(attributes)

    def render_input(self, attributes):
        return format_html(
            "<input {}{}",
            self.create_attributes_string(attributes),
            self.get_inline_closing_bracket(),
        )

    def get_type(self, element):
        input_type = element.get_attribute("type")
        if not input_type:
            return "text"
        input_type = str(input_type).lower()
        if input_type not in VALID_INPUT_TYPES:
            return "text"
        return input_type


class _TypedInput(FormInput):
    """An <input> whose type is fixed by the helper."""

    input_type = "text"

    def get_type(self, element):
        return self.input_type


class FormText(_TypedInput):
    input_type = "text"


class FormPassword(_TypedInput):
    input_type = "password"


class FormHidden(_TypedInput):
    input_type = "hidden"


class FormEmail(_TypedInput):
    input_type = "email"


class FormUrl(_TypedInput):
    input_type = "url"


class FormTel(_TypedInput):
    input_type = "tel"


class FormSearch(_TypedInput):
    input_type = "search"


class FormNumber(_TypedInput):
    input_type = "number"


class FormRange(_TypedInput):
    input_type = "range"


class FormColor(_TypedInput):
    input_type = "color"


class FormDate(_TypedInput):
    input_type = "date"


class FormDateTime(_TypedInput):
    input_type = "datetime"


class FormDateTimeLocal(_TypedInput):
    input_type = "datetime-local"


class FormMonth(_TypedInput):
    input_type = "month"


class FormWeek(_TypedInput):
    input_type = "week"


class FormTime(_TypedInput):
    input_type = "time"


class FormSubmit(_TypedInput):
    input_type = "submit"


class FormReset(_TypedInput):
    input_type = "reset"


class FormImage(_TypedInput):
    input_type = "image"

    def render(self, element):
        src = element.get_attribute("src")
        if not src:
            raise ValueError(
                f"{type(self).__name__} requires that the element has an "
                f"assigned src; none discovered"
            )
        return super().render(element)


class FormFile(_TypedInput):
    """File input; never echoes a value, adds [] to multiple names."""

    input_type = "file"

    def render(self, element):
        name = self.require_name(element)
        attributes = element.get_attributes()
        if attributes.get("multiple") and not name.endswith("[]"):
            name = f"{name}[]"
        attributes["name"] = name
        attributes["type"] = self.input_type
        attributes.pop("value", None)
        return self.render_input(attributes)
