"""<select> helper."""

from django.utils.html import format_html
from django.utils.safestring import mark_safe

from ..elements import Select
from .base import (
    HIDDEN_INPUT_ATTRIBUTES,
    AbstractHelper,
    iter_value_options,
    normalize_selected,
)


class FormSelect(AbstractHelper):
    """Render a Select element with its options and option groups."""

    valid_tag_attributes = frozenset(
        {
            "name",
            "autocomplete",
            "autofocus",
            "disabled",
            "form",
            "multiple",
            "required",
            "size",
        }
    )
    valid_option_attributes = frozenset(
        {"disabled", "selected", "label", "value"}
    )
    valid_optgroup_attributes = frozenset({"disabled", "label"})

    def render(self, element):
        if not isinstance(element, Select):
            raise TypeError(
                f"{type(self).__name__} requires a Select element; "
                f"received {type(element).__name__}"
            )
        name = self.require_name(element)

        options = element.get_value_options()
        empty_option = element.get_empty_option()
        if empty_option is not None:
            options = [{"value": "", "label": empty_option}] + list(
                iter_value_options(options)
            )

        attributes = element.get_attributes()
        multiple = bool(attributes.get("multiple"))
        if multiple and not name.endswith("[]"):
            name = f"{name}[]"
        attributes["name"] = name
        attributes.pop("type", None)

        selected = normalize_selected(element.get_value())
        if not multiple:
            selected = selected[:1]

        rendered = format_html(
            "{}{}</select>",
            self.open_tag("select", attributes),
            self.render_options(element, options, selected),
        )

        if multiple and element.use_hidden_element:
            hidden = {
                "type": "hidden",
                "name": name,
                "value": element.unselected_value,
            }
            if attributes.get("disabled"):
                hidden["disabled"] = True
            rendered = format_html(
                "<input {}{}{}",
                self.create_attributes_string(hidden, HIDDEN_INPUT_ATTRIBUTES),
                self.get_inline_closing_bracket(),
                rendered,
            )
        return rendered

    def render_options(self, element, options, selected):
        rendered = []
        for spec in iter_value_options(options):
            if "options" in spec:
                rendered.append(self.render_optgroup(element, spec, selected))
                continue

            value = str(spec["value"])
            attributes = {"value": value}
            attributes.update(spec.get("attributes") or {})
            attributes["selected"] = bool(
                spec.get("selected") or value in selected
            )
            if spec.get("disabled"):
                attributes["disabled"] = True

            label = self.escape_label(element, self.translate(spec["label"]))
            rendered.append(
                format_html(
                    "{}{}</option>",
                    self.open_option_tag("option", attributes),
                    label,
                )
            )
        return mark_safe("".join(rendered))

    def render_optgroup(self, element, spec, selected):
        attributes = {"label": self.translate(spec.get("label"))}
        attributes.update(spec.get("attributes") or {})
        if spec.get("disabled"):
            attributes["disabled"] = True
        return format_html(
            "{}{}</optgroup>",
            self.open_option_tag("optgroup", attributes),
            self.render_options(element, spec["options"], selected),
        )

    def open_option_tag(self, tag, attributes):
        if tag == "option":
            return self.open_tag(tag, attributes, self.valid_option_attributes)
        return self.open_tag(tag, attributes, self.valid_optgroup_attributes)
