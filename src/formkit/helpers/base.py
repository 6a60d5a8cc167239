"""Shared plumbing for the form view helpers."""

from django.conf import settings
from django.utils.html import format_html, format_html_join
from django.utils.safestring import mark_safe
from django.utils.translation import gettext

from ..view import Doctype

# Rendered as attr="attr" when truthy, omitted otherwise.
BOOLEAN_ATTRIBUTES = frozenset(
    {
        "autofocus",
        "checked",
        "disabled",
        "formnovalidate",
        "hidden",
        "multiple",
        "novalidate",
        "readonly",
        "required",
        "selected",
    }
)

VALID_GLOBAL_ATTRIBUTES = frozenset(
    {
        "accesskey",
        "class",
        "contenteditable",
        "contextmenu",
        "dir",
        "draggable",
        "dropzone",
        "hidden",
        "id",
        "lang",
        "role",
        "spellcheck",
        "style",
        "tabindex",
        "title",
        "translate",
        "xml:base",
        "xml:lang",
        "xml:space",
        "onabort",
        "onblur",
        "onchange",
        "onclick",
        "ondblclick",
        "onfocus",
        "oninput",
        "oninvalid",
        "onkeydown",
        "onkeypress",
        "onkeyup",
        "onmousedown",
        "onmousemove",
        "onmouseout",
        "onmouseover",
        "onmouseup",
        "onreset",
        "onselect",
        "onsubmit",
    }
)

VALID_ATTRIBUTE_PREFIXES = ("data-", "aria-", "x-")

LABEL_ATTRIBUTES = frozenset({"for", "form"})
HIDDEN_INPUT_ATTRIBUTES = frozenset({"type", "name", "value", "disabled"})


class AbstractHelper:
    """Base class for helpers rendering one kind of markup.

    Subclasses list the tag-specific attributes they accept in
    ``valid_tag_attributes``; anything else that is neither global nor
    prefixed with data-/aria-/x- is dropped from the output.
    """

    valid_tag_attributes = frozenset()

    def __init__(self):
        self.view = None
        self.translator_enabled = getattr(
            settings, "FORMKIT_TRANSLATE_LABELS", True
        )

    def __call__(self, element=None, *args, **kwargs):
        if element is None:
            return self
        return self.render(element, *args, **kwargs)

    def render(self, element):
        raise NotImplementedError

    def set_view(self, view):
        self.view = view
        return self

    def get_view(self):
        return self.view

    @property
    def doctype(self):
        if self.view is None:
            return Doctype.HTML5
        return self.view.doctype

    def get_inline_closing_bracket(self):
        if Doctype.is_xhtml(self.doctype):
            return mark_safe(" />")
        return mark_safe(">")

    def helper(self, name):
        return self.view.helper(name)

    def translate(self, text):
        if not isinstance(text, str) or not self.translator_enabled:
            return text
        return gettext(text)

    def require_name(self, element):
        name = element.get_name()
        if name is None or name == "":
            raise ValueError(
                f"{type(self).__name__} requires that the element has an "
                f"assigned name; none discovered"
            )
        return name

    def is_valid_attribute(self, key, tag_attributes=None):
        if tag_attributes is None:
            tag_attributes = self.valid_tag_attributes
        return (
            key in VALID_GLOBAL_ATTRIBUTES
            or key in tag_attributes
            or key.startswith(VALID_ATTRIBUTE_PREFIXES)
        )

    def prepare_attributes(self, attributes, tag_attributes=None):
        prepared = {}
        for key, value in attributes.items():
            key = key.lower()
            if not self.is_valid_attribute(key, tag_attributes):
                continue
            if key in BOOLEAN_ATTRIBUTES:
                if not value:
                    continue
                value = key
            elif value is None or isinstance(value, (dict, list, tuple, set)):
                continue
            elif isinstance(value, bool):
                value = "true" if value else "false"
            prepared[key] = value
        return prepared

    def create_attributes_string(self, attributes, tag_attributes=None):
        """Return escaped key="value" pairs separated by spaces.

        ``tag_attributes`` overrides the helper's own tag attribute set,
        for helpers that emit more than one kind of tag.
        """
        prepared = self.prepare_attributes(attributes, tag_attributes)
        if not prepared:
            return mark_safe("")
        return format_html_join(" ", '{}="{}"', prepared.items())

    def open_tag(self, tag, attributes=None, tag_attributes=None):
        attrs = self.create_attributes_string(attributes or {}, tag_attributes)
        if attrs:
            return format_html("<{} {}>", mark_safe(tag), attrs)
        return format_html("<{}>", mark_safe(tag))

    def escape_label(self, element, label):
        if element.get_label_option("disable_html_escape"):
            return mark_safe(label)
        return label


def iter_value_options(options):
    """Yield option specs from a value-options container.

    Accepts a mapping of value -> label or value -> spec mapping, or an
    iterable of spec mappings, ``(value, label)`` pairs or plain values
    that serve as their own label. A pair whose label is itself a list of
    choices becomes an option group. Specs always come back as dicts with
    at least ``value`` and ``label`` keys, except option groups which keep
    their ``options`` key.
    """
    if isinstance(options, dict):
        items = options.items()
    else:
        items = (_pair_from_item(item) for item in options)

    for key, spec in items:
        if isinstance(spec, dict):
            spec = dict(spec)
            if "options" not in spec:
                spec.setdefault("value", key)
                spec.setdefault("label", key)
            else:
                spec.setdefault("label", key)
        elif isinstance(spec, (list, tuple)):
            spec = {"label": key, "options": spec}
        else:
            spec = {"value": key, "label": spec}
        yield spec


def _pair_from_item(item):
    if isinstance(item, dict):
        return None, item
    if isinstance(item, (list, tuple)):
        if len(item) != 2:
            raise TypeError(
                f"Value option pairs must be (value, label); received {item!r}"
            )
        return item[0], item[1]
    return item, item


def normalize_selected(value):
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return [str(v) for v in value]
    return [str(value)]
