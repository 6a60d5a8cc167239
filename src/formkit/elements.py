"""Form element model objects consumed by the view helpers."""

import copy

from .csrf import CsrfValidator


class Element:
    """A named, typed form field descriptor.

    Attributes are rendered onto the HTML tag. ``value`` is kept apart
    from the attribute map; ``set_attribute("value", ...)`` is accepted as
    an alias for ``set_value``.
    """

    default_attributes = {}

    def __init__(self, name=None, options=None):
        self.attributes = {}
        self.options = {}
        self.label = None
        self.label_attributes = {}
        self.label_options = {}
        self.messages = []
        self.value = None

        if name is not None:
            self.set_name(name)
        for key, val in self.default_attributes.items():
            self.attributes.setdefault(key, val)
        if options:
            self.set_options(options)

    def __repr__(self):
        return f"<{type(self).__name__} name={self.get_name()!r}>"

    # -- name -------------------------------------------------------------

    def get_name(self):
        return self.attributes.get("name")

    def set_name(self, name):
        self.attributes["name"] = name
        return self

    # -- options ----------------------------------------------------------

    def set_options(self, options):
        """Apply element options such as label and label attributes."""
        options = dict(options)
        if "label" in options:
            self.set_label(options["label"])
        if "label_attributes" in options:
            self.set_label_attributes(options["label_attributes"])
        if "label_options" in options:
            self.label_options = dict(options["label_options"])
        self.options.update(options)
        return self

    def get_options(self):
        return dict(self.options)

    def get_option(self, key, default=None):
        return self.options.get(key, default)

    # -- attributes -------------------------------------------------------

    def set_attribute(self, key, value):
        if key == "value":
            return self.set_value(value)
        self.attributes[key] = value
        return self

    def get_attribute(self, key, default=None):
        if key == "value":
            return self.get_value()
        return self.attributes.get(key, default)

    def has_attribute(self, key):
        return key in self.attributes

    def remove_attribute(self, key):
        self.attributes.pop(key, None)
        return self

    def set_attributes(self, attributes):
        for key, value in dict(attributes).items():
            self.set_attribute(key, value)
        return self

    def get_attributes(self):
        """Return a copy of the attribute map."""
        return dict(self.attributes)

    # -- value, label, messages -------------------------------------------

    def set_value(self, value):
        self.value = value
        return self

    def get_value(self):
        return self.value

    def set_label(self, label):
        self.label = label
        return self

    def get_label(self):
        return self.label

    def set_label_attributes(self, attributes):
        self.label_attributes = dict(attributes)
        return self

    def get_label_attributes(self):
        return dict(self.label_attributes)

    def get_label_option(self, key, default=None):
        return self.label_options.get(key, default)

    def set_messages(self, messages):
        self.messages = messages
        return self

    def get_messages(self):
        return self.messages


class Textarea(Element):
    default_attributes = {"type": "textarea"}


class Button(Element):
    default_attributes = {"type": "button"}


class Checkbox(Element):
    """Single checkbox with checked/unchecked values."""

    default_attributes = {"type": "checkbox"}

    def __init__(self, name=None, options=None):
        self.use_hidden_element = True
        self.checked_value = "1"
        self.unchecked_value = "0"
        super().__init__(name, options)

    def set_options(self, options):
        super().set_options(options)
        if "use_hidden_element" in options:
            self.use_hidden_element = bool(options["use_hidden_element"])
        if "checked_value" in options:
            self.checked_value = str(options["checked_value"])
        if "unchecked_value" in options:
            self.unchecked_value = str(options["unchecked_value"])
        return self

    def is_checked(self):
        if isinstance(self.value, bool):
            return self.value
        return self.value is not None and str(self.value) == self.checked_value

    def set_checked(self, checked):
        self.value = self.checked_value if checked else self.unchecked_value
        return self


class _ValueOptionsMixin:
    """Value-option storage shared by multi-valued controls.

    ``set_attribute("options", ...)`` is treated as setting value options.
    """

    def set_value_options(self, options):
        self.value_options = options
        return self

    def get_value_options(self):
        return self.value_options

    def set_attribute(self, key, value):
        if key == "options":
            return self.set_value_options(value)
        return super().set_attribute(key, value)


class MultiCheckbox(_ValueOptionsMixin, Checkbox):
    default_attributes = {"type": "multi_checkbox"}

    def __init__(self, name=None, options=None):
        self.value_options = {}
        super().__init__(name, options)
        if not options or "use_hidden_element" not in options:
            self.use_hidden_element = False
        if not options or "unchecked_value" not in options:
            self.unchecked_value = ""

    def set_options(self, options):
        super().set_options(options)
        if "value_options" in options:
            self.set_value_options(options["value_options"])
        return self

    def is_checked(self):
        return False


class Radio(MultiCheckbox):
    default_attributes = {"type": "radio"}


class Select(_ValueOptionsMixin, Element):
    """Drop-down or multi-select list."""

    default_attributes = {"type": "select"}

    def __init__(self, name=None, options=None):
        self.value_options = {}
        self.empty_option = None
        self.use_hidden_element = False
        self.unselected_value = ""
        super().__init__(name, options)

    def set_options(self, options):
        super().set_options(options)
        if "value_options" in options:
            self.set_value_options(options["value_options"])
        if "empty_option" in options:
            self.empty_option = options["empty_option"]
        if "use_hidden_element" in options:
            self.use_hidden_element = bool(options["use_hidden_element"])
        if "unselected_value" in options:
            self.unselected_value = str(options["unselected_value"])
        return self

    def get_empty_option(self):
        return self.empty_option

    def set_empty_option(self, empty_option):
        self.empty_option = empty_option
        return self

    def is_multiple(self):
        return bool(self.attributes.get("multiple"))


class Csrf(Element):
    """Hidden element whose value is the token of its CSRF validator."""

    default_attributes = {"type": "hidden"}

    def __init__(self, name="csrf", options=None):
        self.csrf_options = {}
        self.csrf_validator = None
        super().__init__(name, options)

    def set_options(self, options):
        super().set_options(options)
        if "csrf_options" in options:
            self.csrf_options = dict(options["csrf_options"])
            self.csrf_validator = None
        return self

    def get_csrf_validator(self):
        if self.csrf_validator is None:
            opts = dict(self.csrf_options)
            opts.setdefault("name", self.get_name())
            self.csrf_validator = CsrfValidator(**opts)
        return self.csrf_validator

    def set_csrf_validator(self, validator):
        self.csrf_validator = validator
        return self

    def get_value(self):
        return self.get_csrf_validator().get_hash()

    def get_input_specification(self):
        return {
            "name": self.get_name(),
            "required": True,
            "filters": [str.strip],
            "validators": [self.get_csrf_validator()],
        }


class Captcha(Element):
    """Element backed by a captcha adapter."""

    def __init__(self, name=None, options=None):
        self.captcha = None
        super().__init__(name, options)

    def set_options(self, options):
        super().set_options(options)
        if "captcha" in options:
            self.set_captcha(options["captcha"])
        return self

    def set_captcha(self, captcha):
        self.captcha = captcha
        return self

    def get_captcha(self):
        return self.captcha

    def get_input_specification(self):
        spec = {"name": self.get_name(), "required": True, "filters": []}
        if self.captcha is not None:
            spec["validators"] = [self.captcha]
        return spec


class Fieldset(Element):
    """Ordered group of child elements and fieldsets."""

    def __init__(self, name=None, options=None):
        self._children = {}
        super().__init__(name, options)

    def add(self, element, name=None):
        if not isinstance(element, Element):
            raise TypeError(
                f"{type(self).__name__}.add() requires an Element; "
                f"received {type(element).__name__}"
            )
        if name is not None:
            element.set_name(name)
        name = element.get_name()
        if name is None or name == "":
            raise ValueError(
                f"{type(self).__name__}.add() requires a named element"
            )
        self._children[name] = element
        return self

    def has(self, name):
        return name in self._children

    def get(self, name):
        return self._children[name]

    def remove(self, name):
        self._children.pop(name, None)
        return self

    def get_elements(self):
        return [
            child
            for child in self._children.values()
            if not isinstance(child, Fieldset)
        ]

    def get_fieldsets(self):
        return [
            child
            for child in self._children.values()
            if isinstance(child, Fieldset)
        ]

    def __iter__(self):
        return iter(list(self._children.values()))

    def __len__(self):
        return len(self._children)


class Collection(Fieldset):
    """Fieldset repeating a target element ``count`` times."""

    DEFAULT_TEMPLATE_PLACEHOLDER = "__index__"

    def __init__(self, name=None, options=None):
        self.target_element = None
        self.count = 1
        self.allow_add = True
        self.should_create_template = False
        self.template_placeholder = self.DEFAULT_TEMPLATE_PLACEHOLDER
        super().__init__(name, options)

    def set_options(self, options):
        super().set_options(options)
        if "count" in options:
            self.set_count(options["count"])
        if "allow_add" in options:
            self.allow_add = bool(options["allow_add"])
        if "should_create_template" in options:
            self.should_create_template = bool(
                options["should_create_template"]
            )
        if "template_placeholder" in options:
            self.template_placeholder = options["template_placeholder"]
        if "target_element" in options:
            self.set_target_element(options["target_element"])
        return self

    def set_count(self, count):
        self.count = max(int(count), 0)
        self._prepare_children()
        return self

    def set_target_element(self, element):
        if not isinstance(element, Element):
            raise TypeError(
                f"{type(self).__name__} target element must be an Element; "
                f"received {type(element).__name__}"
            )
        self.target_element = element
        self._prepare_children()
        return self

    def get_target_element(self):
        return self.target_element

    def _prepare_children(self):
        if self.target_element is None:
            return
        self._children = {}
        for index in range(self.count):
            self.add(copy.deepcopy(self.target_element), name=str(index))

    def create_template_element(self):
        """Return a copy of the target named after the placeholder."""
        if self.target_element is None:
            raise ValueError(
                f"{type(self).__name__} requires a target element to "
                f"create a template"
            )
        template = copy.deepcopy(self.target_element)
        template.set_name(self.template_placeholder)
        return template
