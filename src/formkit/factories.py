"""Factory Boy factories for form element test data."""

import factory

from formkit.captcha import DumbCaptcha
from formkit.elements import (
    Button,
    Captcha,
    Checkbox,
    Collection,
    Csrf,
    Element,
    MultiCheckbox,
    Radio,
    Select,
    Textarea,
)

VALUE_OPTIONS = {
    "value1": "option",
    "value2": "label",
    "value3": "last",
}


class ElementFactory(factory.Factory):
    """Plain element; pass ``attrs`` to set attributes after creation."""

    class Meta:
        model = Element

    name = factory.Sequence(lambda n: f"field{n}")

    @factory.post_generation
    def attrs(self, create, extracted, **kwargs):
        if extracted:
            self.set_attributes(extracted)


class TextareaFactory(ElementFactory):
    class Meta:
        model = Textarea


class ButtonFactory(ElementFactory):
    class Meta:
        model = Button

    options = factory.LazyFunction(lambda: {"label": "Submit"})


class CheckboxFactory(ElementFactory):
    class Meta:
        model = Checkbox


class MultiCheckboxFactory(ElementFactory):
    class Meta:
        model = MultiCheckbox

    options = factory.LazyFunction(
        lambda: {"value_options": dict(VALUE_OPTIONS)}
    )


class RadioFactory(MultiCheckboxFactory):
    class Meta:
        model = Radio


class SelectFactory(ElementFactory):
    class Meta:
        model = Select

    options = factory.LazyFunction(
        lambda: {"value_options": dict(VALUE_OPTIONS)}
    )


class CsrfFactory(ElementFactory):
    class Meta:
        model = Csrf


class CaptchaFactory(ElementFactory):
    class Meta:
        model = Captcha

    options = factory.LazyFunction(lambda: {"captcha": DumbCaptcha()})


class CollectionFactory(ElementFactory):
    class Meta:
        model = Collection

    name = None
