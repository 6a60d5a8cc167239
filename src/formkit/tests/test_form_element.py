"""Tests for the FormElement dispatcher."""

import re

import pytest

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
)
from formkit.helpers import FormElement
from formkit.view import Doctype, View

INPUT_TYPES = [
    "text",
    "password",
    "checkbox",
    "radio",
    "submit",
    "reset",
    "file",
    "hidden",
    "image",
    "button",
    "number",
    "range",
    "date",
    "color",
    "search",
    "tel",
    "email",
    "url",
    "datetime",
    "datetime-local",
    "month",
    "week",
    "time",
]


class TestRendersInputElements:
    @pytest.mark.parametrize("input_type", INPUT_TYPES)
    def test_renders_expected_input_element(self, helper, input_type):
        if input_type == "radio":
            element = Radio("foo")
        elif input_type == "checkbox":
            element = Checkbox("foo")
        else:
            element = Element("foo")

        element.set_attribute("type", input_type)
        element.set_attribute("options", {"option": "value"})
        element.set_attribute("src", "http://example.com/img.png")
        markup = helper.render(element)

        assert "<input" in markup
        assert f'type="{input_type}"' in markup

    def test_unknown_type_falls_back_to_text(self, helper):
        element = Element("foo")
        element.set_attribute("type", "bogus")
        markup = helper.render(element)
        assert 'type="text"' in markup

    def test_element_without_type_renders_text_input(self, helper):
        markup = helper.render(Element("foo"))
        assert markup == '<input name="foo" type="text" value="">'

    @pytest.mark.parametrize(
        "input_type",
        [t for t in INPUT_TYPES if t not in ("checkbox", "radio", "image", "file")],
    )
    def test_renders_complete_input_tag(self, helper, input_type):
        element = Element("foo")
        element.set_attribute("type", input_type)
        markup = helper.render(element)
        assert markup == f'<input name="foo" type="{input_type}" value="">'

    def test_renders_complete_image_and_file_tags(self, helper):
        image = Element("foo")
        image.set_attribute("type", "image")
        image.set_attribute("src", "http://example.com/img.png")
        upload = Element("foo")
        upload.set_attribute("type", "file")

        assert helper.render(image) == (
            '<input name="foo" type="image" '
            'src="http://example.com/img.png" value="">'
        )
        assert helper.render(upload) == '<input name="foo" type="file">'

    def test_renders_complete_checkbox_tags(self, helper):
        assert helper.render(Checkbox("foo")) == (
            '<input type="hidden" name="foo" value="0">'
            '<input name="foo" type="checkbox" value="1">'
        )

    def test_xhtml_doctype_closes_inputs_inline(self):
        helper = FormElement().set_view(View(doctype=Doctype.XHTML1_STRICT))
        markup = helper.render(Element("foo"))
        assert markup == '<input name="foo" type="text" value="" />'


class TestRendersMultiElements:
    @pytest.mark.parametrize(
        "element_class, element_type, tag, additional_markup",
        [
            (Radio, "radio", "input", 'type="radio"'),
            (MultiCheckbox, "multi_checkbox", "input", 'type="checkbox"'),
            (Select, "select", "option", "<select"),
        ],
    )
    def test_renders_multi_elements_as_expected(
        self, helper, element_class, element_type, tag, additional_markup
    ):
        element = element_class("foo")
        assert element.get_attribute("type") == element_type

        element.set_value_options(
            {"value1": "option", "value2": "label", "value3": "last"}
        )
        element.set_attribute("value", "value2")
        markup = helper.render(element)

        assert markup.count(f"<{tag}") == 3, markup
        assert additional_markup in markup
        if element_type == "select":
            assert re.search(
                r'value="value2"[^>]*?(selected="selected")', markup
            )

    def test_plain_element_with_select_type_is_rejected(self, helper):
        element = Element("foo")
        element.set_attribute("type", "select")
        with pytest.raises(TypeError, match="requires a Select element"):
            helper.render(element)


class TestRendersSpecialElements:
    def test_renders_captcha_as_expected(self, helper):
        captcha = DumbCaptcha()
        element = Captcha("foo")
        element.set_captcha(captcha)
        markup = helper.render(element)

        assert captcha.get_label() in markup
        assert f"<b>{captcha.get_word()[::-1]}</b>" in markup

    def test_renders_csrf_as_expected(self, helper):
        element = Csrf("foo")
        spec = element.get_input_specification()
        token = ""
        for validator in spec["validators"]:
            if hasattr(validator, "get_hash"):
                token = validator.get_hash()

        markup = helper.render(element)

        assert token
        assert re.search(r'<input[^>]*(type="hidden")', markup)
        assert re.search(rf'<input[^>]*(value="{token}")', markup)
        assert markup == f'<input name="foo" type="hidden" value="{token}">'

    def test_renders_textarea_as_expected(self, helper):
        element = Element("foo")
        element.set_attribute("type", "textarea")
        element.set_attribute("value", "Initial content")
        markup = helper.render(element)

        assert "<textarea" in markup
        assert ">Initial content<" in markup

    def test_renders_collection_as_expected(self, helper):
        element = Collection()
        element.set_label("foo")
        markup = helper.render(element)

        assert "<legend>foo</legend>" in markup

    def test_renders_button_as_expected(self, helper):
        element = Button("foo")
        element.set_label("My Button")
        markup = helper.render(element)

        assert "<button" in markup
        assert ">My Button<" in markup


class TestDispatcherBehaviour:
    def test_invoke_with_no_element_chains_helper(self, helper):
        assert helper() is helper

    def test_invoke_with_element_renders(self, helper):
        assert helper(Element("foo")) == helper.render(Element("foo"))

    def test_render_without_view_returns_empty_string(self):
        assert FormElement().render(Element("foo")) == ""

    def test_render_rejects_non_elements(self, helper):
        with pytest.raises(TypeError, match="requires an Element"):
            helper.render({"type": "text"})

    def test_rendering_does_not_mutate_attributes(self, helper):
        element = Select("foo", {"value_options": {"a": "A", "b": "B"}})
        element.set_attribute("multiple", True)
        element.set_attribute("class", "wide")
        before = element.get_attributes()

        helper.render(element)

        assert element.get_attributes() == before
        assert element.attributes["name"] == "foo"

    def test_add_type_maps_custom_type(self, helper):
        helper.add_type("notes", "form_textarea")
        element = Element("foo")
        element.set_attribute("type", "notes")
        assert helper.render(element).startswith("<textarea")

    def test_add_class_takes_precedence_over_type(self, helper):
        class Notes(Element):
            pass

        helper.add_class(Notes, "form_textarea")
        element = Notes("foo")
        element.set_attribute("type", "text")
        assert helper.render(element).startswith("<textarea")

    def test_set_default_helper(self, helper):
        helper.set_default_helper("form_hidden")
        assert 'type="hidden"' in helper.render(Element("foo"))

    def test_class_map_wins_for_csrf_hidden_type(self, helper):
        assert helper.resolve_helper(Csrf("foo")) == "form_hidden"
        assert helper.resolve_helper(Button("foo")) == "form_button"

    def test_add_class_overrides_existing_mapping(self, helper):
        helper.add_class(Button, "form_input")
        assert helper.resolve_helper(Button("go")) == "form_input"
        assert list(helper.class_map)[0] is Button
        assert len(helper.class_map) == 4

    def test_attribute_values_are_escaped(self, helper):
        element = Element("foo")
        element.set_attribute("placeholder", '"><script>')
        markup = helper.render(element)
        assert "<script>" not in markup
        assert "&quot;&gt;&lt;script&gt;" in markup
