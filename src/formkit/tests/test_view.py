"""Tests for the rendering context and helper registry."""

import pytest

from django.core.exceptions import ImproperlyConfigured
from django.test.utils import override_settings

from formkit.elements import Element
from formkit.helpers import FormElement, FormInput
from formkit.view import Doctype, View


class TestView:
    def test_default_doctype_is_html5(self, view):
        assert view.doctype == Doctype.HTML5
        assert view.is_html5()
        assert not view.is_xhtml()

    @override_settings(FORMKIT_DOCTYPE="XHTML1_STRICT")
    def test_doctype_from_settings(self):
        view = View()
        assert view.doctype == "XHTML1_STRICT"
        assert view.is_xhtml()

    def test_unknown_doctype(self):
        with pytest.raises(ImproperlyConfigured, match="Unknown doctype"):
            View(doctype="HTML6")

    def test_escaping(self, view):
        assert view.escape_html("<b>") == "&lt;b&gt;"
        assert view.escape_attr('"x"') == "&quot;x&quot;"


class TestHelperRegistry:
    def test_helpers_are_bound_and_cached(self, view):
        helper = view.helper("form_element")
        assert isinstance(helper, FormElement)
        assert helper.get_view() is view
        assert view.helper("form_element") is helper

    def test_names_are_normalized(self, view):
        assert view.helper("Form-Element") is view.helper("form_element")

    def test_unknown_helper(self, view):
        with pytest.raises(ImproperlyConfigured, match="form_nope") as exc_info:
            view.helper("form_nope")
        assert exc_info.value.__suppress_context__

    def test_register_overrides_helper(self, view):
        class LoudInput(FormInput):
            def render(self, element):
                return super().render(element).upper()

        view.helpers.register("form_input", LoudInput)
        markup = view.helper("form_element").render(Element("foo"))
        assert markup.startswith("<INPUT")

    def test_helpers_argument(self):
        view = View(helpers={"form_custom": FormInput})
        assert view.helpers.has("form_custom")
        assert isinstance(view.helper("form_custom"), FormInput)
