"""Tests for the form element model and its collaborators."""

import pytest

from django.core.exceptions import ValidationError
from django.test.utils import override_settings

from formkit.captcha import DumbCaptcha
from formkit.csrf import CsrfValidator
from formkit.elements import (
    Button,
    Checkbox,
    Collection,
    Csrf,
    Element,
    Fieldset,
    MultiCheckbox,
    Radio,
    Select,
    Textarea,
)


class TestElement:
    def test_name_is_an_attribute(self):
        element = Element("foo")
        assert element.get_name() == "foo"
        assert element.get_attribute("name") == "foo"

    def test_value_attribute_alias(self):
        element = Element("foo")
        element.set_attribute("value", "bar")
        assert element.get_value() == "bar"
        assert element.get_attribute("value") == "bar"
        assert "value" not in element.get_attributes()

    def test_get_attributes_returns_copy(self):
        element = Element("foo")
        attributes = element.get_attributes()
        attributes["class"] = "x"
        assert not element.has_attribute("class")

    def test_options_set_label(self):
        element = Element(
            "foo", {"label": "Foo", "label_attributes": {"class": "l"}}
        )
        assert element.get_label() == "Foo"
        assert element.get_label_attributes() == {"class": "l"}
        assert element.get_option("label") == "Foo"

    def test_remove_attribute(self):
        element = Element("foo").set_attribute("class", "x")
        element.remove_attribute("class")
        assert element.get_attribute("class") is None

    @pytest.mark.parametrize(
        "element_class, element_type",
        [
            (Textarea, "textarea"),
            (Button, "button"),
            (Checkbox, "checkbox"),
            (MultiCheckbox, "multi_checkbox"),
            (Radio, "radio"),
            (Select, "select"),
            (Csrf, "hidden"),
        ],
    )
    def test_default_types(self, element_class, element_type):
        assert element_class("foo").get_attribute("type") == element_type


class TestMultiValueElements:
    def test_options_attribute_sets_value_options(self):
        element = Select("foo")
        element.set_attribute("options", {"a": "A"})
        assert element.get_value_options() == {"a": "A"}
        assert not element.has_attribute("options")

    def test_multi_checkbox_defaults(self):
        element = MultiCheckbox("foo")
        assert element.use_hidden_element is False
        assert element.unchecked_value == ""

    def test_checkbox_defaults(self):
        element = Checkbox("foo")
        assert element.use_hidden_element is True
        assert element.checked_value == "1"
        assert element.unchecked_value == "0"
        assert not element.is_checked()

    def test_checkbox_boolean_value(self):
        assert Checkbox("foo").set_value(True).is_checked()

    def test_select_multiple(self):
        element = Select("foo")
        assert not element.is_multiple()
        element.set_attribute("multiple", True)
        assert element.is_multiple()


class TestFieldsetAndCollection:
    def test_fieldset_keeps_insertion_order(self):
        fieldset = Fieldset("f")
        fieldset.add(Element("a")).add(Fieldset("b")).add(Element("c"))
        assert [child.get_name() for child in fieldset] == ["a", "b", "c"]
        assert [e.get_name() for e in fieldset.get_elements()] == ["a", "c"]
        assert [f.get_name() for f in fieldset.get_fieldsets()] == ["b"]
        assert len(fieldset) == 3

    def test_fieldset_add_requires_element(self):
        with pytest.raises(TypeError):
            Fieldset("f").add("not an element")

    def test_fieldset_add_requires_name(self):
        with pytest.raises(ValueError):
            Fieldset("f").add(Element())

    def test_collection_name_is_optional(self):
        assert Collection().get_name() is None

    def test_collection_clones_target(self):
        target = Element("phone")
        collection = Collection("phones")
        collection.set_target_element(target)
        collection.set_count(3)
        names = [child.get_name() for child in collection]
        assert names == ["0", "1", "2"]
        assert target.get_name() == "phone"
        assert all(child is not target for child in collection)

    def test_template_element_uses_placeholder(self):
        collection = Collection(
            "phones",
            {"target_element": Element("phone"), "template_placeholder": "__i__"},
        )
        assert collection.create_template_element().get_name() == "__i__"


class TestCsrf:
    def test_value_is_validator_hash(self):
        element = Csrf("foo")
        assert element.get_value() == element.get_csrf_validator().get_hash()

    def test_input_specification(self):
        element = Csrf("foo")
        spec = element.get_input_specification()
        assert spec["name"] == "foo"
        assert spec["required"] is True
        assert spec["validators"] == [element.get_csrf_validator()]

    def test_csrf_options_reach_validator(self):
        element = Csrf("foo", {"csrf_options": {"salt": "pepper", "timeout": 10}})
        validator = element.get_csrf_validator()
        assert validator.salt == "pepper"
        assert validator.timeout == 10
        assert validator.name == "foo"


class TestCsrfValidator:
    def test_hash_is_stable_until_regenerated(self, session):
        validator = CsrfValidator("foo", session=session)
        first = validator.get_hash()
        assert validator.get_hash() == first
        assert validator.get_hash(regenerate=True) != first

    def test_validates_issued_token(self, session):
        validator = CsrfValidator("foo", session=session)
        token = validator.get_hash()
        assert validator.is_valid(token)
        assert not validator.is_valid("nope")
        assert not validator.is_valid(None)

    def test_token_stored_in_session(self, session):
        validator = CsrfValidator("foo", session=session)
        token = validator.get_hash()
        assert session[validator.session_key]["hash"] == token

    def test_missing_session_token_raises(self):
        with pytest.raises(ValidationError) as excinfo:
            CsrfValidator("foo").validate("abc")
        assert excinfo.value.code == "not_same"

    def test_expired_token_rejected(self, session, monkeypatch):
        validator = CsrfValidator("foo", timeout=10, session=session)
        token = validator.get_hash()
        monkeypatch.setattr("formkit.csrf.time.time", lambda: 10**12)
        assert not validator.is_valid(token)

    def test_zero_timeout_never_expires(self, session):
        validator = CsrfValidator("foo", timeout=0, session=session)
        validator.get_hash()
        assert session[validator.session_key]["expires"] is None

    @override_settings(FORMKIT_CSRF_SALT="pepper", FORMKIT_CSRF_TIMEOUT=60)
    def test_defaults_from_settings(self):
        validator = CsrfValidator("foo")
        assert validator.salt == "pepper"
        assert validator.timeout == 60

    def test_bind_session_issues_new_hash(self, session):
        validator = CsrfValidator("foo")
        validator.get_hash()
        validator.bind_session(session)
        token = validator.get_hash()
        assert session[validator.session_key]["hash"] == token


class TestDumbCaptcha:
    def test_accepts_word(self, session):
        captcha = DumbCaptcha(session=session)
        captcha_id = captcha.generate()
        assert captcha.is_valid({"id": captcha_id, "input": captcha.get_word()})
        assert not captcha.is_valid({"id": captcha_id, "input": "wrong"})
        assert not captcha.is_valid(None)

    def test_word_length(self):
        captcha = DumbCaptcha(word_length=5)
        assert len(captcha.get_word()) == 5
        assert captcha.get_helper_name() == "form_captcha_dumb"
