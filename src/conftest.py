"""Shared pytest fixtures for formkit tests."""

import pytest

from django.conf import settings

# Keep label translation on but deterministic in tests
settings.LANGUAGE_CODE = "en-us"
settings.FORMKIT_DOCTYPE = "HTML5"


@pytest.fixture
def view():
    from formkit.view import View

    return View()


@pytest.fixture
def helper(view):
    """The dispatcher, bound to a fresh view."""
    from formkit.helpers import FormElement

    return FormElement().set_view(view)


@pytest.fixture
def session():
    return {}
