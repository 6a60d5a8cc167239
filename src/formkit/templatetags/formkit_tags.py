"""Template tags rendering form elements."""

from django import template

from formkit.elements import Csrf, Fieldset
from formkit.view import View

register = template.Library()


def _get_view(context):
    """Reuse one View per template render."""
    view = context.render_context.get("formkit_view")
    if view is None:
        view = View()
        context.render_context["formkit_view"] = view
    return view


def _bind_session(context, element):
    """Store CSRF tokens in the request session when there is one."""
    request = context.get("request")
    session = getattr(request, "session", None)
    if session is None:
        return
    targets = element if isinstance(element, Fieldset) else [element]
    for target in targets:
        if isinstance(target, Fieldset):
            _bind_session(context, target)
        elif isinstance(target, Csrf):
            target.get_csrf_validator().bind_session(session)


@register.simple_tag(takes_context=True)
def form_element(context, element):
    """Render an element with the helper matching its class or type."""
    _bind_session(context, element)
    return _get_view(context).helper("form_element").render(element)


@register.simple_tag(takes_context=True)
def form_row(context, element):
    """Render an element with its label and errors."""
    _bind_session(context, element)
    return _get_view(context).helper("form_row").render(element)


@register.simple_tag(takes_context=True)
def form_collection(context, element):
    """Render a fieldset or collection."""
    _bind_session(context, element)
    return _get_view(context).helper("form_collection").render(element)
