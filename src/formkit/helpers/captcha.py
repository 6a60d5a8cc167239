"""Captcha helpers."""

from django.core.exceptions import ImproperlyConfigured
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from ..elements import Captcha
from .base import AbstractHelper

LABEL_APPEND = "append"
LABEL_PREPEND = "prepend"


class FormCaptcha(AbstractHelper):
    """Delegate to the helper named by the element's captcha adapter."""

    def render(self, element):
        if not isinstance(element, Captcha):
            raise TypeError(
                f"{type(self).__name__} requires a Captcha element; "
                f"received {type(element).__name__}"
            )
        captcha = element.get_captcha()
        if captcha is None:
            raise ImproperlyConfigured(
                f"{type(self).__name__} requires that the element has a "
                f"captcha adapter attached; none found"
            )
        return self.helper(captcha.get_helper_name()).render(element)


class FormCaptchaDumb(AbstractHelper):
    """Render the label, the reversed word and the answer inputs."""

    def __init__(self):
        super().__init__()
        self.separator = ""
        self.captcha_position = LABEL_APPEND

    def render(self, element):
        captcha = element.get_captcha()
        if captcha is None:
            raise ImproperlyConfigured(
                f"{type(self).__name__} requires that the element has a "
                f"captcha adapter attached; none found"
            )
        name = self.require_name(element)
        captcha.generate()

        label = format_html(
            "{} <b>{}</b>",
            self.translate(captcha.get_label()),
            captcha.get_word()[::-1],
        )
        inputs = self.render_captcha_inputs(element, name, captcha)

        if self.captcha_position == LABEL_PREPEND:
            return format_html("{}{}{}", inputs, mark_safe(self.separator), label)
        return format_html("{}{}{}", label, mark_safe(self.separator), inputs)

    def render_captcha_inputs(self, element, name, captcha):
        input_helper = self.helper("form_input")
        hidden = {
            "name": f"{name}[id]",
            "type": "hidden",
            "value": captcha.get_id(),
        }
        text = element.get_attributes()
        text.update({"name": f"{name}[input]", "type": "text", "value": ""})
        return format_html(
            "{}{}",
            input_helper.render_input(hidden),
            input_helper.render_input(text),
        )
