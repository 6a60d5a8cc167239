"""Minimal captcha adapter used by the Captcha form element."""

from django.core.exceptions import ValidationError
from django.utils.crypto import constant_time_compare, get_random_string

WORD_CHARS = "abcdefghjkmnpqrstuvwxyz"


class DumbCaptcha:
    """Ask the user to type a random word backwards.

    ``generate()`` stores the word in ``session`` under a fresh id; the
    submitted value is a mapping with ``id`` and ``input`` keys.
    """

    helper_name = "form_captcha_dumb"

    def __init__(
        self,
        label="Please type this word backwards",
        word_length=8,
        session=None,
    ):
        self.label = label
        self.word_length = word_length
        self.session = session if session is not None else {}
        self.id = None
        self.word = None

    def generate(self):
        self.id = get_random_string(32)
        self.word = get_random_string(
            self.word_length, allowed_chars=WORD_CHARS
        )
        self.session[f"formkit_captcha_{self.id}"] = self.word
        return self.id

    def get_id(self):
        if self.id is None:
            self.generate()
        return self.id

    def get_word(self):
        if self.word is None:
            self.generate()
        return self.word

    def get_label(self):
        return self.label

    def get_helper_name(self):
        return self.helper_name

    def validate(self, value):
        value = value or {}
        word = self.session.get(f"formkit_captcha_{value.get('id')}")
        answer = str(value.get("input", ""))
        if word is None or not constant_time_compare(answer, word):
            raise ValidationError(
                "Captcha value is wrong", code="bad_captcha"
            )

    def is_valid(self, value):
        try:
            self.validate(value)
        except ValidationError:
            return False
        return True
