"""CSRF token validator backing the Csrf form element."""

import logging
import time

from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils.crypto import (
    constant_time_compare,
    get_random_string,
    salted_hmac,
)

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "formkit_csrf"


class CsrfValidator:
    """Issue a token for a named element and check submitted values.

    The token is stored in ``session``, any mutable mapping. Pass
    ``request.session`` to persist it across requests; the default is a
    private dict.
    """

    def __init__(self, name="csrf", salt=None, timeout=None, session=None):
        self.name = name
        self.salt = (
            salt
            if salt is not None
            else getattr(settings, "FORMKIT_CSRF_SALT", "salt")
        )
        self.timeout = (
            timeout
            if timeout is not None
            else getattr(settings, "FORMKIT_CSRF_TIMEOUT", 300)
        )
        self.session = session if session is not None else {}
        self._hash = None

    def bind_session(self, session):
        """Switch to another session mapping; the next hash is issued there."""
        if session is self.session:
            return self
        self.session = session
        self._hash = None
        return self

    @property
    def session_key(self):
        return f"{SESSION_KEY_PREFIX}_{self.salt}_{self.name}"

    def get_hash(self, regenerate=False):
        """Return the current token, generating one when needed."""
        if self._hash is None or regenerate:
            self._generate_hash()
        return self._hash

    def _generate_hash(self):
        token = get_random_string(32)
        self._hash = salted_hmac(
            f"{self.salt}:{self.name}", token
        ).hexdigest()
        expires = time.time() + self.timeout if self.timeout else None
        self.session[self.session_key] = {
            "hash": self._hash,
            "expires": expires,
        }

    def validate(self, value):
        """Raise ValidationError unless value matches the stored token."""
        stored = self.session.get(self.session_key)
        if not stored:
            logger.warning("CSRF token for %r missing from session", self.name)
            raise ValidationError(
                "The form submitted did not originate from the expected site.",
                code="not_same",
            )

        expires = stored.get("expires")
        if expires is not None and expires < time.time():
            logger.warning("CSRF token for %r expired", self.name)
            raise ValidationError(
                "The form submitted did not originate from the expected site.",
                code="not_same",
            )

        if not constant_time_compare(str(value or ""), stored["hash"]):
            logger.warning("CSRF token mismatch for %r", self.name)
            raise ValidationError(
                "The form submitted did not originate from the expected site.",
                code="not_same",
            )

    def is_valid(self, value):
        try:
            self.validate(value)
        except ValidationError:
            return False
        return True
