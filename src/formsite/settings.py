"""Django settings for the formkit demo project."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get(
    "SECRET_KEY", "dev-secret-key-change-in-production"
)

DEBUG = os.environ.get("DEBUG", "True").lower() in ("true", "1", "yes")

ALLOWED_HOSTS = [
    h.strip()
    for h in os.environ.get("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "formkit",
]

MIDDLEWARE = [
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DATABASE_PATH", BASE_DIR / "db.sqlite3"),
    }
}

SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Form rendering
FORMKIT_DOCTYPE = os.environ.get("FORMKIT_DOCTYPE", "HTML5")
FORMKIT_CSRF_TIMEOUT = int(os.environ.get("FORMKIT_CSRF_TIMEOUT", "300"))
FORMKIT_CSRF_SALT = os.environ.get("FORMKIT_CSRF_SALT", "salt")
FORMKIT_TRANSLATE_LABELS = os.environ.get(
    "FORMKIT_TRANSLATE_LABELS", "True"
).lower() in ("true", "1", "yes")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "formkit": {
            "handlers": ["console"],
            "level": os.environ.get("FORMKIT_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}

# Startup validation
from django.core.exceptions import ImproperlyConfigured

_missing = []

# In production, SECRET_KEY must be explicitly set
if not DEBUG and SECRET_KEY == "dev-secret-key-change-in-production":
    _missing.append("SECRET_KEY")

# ALLOWED_HOSTS must be explicitly set in production
if not DEBUG and ALLOWED_HOSTS == ["localhost", "127.0.0.1"]:
    _missing.append("ALLOWED_HOSTS")

if _missing:
    raise ImproperlyConfigured(
        f"Missing required environment variable(s): {', '.join(_missing)}."
    )
