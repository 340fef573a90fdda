"""Django settings for test project."""

from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = "django-insecure-test-key-for-development-only"  # noqa: S105

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = ["*"]

# Application definition
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "tests" / "test_project" / "templates"],
        "APP_DIRS": False,
        "OPTIONS": {},
    },
]

# Database
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Email
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
DEFAULT_FROM_EMAIL = "webmaster@example.com"

# Logging Configuration
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
}


# Test variables
#  - Subscriptions module
CAMPAIGN_MAILING_LISTS_BACKEND = {
    "BACKEND": "campaign.subscriptions.backends.locmem.LocMemBackend",
}
CAMPAIGN_FROM_NAMES_EMAILS = [
    {"name": "Site one news", "email": "news@one.example.com", "reply_to": "contact@one.example.com", "site_id": 1},
    {"name": "Campaign", "email": "campaign@example.com"},
]
CAMPAIGN_SITE_URLS = {
    1: "https://one.example.com",
    2: "https://two.example.com/",
    3: "https://three.example.com",
}
