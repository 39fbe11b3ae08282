import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    return os.environ.get(name, str(default)).lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.environ.get("HIFZ_SECRET_KEY", "insecure-dev-key-change-me")
DEBUG = env_bool("HIFZ_DEBUG")
ALLOWED_HOSTS = os.environ.get("HIFZ_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "rest_framework",
    "hifz",
    "revision.apps.RevisionConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "hifz.middleware.HeaderLoginMiddleware",
]

ROOT_URLCONF = "hifz.urls"
WSGI_APPLICATION = "hifz.wsgi.application"
ASGI_APPLICATION = "hifz.asgi.application"

AUTH_USER_MODEL = "hifz.User"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("HIFZ_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Review dates are calendar days in this zone
TIME_ZONE = os.environ.get("HIFZ_TIME_ZONE", "UTC")
USE_TZ = True
USE_I18N = False

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    },
    "quran-text": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "quran-text",
        "TIMEOUT": int(os.environ.get("HIFZ_QURAN_TEXT_TTL", 7 * 24 * 3600)),
        "OPTIONS": {"MAX_ENTRIES": 114, "CULL_FREQUENCY": 4},
    },
}

QURAN_API_BASE_URL = os.environ.get("HIFZ_QURAN_API_BASE_URL", "https://api.alquran.cloud/v1")
QURAN_API_TIMEOUT = float(os.environ.get("HIFZ_QURAN_API_TIMEOUT", 10))

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "hifz.authentication.HeaderLoginAuthentication",
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
}

LOG_LEVEL = os.environ.get("HIFZ_LOG_LEVEL", "INFO")
LOG_FORMAT = os.environ.get("HIFZ_LOG_FORMAT", "json")
