"""
Django settings for portfolio_site project.

Every value is read from the environment (a local ``.env`` is loaded first).
"""

import os
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env", override=False)


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getbool(name: str, default: bool = False) -> bool:
    return (_getenv(name, "true" if default else "false") or "").lower() in {"1", "true", "yes", "on"}


SECRET_KEY = _getenv("DJANGO_SECRET_KEY", "dev-insecure-portfolio-key")
DEBUG = _getbool("DEBUG", True)
ALLOWED_HOSTS = [h.strip() for h in (_getenv("ALLOWED_HOSTS", "*") or "").split(",") if h.strip()]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "django_filters",
    "drf_spectacular",
    "django_celery_beat",
    "content",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "portfolio_site.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "portfolio_site.wsgi.application"

# Hosted Postgres (Supabase) when POSTGRES_HOST is set, SQLite otherwise
if _getenv("POSTGRES_HOST"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "HOST": _getenv("POSTGRES_HOST"),
            "PORT": _getenv("POSTGRES_PORT", "5432"),
            "NAME": _getenv("POSTGRES_DB", "postgres"),
            "USER": _getenv("POSTGRES_USER", "postgres"),
            "PASSWORD": _getenv("POSTGRES_PASSWORD", ""),
            "CONN_MAX_AGE": int(_getenv("POSTGRES_CONN_MAX_AGE", "60") or 60),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": _getenv("SQLITE_PATH", str(BASE_DIR / "db.sqlite3")),
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = _getenv("TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"
MEDIA_URL = "/media/"
MEDIA_ROOT = Path(_getenv("MEDIA_ROOT", str(BASE_DIR / "media")))

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
}

# Supabase Storage for uploaded media (see content.storage_backends)
SUPABASE_PROJECT_URL = _getenv("SUPABASE_PROJECT_URL", "") or _getenv("SUPABASE_URL", "") or ""
SUPABASE_SERVICE_ROLE_KEY = _getenv("SUPABASE_SERVICE_ROLE_KEY")
SUPABASE_ANON_KEY = _getenv("SUPABASE_ANON_KEY", "") or ""
SUPABASE_BUCKET = _getenv("SUPABASE_BUCKET", "portfolio")

# JSON fallback document used when the database is unreachable
PORTFOLIO_SNAPSHOT_PATH = _getenv("PORTFOLIO_SNAPSHOT_PATH", str(BASE_DIR / "var" / "profileData.json"))

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework_simplejwt.authentication.JWTAuthentication",
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": ["content.permissions.IsAdminOrReadOnly"],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_THROTTLE_RATES": {
        "contact": _getenv("CONTACT_THROTTLE_RATE", "5/hour"),
    },
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Portfolio content API",
    "VERSION": "1.0.0",
}

# Session lengths mirror the admin panel: one hour, or a week with "remember me"
SESSION_DURATION = timedelta(hours=1)
EXTENDED_SESSION_DURATION = timedelta(days=7)

SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": SESSION_DURATION,
    "REFRESH_TOKEN_LIFETIME": EXTENDED_SESSION_DURATION,
}

CELERY_BROKER_URL = _getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
CELERY_RESULT_BACKEND = _getenv("CELERY_RESULT_BACKEND", CELERY_BROKER_URL)
CELERY_TASK_ALWAYS_EAGER = _getbool("CELERY_TASK_ALWAYS_EAGER", False)
CELERY_BEAT_SCHEDULER = "django_celery_beat.schedulers:DatabaseScheduler"

EMAIL_BACKEND = _getenv("EMAIL_BACKEND", "django.core.mail.backends.console.EmailBackend")
EMAIL_HOST = _getenv("EMAIL_HOST", "localhost")
EMAIL_PORT = int(_getenv("EMAIL_PORT", "25") or 25)
EMAIL_HOST_USER = _getenv("EMAIL_HOST_USER", "") or ""
EMAIL_HOST_PASSWORD = _getenv("EMAIL_HOST_PASSWORD", "") or ""
EMAIL_USE_TLS = _getbool("EMAIL_USE_TLS", False)
DEFAULT_FROM_EMAIL = _getenv("DEFAULT_FROM_EMAIL", "contact@example.com")

LOG_LEVEL = (_getenv("LOG_LEVEL", "INFO") or "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "content": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "django.request": {"handlers": ["console"], "level": "WARNING", "propagate": False},
    },
}
