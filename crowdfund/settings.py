# crowdfund/settings.py
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-dev-key-change-me")
DEBUG = env_bool("DEBUG", True)
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django.contrib.humanize",
    # local apps
    "users.apps.UsersConfig",
    "kyc.apps.KycConfig",
    "payment.apps.PaymentConfig",
    "investment.apps.InvestmentConfig",
    "founders.apps.FoundersConfig",
    "analytics.apps.AnalyticsConfig",
    "cms.apps.CmsConfig",
    "dashboard.apps.DashboardConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "crowdfund.monitoring.ExceptionMonitoringMiddleware",
]

ROOT_URLCONF = "crowdfund.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "crowdfund.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("SQLITE_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "crowdfund",
    }
}

AUTH_USER_MODEL = "users.CustomUser"

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
]

LOGIN_URL = "login"
LOGIN_REDIRECT_URL = "onboarding"
LOGOUT_REDIRECT_URL = "dashboard:home"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Onboarding / KYC
KYC_AUTO_APPROVE = env_bool("KYC_AUTO_APPROVE", True)
KYC_MINIMUM_AGE = int(os.getenv("KYC_MINIMUM_AGE", "18"))

# Sandbox payments
PAYMENT_SANDBOX_PROVIDER = os.getenv("PAYMENT_SANDBOX_PROVIDER", "stripe_test")
INVESTMENT_CONFIRMATION_DELAY_SECONDS = float(os.getenv("INVESTMENT_CONFIRMATION_DELAY_SECONDS", "3"))
SEED_DEMO_CAMPAIGNS = env_bool("SEED_DEMO_CAMPAIGNS", True)

# Analytics
ANALYTICS_ENABLED = env_bool("ANALYTICS_ENABLED", True)
ANALYTICS_CONSENT_COOKIE = "analytics_consent"

# Headless CMS (Contentful)
CONTENTFUL_SPACE_ID = os.getenv("CONTENTFUL_SPACE_ID")
CONTENTFUL_ENVIRONMENT = os.getenv("CONTENTFUL_ENVIRONMENT", "master")
CONTENTFUL_DELIVERY_TOKEN = os.getenv("CONTENTFUL_DELIVERY_TOKEN")
CONTENTFUL_PREVIEW_TOKEN = os.getenv("CONTENTFUL_PREVIEW_TOKEN")
CMS_PREVIEW_SECRET = os.getenv("CMS_PREVIEW_SECRET")
CMS_CACHE_SECONDS = int(os.getenv("CMS_CACHE_SECONDS", "300"))
CMS_TIMEOUT_SECONDS = float(os.getenv("CMS_TIMEOUT_SECONDS", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {"handlers": ["console"], "level": "INFO", "propagate": False},
        **{
            name: {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False}
            for name in (
                "crowdfund",
                "users",
                "kyc",
                "payment",
                "investment",
                "founders",
                "analytics",
                "cms",
                "dashboard",
            )
        },
    },
}
