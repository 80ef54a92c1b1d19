"""
Django settings for the surfacelog project.

Every deploy-specific value is read from the environment so the same module
serves local development, CI and production.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default="false"):
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_int(name, default):
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return int(default)


def _env_list(name, default=""):
    return [part.strip() for part in os.getenv(name, default).split(",") if part.strip()]


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-surfacelog-dev-key")

DEBUG = _env_bool("DJANGO_DEBUG", "true")

ALLOWED_HOSTS = _env_list("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")
CSRF_TRUSTED_ORIGINS = _env_list("DJANGO_CSRF_TRUSTED_ORIGINS")


INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django.contrib.sites',
    'rest_framework',
    'allauth',
    'allauth.account',
    'allauth.socialaccount',
    'allauth.socialaccount.providers.google',
    'transmissions',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'allauth.account.middleware.AccountMiddleware',
]

ROOT_URLCONF = 'surfacelog.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'transmissions.context_processors.session_identity',
                'transmissions.context_processors.site_links',
            ],
        },
    },
]

WSGI_APPLICATION = 'surfacelog.wsgi.application'


# Database
# PostgreSQL when DB_NAME is set, SQLite otherwise.

if os.getenv("DB_NAME"):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.getenv("DB_NAME"),
            'USER': os.getenv("DB_USER", "postgres"),
            'PASSWORD': os.getenv("DB_PASSWORD", ""),
            'HOST': os.getenv("DB_HOST", "localhost"),
            'PORT': os.getenv("DB_PORT", "5432"),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

AUTH_USER_MODEL = 'transmissions.User'

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

AUTHENTICATION_BACKENDS = [
    'django.contrib.auth.backends.ModelBackend',
    'allauth.account.auth_backends.AuthenticationBackend',
]


# Internationalization

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


# Static files

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'


# Login / redirects

LOGIN_URL = 'log_in'
LOGIN_REDIRECT_URL = 'home'
LOGOUT_REDIRECT_URL = 'home'
REDIRECT_URL_WHEN_LOGGED_IN = 'home'


# django-allauth (Google sign-in)

SITE_ID = 1
ACCOUNT_ADAPTER = 'transmissions.adapters.CustomAccountAdapter'
SOCIALACCOUNT_ADAPTER = 'transmissions.adapters.CustomSocialAccountAdapter'
ACCOUNT_LOGIN_METHODS = {'email'}
ACCOUNT_SIGNUP_FIELDS = ['email*']
ACCOUNT_EMAIL_VERIFICATION = 'none'
SOCIALACCOUNT_LOGIN_ON_GET = True
SOCIALACCOUNT_PROVIDERS = {
    'google': {
        'APP': {
            'client_id': os.getenv("GOOGLE_CLIENT_ID", ""),
            'secret': os.getenv("GOOGLE_CLIENT_SECRET", ""),
            'key': '',
        },
        'SCOPE': ['profile', 'email'],
    }
}


# Django REST framework

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'transmissions.authentication.FirebaseAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticatedOrReadOnly',
    ],
}


# Firebase

FIREBASE_API_KEY = os.getenv("FIREBASE_API_KEY")
FIREBASE_SERVICE_ACCOUNT_FILE = os.getenv("FIREBASE_SERVICE_ACCOUNT_FILE")


# Surface Log tunables

SURFACELOG_FEED_LIMIT = _env_int("SURFACELOG_FEED_LIMIT", 25)
SURFACELOG_AGGREGATION_WINDOW = _env_int("SURFACELOG_AGGREGATION_WINDOW", 5000)
SURFACELOG_LEADERBOARD_SIZE = _env_int("SURFACELOG_LEADERBOARD_SIZE", 5)
SURFACELOG_NICEST_MIN_REPORTS = _env_int("SURFACELOG_NICEST_MIN_REPORTS", 5)
SURFACELOG_SEARCH_HANDLE_LIMIT = _env_int("SURFACELOG_SEARCH_HANDLE_LIMIT", 50)
SURFACELOG_SEARCH_REPORT_LIMIT = _env_int("SURFACELOG_SEARCH_REPORT_LIMIT", 200)
SURFACELOG_FLAG_HIDE_THRESHOLD = _env_int("SURFACELOG_FLAG_HIDE_THRESHOLD", 3)
SURFACELOG_SUPPORT_URL = os.getenv("SURFACELOG_SUPPORT_URL", "https://ko-fi.com/thesurfacelog")


# Logging

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'transmissions': {
            'handlers': ['console'],
            'level': os.getenv("SURFACELOG_LOG_LEVEL", "INFO"),
            'propagate': False,
        },
    },
}
