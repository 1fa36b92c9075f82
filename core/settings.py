import os
import environ
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Initialise environ
env = environ.Env(
    # default types + values
    DEBUG=(bool, False)
)

# Read .env file (optional if using system env)
environ.Env.read_env(os.path.join(BASE_DIR, ".env"))

# SECURITY
SECRET_KEY = env("SECRET_KEY", default="insecure-dev-key-change-me")
DEBUG = env("DEBUG")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["*"])

# Application definition
INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'django.contrib.staticfiles',
    'rest_framework',
    'drf_spectacular',
    'authflow',
    'players',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

REST_FRAMEWORK = {
    # the player session binding is the only auth this server does
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.AllowAny',
    ),
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Play Games server skeleton",
    "DESCRIPTION": "Exchanges client auth codes for Play Games API access on the player's behalf.",
    "VERSION": "1.0.0",
}

# CACHES
CACHES = {
    "default": env.cache("CACHE_URL", default="locmemcache://")
}

# SESSIONS
# Sessions live in the cache; there is no database.
SESSION_ENGINE = "django.contrib.sessions.backends.cache"
# The mobile client plumbs the servlet-style cookie by hand.
SESSION_COOKIE_NAME = env("SESSION_COOKIE_NAME", default="JSESSIONID")
APPEND_SLASH = False

# Play Games / OAuth config
PLAY_GAMES = {
    "CLIENT_SECRET_FILE": env("CLIENT_SECRET_FILE", default=str(BASE_DIR / "client_secret.json")),
    "CLIENT_ID": env("GOOGLE_CLIENT_ID", default=""),
    "CLIENT_SECRET": env("GOOGLE_CLIENT_SECRET", default=""),
    "TOKEN_ENDPOINT": env("PLAY_GAMES_TOKEN_ENDPOINT", default="https://www.googleapis.com/oauth2/v4/token"),
    "API_BASE": env("PLAY_GAMES_API_BASE", default="https://www.googleapis.com/games/v1"),
    "TIMEOUT": env.int("PLAY_GAMES_TIMEOUT", default=10),
}

GAME_SERVER_PORT = env.int("GAME_SERVER_PORT", default=8765)

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

ROOT_URLCONF = 'core.urls'
WSGI_APPLICATION = 'core.wsgi.application'

# Database
# Player records are kept in memory by players.store; nothing is persisted.
DATABASES = {}

# LOGGING
LOG_LEVEL = env("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{asctime} {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}

# TIMEZONE & LANGUAGE
LANGUAGE_CODE = "en-us"
TIME_ZONE = env("TIME_ZONE", default="UTC")
USE_I18N = True
USE_TZ = True

# STATIC
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"
