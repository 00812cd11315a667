# backend/settings.py
from pathlib import Path
from decouple import AutoConfig, Csv
from datetime import timedelta
import sys

BASE_DIR = Path(__file__).resolve().parent.parent
config = AutoConfig(search_path=BASE_DIR)

# Ensure repository root is in sys.path so `apps.*` packages are importable
REPO_ROOT = BASE_DIR.parent.parent.parent  # <repo>/
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

# ==========================================
# BASIC CONFIGURATION
# ==========================================
SECRET_KEY = config(
    "CONDUIT_SECRET_KEY",
    default="conduit-development-secret-key-change-me-in-production",
)
DEBUG = config('DEBUG', default=False, cast=bool)
ALLOWED_HOSTS = config('CONDUIT_ALLOWED_HOSTS', default='*', cast=Csv())
APPEND_SLASH = False

# ==========================================
# CONDUIT CONFIGURATION
# ==========================================
# Lifetime of tokens issued by register/login/update-user
TOKEN_LIFETIME_MINUTES = config('CONDUIT_TOKEN_LIFETIME_MINUTES', default=60, cast=int)

# Whether PUT /api/user may change the password
CONDUIT_ALLOW_PASSWORD_CHANGE = config('CONDUIT_ALLOW_PASSWORD_CHANGE', default=True, cast=bool)

# ==========================================
# DJANGO APPS
# ==========================================
DJANGO_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
]

THIRD_PARTY_APPS = [
    'corsheaders',
    'rest_framework',
]

LOCAL_APPS = [
    'api.apps.ApiConfig',
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# ==========================================
# REST FRAMEWORK
# ==========================================
# Authentication is done by the core AuthorizationGuard inside the views,
# so DRF's own authentication/permission machinery is switched off.
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
}

# ==========================================
# JWT SETTINGS
# ==========================================
SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(minutes=TOKEN_LIFETIME_MINUTES),
    "ALGORITHM": "HS256",
    "SIGNING_KEY": SECRET_KEY,
    "USER_ID_CLAIM": "user_id",
    "TOKEN_TYPE_CLAIM": "token_type",
    "JTI_CLAIM": "jti",
}

# ==========================================
# MIDDLEWARE
# ==========================================
MIDDLEWARE = [
    # Correlation ID - early for request tracking
    'api.middleware.correlation_id.CorrelationIDMiddleware',

    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'backend.urls'

WSGI_APPLICATION = 'backend.wsgi.application'

# ==========================================
# DATABASES
# ==========================================
# Domain state lives in the core's InMemoryStore; the database only backs
# Django's own contrib apps.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': config('CONDUIT_SQLITE_PATH', default=str(BASE_DIR / 'db.sqlite3')),
    }
}

# ==========================================
# LOGGING
# ==========================================
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
        'json': {
            '()': 'pythonjsonlogger.jsonlogger.JsonFormatter',
            'format': '%(asctime)s %(name)s %(levelname)s %(message)s %(pathname)s %(lineno)d %(funcName)s %(correlation_id)s',
        },
    },
    'filters': {
        'correlation_id': {
            '()': 'api.middleware.logging_filter.CorrelationIDFilter',
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG' if DEBUG else 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'simple' if DEBUG else 'json',  # JSON in production
            'filters': ['correlation_id'],
        },
    },
    'loggers': {
        'api': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': True,
        },
        'apps.backend.core': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': True,
        },
        'rest_framework_simplejwt': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': True,
        },
    },
}

# ==========================================
# PASSWORD CONFIGURATION
# ==========================================
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.PBKDF2PasswordHasher',
    'django.contrib.auth.hashers.PBKDF2SHA1PasswordHasher',
    'django.contrib.auth.hashers.ScryptPasswordHasher',
]

# ==========================================
# INTERNATIONALIZATION
# ==========================================
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ==========================================
# CORS CONFIGURATION
# ==========================================
if DEBUG:
    CORS_ALLOW_ALL_ORIGINS = True
else:
    CORS_ALLOWED_ORIGINS = config('CONDUIT_CORS_ALLOWED_ORIGINS', default='', cast=Csv())

CORS_ALLOW_HEADERS = [
    'accept',
    'accept-encoding',
    'authorization',
    'content-type',
    'origin',
    'user-agent',
    'x-requested-with',
    'x-request-id',
]

CORS_ALLOW_METHODS = [
    'DELETE',
    'GET',
    'OPTIONS',
    'POST',
    'PUT',
]

CORS_EXPOSE_HEADERS = [
    'content-type',
    'x-request-id',
]

# ==========================================
# SECURITY SETTINGS
# ==========================================
if not DEBUG:
    SECURE_CONTENT_TYPE_NOSNIFF = True

# Trusted proxy header for HTTPS detection
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
