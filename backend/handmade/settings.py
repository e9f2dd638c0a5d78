# =============================================================================
# HANDMADE ART STOREFRONT: Django Settings
# =============================================================================
# STATUS: Completo
# PURPOSE: Configuracion del backend de ruteo bi-dominio (es/en)
# BUSINESS LOGIC: Cada dominio canonico sirve un idioma; el resto cae en 'es'
# NEXT STEPS: Mover SEO copy a settings si se agregan mas idiomas
# =============================================================================

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-handmade-art-dev-key')

DEBUG = os.environ.get('DJANGO_DEBUG', 'false').lower() in ('1', 'true', 'yes')

# El sitio responde para varios dominios (artehechoamano.com, handmadeart.store, previews)
ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get('DJANGO_ALLOWED_HOSTS', '*').split(',')
    if host.strip()
]

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'apps.storefront',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'handmade.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {'context_processors': []},
    },
]

WSGI_APPLICATION = 'handmade.wsgi.application'

# Sin persistencia propia; sqlite solo para que Django arranque
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

LANGUAGE_CODE = 'es'
LANGUAGES = [
    ('es', 'Español'),
    ('en', 'English'),
]
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# =============================================================================
# REST FRAMEWORK
# =============================================================================
# Endpoints publicos de solo lectura: sin autenticacion, solo JSON
REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
}

# =============================================================================
# STOREFRONT: dominios, idiomas y SEO
# =============================================================================
# DOMAINS es una lista ORDENADA: gana la primera regla cuyo fragment
# aparezca en el host. Para un idioma nuevo basta con agregar una regla.
STOREFRONT = {
    'DOMAINS': [
        {
            'fragment': 'artehechoamano',
            'locale': 'es',
            'domain': 'artehechoamano.com',
            'region': 'CR',
        },
        {
            'fragment': 'handmadeart',
            'locale': 'en',
            'domain': 'handmadeart.store',
            'region': 'US',
        },
    ],
    'DEFAULT_LOCALE': 'es',
    'FALLBACK_HOST': 'localhost',
    'SITE_URL': os.environ.get('STOREFRONT_SITE_URL', 'https://handmadeart.store'),
    'SITE_NAME': 'Handmade Art',
    'TWITTER_CREATOR': '@handmadeart',
    'ROBOTS_DISALLOW': ['/api/', '/admin/', '/_next/', '/auth/'],
}

# =============================================================================
# LOGGING
# =============================================================================
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
        'apps': {
            'handlers': ['console'],
            'level': os.environ.get('DJANGO_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
