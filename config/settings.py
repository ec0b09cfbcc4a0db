import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def env_list(name, default):
    value = os.environ.get(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(',') if item.strip()]


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'dev-insecure-key-change-me')
DEBUG = env_bool('DJANGO_DEBUG', False)
ALLOWED_HOSTS = env_list('DJANGO_ALLOWED_HOSTS', ['localhost', '127.0.0.1', 'testserver'])

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'blog',
    'portfolio',
]

# CLI-детектор должен стоять до всего, что смотрит на путь запроса
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'blog.middleware.CliBannerMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'
WSGI_APPLICATION = 'config.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('DJANGO_DB_PATH', str(BASE_DIR / 'db.sqlite3')),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'] + (
        ['rest_framework.renderers.BrowsableAPIRenderer'] if DEBUG else []
    ),
}

# Контент (markdown + YAML front matter), см. manage.py import_content
CONTENT_DIR = Path(os.environ.get('CONTENT_DIR', BASE_DIR / 'content'))

POSTS_PER_PAGE = 5
PROJECTS_PER_PAGE = 6

# Токены User-Agent, по которым узнаём консольные клиенты
CLI_USER_AGENTS = env_list('CLI_USER_AGENTS', ['curl', 'wget', 'httpie'])
CLI_BANNER_COLOR = env_bool('CLI_BANNER_COLOR', True)

SITE = {
    'name': 'dev-xdd',
    'url': os.environ.get('SITE_URL', 'https://www.dev-xdd.tech'),
    'description': 'Personal blog and portfolio of a backend developer',
    'author': 'akm-xdd',
    'role': 'Backend Developer',
    'avatar': 'https://avatars.githubusercontent.com/u/110248822?v=4',
    'bio': (
        "Hi! Welcome to my blog. I'm a backend developer with a little bit of "
        "frontend experience. I like to learn, code and play video games. "
        "You can take a look at my projects on my GitHub profile."
    ),
    'links': {
        'github': 'https://github.com/akm-xdd',
        'linkedin': 'https://linkedin.com/in/akm-glhf',
    },
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
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
        'blog': {
            'level': 'DEBUG' if DEBUG else 'INFO',
        },
        'portfolio': {
            'level': 'DEBUG' if DEBUG else 'INFO',
        },
    },
}
