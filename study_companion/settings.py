"""
Study Companion 서버 Django 설정.

환경변수와 `.env`는 `EnvSettings`(pydantic-settings)로 한 번에 읽어 검증하고,
아래 Django 설정 상수는 모두 그 값에서 파생됩니다.
로드맵 생성기/분석기 자체는 설정을 읽지 않으며, 요청 제한값(`STUDY_*`)은
controller 계층에서만 사용합니다.

주요 환경변수:
    - `DJANGO_SECRET_KEY`, `DJANGO_DEBUG`, `DJANGO_ALLOWED_HOSTS`
    - `STUDY_DEFAULT_DAILY_MINUTES`: 요청에 daily_minutes가 없을 때의 기본값
    - `STUDY_MAX_CONTENT_CHARS`: content 또는 sources 본문 합계의 최대 길이
    - `STUDY_MAX_SOURCES`: 한 요청에서 병합할 수 있는 최대 자료 수
    - `LOG_LEVEL`: study_core 로거 레벨
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class EnvSettings(BaseSettings):
    """서버 환경변수 스키마."""

    DJANGO_SECRET_KEY: SecretStr = Field(
        default="django-insecure-dev-only-do-not-use-in-production",
        description="Django 시크릿 키",
    )
    DJANGO_DEBUG: bool = Field(default=False, description="디버그 모드")
    DJANGO_ALLOWED_HOSTS: List[str] = Field(
        default=["localhost", "127.0.0.1", "0.0.0.0", "testserver"],
        description="허용 호스트 목록",
    )

    # 세션 테이블 전용, 로드맵 데이터는 저장하지 않음
    DATABASE_ENGINE: str = "django.db.backends.sqlite3"
    DATABASE_NAME: str = str(BASE_DIR / "db.sqlite3")

    STUDY_DEFAULT_DAILY_MINUTES: int = Field(default=60, gt=0)
    STUDY_MAX_CONTENT_CHARS: int = Field(default=200_000, gt=0)
    STUDY_MAX_SOURCES: int = Field(default=20, gt=0)

    CORS_ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="프론트엔드 오리진",
    )

    SECURE_SSL_REDIRECT: bool = False
    SECURE_HSTS_SECONDS: int = 31536000

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )


try:
    env = EnvSettings()
except Exception as e:
    print("[CRITICAL] 환경변수 검증 실패: .env 또는 환경변수를 확인하세요.")
    print(f"  {e}")
    sys.exit(1)


SECRET_KEY = env.DJANGO_SECRET_KEY.get_secret_value()
DEBUG = env.DJANGO_DEBUG
ALLOWED_HOSTS = env.DJANGO_ALLOWED_HOSTS

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.staticfiles",
    "rest_framework",
    "drf_spectacular",
    "corsheaders",
    "study_companion.study_core",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    # CommonMiddleware보다 앞에 있어야 함
    "corsheaders.middleware.CorsMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "study_companion.urls"
WSGI_APPLICATION = "study_companion.wsgi.application"

# Swagger/Redoc 페이지와 DEBUG 시 Browsable API 렌더링용
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
            ],
        },
    }
]

DATABASES = {
    "default": {
        "ENGINE": env.DATABASE_ENGINE,
        "NAME": env.DATABASE_NAME,
    }
}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "ko-kr"
TIME_ZONE = "Asia/Seoul"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

CORS_ALLOW_ALL_ORIGINS = DEBUG
CORS_ALLOWED_ORIGINS = env.CORS_ALLOWED_ORIGINS
CORS_ALLOW_METHODS = ["GET", "OPTIONS", "POST"]

# 익명 요청만 받는 stateless API
REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "UNICODE_JSON": True,
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ] + (["rest_framework.renderers.BrowsableAPIRenderer"] if DEBUG else []),
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Study Companion API",
    "DESCRIPTION": "학습 로드맵 생성, 자료 분석, 진행 상태, 오프라인 학습 자료 API",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
}

LOG_DIR = BASE_DIR / "logs"
LOG_DIR.mkdir(exist_ok=True)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{asctime}] {levelname} {name} {module}:{lineno} - {message}",
            "style": "{",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "simple": {
            "format": "[{asctime}] {levelname} {message}",
            "style": "{",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        # extra={...} 필드가 JSON 키로 기록됨
        "json": {
            "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "verbose" if DEBUG else "simple",
            "stream": sys.stdout,
        },
        "file": {
            "level": "INFO",
            "class": "logging.handlers.RotatingFileHandler",
            "filename": LOG_DIR / "study_companion.log",
            "maxBytes": 10 * 1024 * 1024,
            "backupCount": 5,
            "formatter": "json",
        },
    },
    "loggers": {
        "django": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "study_companion.study_core": {
            "handlers": ["console", "file"],
            "level": env.LOG_LEVEL,
            "propagate": False,
        },
    },
}

STUDY_DEFAULT_DAILY_MINUTES = env.STUDY_DEFAULT_DAILY_MINUTES
STUDY_MAX_CONTENT_CHARS = env.STUDY_MAX_CONTENT_CHARS
STUDY_MAX_SOURCES = env.STUDY_MAX_SOURCES

if not DEBUG:
    SECURE_SSL_REDIRECT = env.SECURE_SSL_REDIRECT
    SECURE_HSTS_SECONDS = env.SECURE_HSTS_SECONDS
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True
    SECURE_CONTENT_TYPE_NOSNIFF = True
    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
