import os
from datetime import timedelta
from sqlalchemy.pool import QueuePool
from urllib.parse import urlparse
import pymysql
pymysql.install_as_MySQLdb()

DEFAULT_FRONTEND_URL = "http://localhost:3334"

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'change_this_secret_key')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SQLALCHEMY_ENGINE_OPTIONS = {
        "poolclass": QueuePool,
        "pool_size": 5,
        "max_overflow": 2,
        "pool_timeout": 10
    }

    FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN", "http://localhost:3000")
    ACCESS_TOKEN_LIFETIME = timedelta(hours=24)
    SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "False") == "True" if os.getenv('FLASK_ENV', 'production').lower() == 'production' else False
    SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")

class DevConfig(Config):
    """Development Configuration"""
    DEBUG = True
    TESTING = False
    SQLALCHEMY_DATABASE_URI = os.getenv('SQLALCHEMY_DATABASE_URI', 'mysql+pymysql://root:@localhost/music_school')

class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'

class ProdConfig(Config):
    """Production Configuration"""
    DEBUG = False

    raw_db_url = os.getenv('DATABASE_URL')

    if raw_db_url:
        if raw_db_url.startswith("mysql://"):
            raw_db_url = raw_db_url.replace("mysql://", "mysql+pymysql://", 1)

        parsed_url = urlparse(raw_db_url)
        SQLALCHEMY_DATABASE_URI = f"{parsed_url.scheme}://{parsed_url.netloc}{parsed_url.path}"
    else:
        SQLALCHEMY_DATABASE_URI = os.getenv('JAWSDB_URL', 'sqlite:///:memory:')

config_dict = {
    "development": DevConfig,
    "testing": TestConfig,
    "production": ProdConfig
}


def build_frontend_config(environ=None):
    """Settings handed to the Next.js frontend at build time.

    Each URL is taken from the environment when set, otherwise it falls back
    to the local API server.
    """
    environ = os.environ if environ is None else environ
    return {
        "react_strict_mode": True,
        "env": {
            "NEXT_PUBLIC_API_URL": environ.get("NEXT_PUBLIC_API_URL") or DEFAULT_FRONTEND_URL,
            "NEXT_PUBLIC_SOCKET_URL": environ.get("NEXT_PUBLIC_SOCKET_URL") or DEFAULT_FRONTEND_URL,
        },
    }

FRONTEND_CONFIG = build_frontend_config()
