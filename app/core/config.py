# app/core/config.py

import os # 'os' module: environment variables are the only configuration source.


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Settings shared by every environment."""
    # Signs access/refresh tokens; no default, each environment decides.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    JWT_ACCESS_TOKEN_EXPIRES = int(os.getenv('JWT_ACCESS_TOKEN_EXPIRES', 3600))  # seconds
    JWT_REFRESH_TOKEN_EXPIRES = int(os.getenv('JWT_REFRESH_TOKEN_EXPIRES', 14 * 24 * 3600))  # seconds
    JWT_TOKEN_LOCATION = ['headers']

    # 'memory' keeps everything in-process; 'firestore' uses firebase_admin.
    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'memory')
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')

    SEED_DEMO_DATA = _env_flag('SEED_DEMO_DATA', '1')

class DevelopmentConfig(Config):
    """Local development: debug mode and auto reload."""
    DEBUG = True
    JWT_SECRET_KEY = Config.JWT_SECRET_KEY or 'dev-secret-please-change'
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH', Config.FIREBASE_CREDENTIALS_PATH)

class TestingConfig(Config):
    """Test runs always use a fresh, empty in-memory store."""
    TESTING = True
    DEBUG = False
    JWT_SECRET_KEY = 'testing-secret-key-with-enough-length-for-hs256'
    STORAGE_BACKEND = 'memory'
    SEED_DEMO_DATA = False

class ProductionConfig(Config):
    """JWT_SECRET_KEY must come from the environment; create_app refuses to start without it."""
    DEBUG = False
    SEED_DEMO_DATA = _env_flag('SEED_DEMO_DATA', '0')

# config_by_name: maps FLASK_ENV values to configuration classes; create_app picks one.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
