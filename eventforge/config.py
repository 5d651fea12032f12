"""
Configuration settings for the EventForge API
"""
import os


def _env_int(name, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


def _env_bool(name, default=False):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'y', 'on')


class Config:
    """Flask application configuration"""

    ENV_NAME = 'development'
    DEBUG = False
    TESTING = False

    # Session secret. When unset, the factory generates one per process
    # outside production.
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Token signing secret, same fallback rules as SECRET_KEY
    JWT_SECRET = os.environ.get('JWT_SECRET')
    JWT_ALGORITHM = 'HS256'
    TOKEN_TTL_HOURS = _env_int('TOKEN_TTL_HOURS', 24)

    # 'token', 'session' or 'hybrid'
    AUTH_STRATEGY = os.environ.get('AUTH_STRATEGY', 'token').strip().lower()

    # 'sql' or 'memory'
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'sql').strip().lower()

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'eventforge.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Connection pool bounds (ignored for SQLite)
    DB_POOL_SIZE = _env_int('DB_POOL_SIZE', 5)
    DB_MAX_OVERFLOW = _env_int('DB_MAX_OVERFLOW', 5)
    DB_POOL_TIMEOUT = _env_int('DB_POOL_TIMEOUT', 10)

    # Server-side sessions
    SESSION_LIFETIME_HOURS = _env_int('SESSION_LIFETIME_HOURS', 24)
    SESSION_COOKIE_NAME = 'eventforge_session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = False
    # Checking a session never extends it
    SESSION_REFRESH_EACH_REQUEST = False

    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD', 'scrypt')

    SEED_SAMPLE_DATA = _env_bool('SEED_SAMPLE_DATA')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


class DevelopmentConfig(Config):
    """Local development configuration"""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration"""
    ENV_NAME = 'production'
    SESSION_COOKIE_SECURE = True


class TestConfig(Config):
    """Testing configuration"""
    ENV_NAME = 'testing'
    TESTING = True
    SECRET_KEY = 'test-session-secret'
    JWT_SECRET = 'test-jwt-secret-long-enough-for-hs256'
    AUTH_STRATEGY = 'token'
    STORAGE_BACKEND = 'sql'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    SEED_SAMPLE_DATA = False


CONFIGS = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestConfig,
}


def config_for_env(env_name=None):
    """Pick the configuration class for ``APP_ENV`` (default: development)."""
    name = (env_name or os.environ.get('APP_ENV') or 'development').strip().lower()
    try:
        return CONFIGS[name]
    except KeyError:
        raise ValueError(f'Unknown APP_ENV {name!r}; expected one of {sorted(CONFIGS)}')
