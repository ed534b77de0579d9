"""
Configuration settings for the Membership Portal
"""
import os


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Flask application configuration"""
    
    # Flask secret key for the signed session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'portal.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Server-side sessions
    SESSION_LIFETIME_MINUTES = int(os.environ.get('SESSION_LIFETIME_MINUTES', '480'))
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    
    # Password hashing (werkzeug method string)
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256'
    
    # Default administrator seeded at first boot. Rotate the password after
    # the first login.
    BOOTSTRAP_ADMIN = _env_flag('BOOTSTRAP_ADMIN', True)
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL') or 'admin@daigyo.com'
    ADMIN_NAME = os.environ.get('ADMIN_NAME') or 'Administrator'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or '123456'
    
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    BOOTSTRAP_ADMIN = True
