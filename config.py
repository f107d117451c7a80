from dotenv import load_dotenv
import os

load_dotenv()


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL')

    if not SQLALCHEMY_DATABASE_URI:
        raise ValueError("DATABASE_URL environment variable not set")

    # Heroku-style URLs still use the deprecated scheme
    if SQLALCHEMY_DATABASE_URI.startswith('postgres://'):
        SQLALCHEMY_DATABASE_URI = SQLALCHEMY_DATABASE_URI.replace('postgres://', 'postgresql://', 1)

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    LOGGING_CONFIG = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(asctime)s %(levelname)s [%(name)s] %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'level': os.getenv('LOG_LEVEL', 'INFO'),
            },
        },
        'root': {
            'handlers': ['console'],
            'level': os.getenv('LOG_LEVEL', 'INFO'),
        }
    }

    # Styling only applies to forms rendered on the host site
    ON_SITE_DISPLAY_TYPES = ('embedded', 'overlay')

    # Markup wrapper id is "<prefix><form id>"
    FORM_ID_SELECTOR_PREFIX = os.getenv('FORM_ID_SELECTOR_PREFIX', 'simpay-form-')
    STYLE_TAG_ID = 'paystyles-inline-styles'

    # Border radius suggested to forms that have never been styled.
    # None leaves new forms unset.
    NEW_FORM_DEFAULT_BORDER_RADIUS = (
        int(os.getenv('NEW_FORM_DEFAULT_BORDER_RADIUS'))
        if os.getenv('NEW_FORM_DEFAULT_BORDER_RADIUS') else None
    )


class DevelopmentConfig(Config):
    FLASK_ENV = 'development'
    DEBUG = True
    SQLALCHEMY_ECHO = True


class ProductionConfig(Config):
    FLASK_ENV = 'production'
    DEBUG = False
    SESSION_COOKIE_SECURE = True
    PREFERRED_URL_SCHEME = 'https'
    SENTRY_DSN = os.getenv('SENTRY_DSN')


class TestingConfig(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}


config_dict = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
}
