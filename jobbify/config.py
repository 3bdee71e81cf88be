import os
from dotenv import load_dotenv
from datetime import timedelta

load_dotenv()


class Config:
    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL')

    # Fix for hosts that still hand out postgres:// URLs
    if SQLALCHEMY_DATABASE_URI and SQLALCHEMY_DATABASE_URI.startswith('postgres://'):
        SQLALCHEMY_DATABASE_URI = SQLALCHEMY_DATABASE_URI.replace('postgres://', 'postgresql://', 1)

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv('SECRET_KEY')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=24)

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Onboarding / listing
    TRIAL_DAYS = int(os.getenv('TRIAL_DAYS', '14'))
    PAGE_SIZE = 50

    # Password reset links handed out when staff are provisioned
    APP_URL = os.getenv('APP_URL', 'http://localhost:5000')
    PASSWORD_RESET_PATH = os.getenv('PASSWORD_RESET_PATH', '/reset-password')
    PASSWORD_RESET_EXPIRES = timedelta(minutes=int(os.getenv('PASSWORD_RESET_EXPIRES_MINUTES', '60')))

    # Redis / Celery
    REDIS_URL = os.getenv('REDIS_URL', 'redis://localhost:6379/0')
    CELERY_BROKER_URL = os.getenv('CELERY_BROKER_URL', REDIS_URL)
    CELERY_RESULT_BACKEND = os.getenv('CELERY_RESULT_BACKEND', REDIS_URL)
    CELERY_TASK_ALWAYS_EAGER = False

    # AWS SES Configuration
    AWS_ACCESS_KEY_ID = os.getenv('AWS_ACCESS_KEY_ID')
    AWS_SECRET_ACCESS_KEY = os.getenv('AWS_SECRET_ACCESS_KEY')
    AWS_REGION = os.getenv('AWS_REGION', 'us-east-1')
    SES_SENDER_EMAIL = os.getenv('SES_SENDER_EMAIL')
    STAFF_INVITE_EMAILS_ENABLED = os.getenv('STAFF_INVITE_EMAILS_ENABLED', 'false').lower() in ('1', 'true', 'yes')


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'test-secret-key'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length'
    LOG_LEVEL = 'DEBUG'
    CELERY_BROKER_URL = 'memory://'
    CELERY_RESULT_BACKEND = 'cache+memory://'
    CELERY_TASK_ALWAYS_EAGER = True
    STAFF_INVITE_EMAILS_ENABLED = False
