import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    # App settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-key-change-in-production')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Database
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Journal
    JOURNAL_TIMEZONE = os.getenv('JOURNAL_TIMEZONE', 'UTC')
    STREAK_GRACE_DAYS = int(os.getenv('STREAK_GRACE_DAYS', '1'))
    TOP_TAGS_LIMIT = int(os.getenv('TOP_TAGS_LIMIT', '10'))

class DevelopmentConfig(Config):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv('DEV_DATABASE_URI', 'sqlite:///dev.db')

class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JOURNAL_TIMEZONE = 'UTC'

class ProductionConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')

# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
