import os
from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, '.env'))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'change-this-key'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'expenses.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Table names are resolved when the models are imported
    TABLE_PREFIX = os.environ.get('EXPENSES_TABLE_PREFIX', '')

    DB_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
    DISPLAY_DATE_FORMAT = os.environ.get('DISPLAY_DATE_FORMAT', '%d %b %Y, %H:%M')
    DESCRIPTIVE_DATES = os.environ.get('DESCRIPTIVE_DATES', 'true').lower() == 'true'

    CURRENCY_SYMBOL = os.environ.get('CURRENCY_SYMBOL', '£')
    APP_NAME = 'Expenses'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
