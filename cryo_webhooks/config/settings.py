import os
from pathlib import Path

from cryo_webhooks.utils.environment import load_environment_variables, env_bool, env_int

# Cargar .env antes de leer la configuracion
load_environment_variables()


class Config:
    # Configuraciones generales
    PROJECT_ROOT = str(Path(__file__).parent.parent.parent)
    APP_VERSION = os.getenv('APP_VERSION', '1.0.0')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')

    # Lista de orígenes permitidos
    ALLOWED_ORIGINS = [
        origin.strip()
        for origin in os.getenv('ALLOWED_ORIGINS', 'https://dialogflow.cloud.google.com').split(',')
        if origin.strip()
    ]

    # Dialogflow
    LANGUAGE_CODE = os.getenv('DIALOGFLOW_LANGUAGE_CODE', 'en')
    COLLECT_EVENT_NAME = os.getenv('COLLECT_EVENT_NAME', 'collect_user_info')
    SUCCESS_EVENT_NAME = os.getenv('SUCCESS_EVENT_NAME', 'trigger-booking-intent')

    # Validación
    NAME_MIN_WORDS = env_int(os.getenv('NAME_MIN_WORDS'), 2)
    NAME_MAX_WORDS = env_int(os.getenv('NAME_MAX_WORDS'), None)
    PHONE_DEFAULT_REGION = os.getenv('PHONE_DEFAULT_REGION', 'ZM') or None

    # Google Sheets
    SPREADSHEET_ID = os.getenv('SPREADSHEET_ID', '')
    SHEET_RANGE = os.getenv('SHEET_RANGE', 'Sheet1!A1:E1')
    GOOGLE_CLIENT_EMAIL = os.getenv('GOOGLE_CLIENT_EMAIL')
    GOOGLE_PRIVATE_KEY = os.getenv('GOOGLE_PRIVATE_KEY')
    GOOGLE_CREDENTIALS_FILE = os.getenv('GOOGLE_CREDENTIALS_FILE')

    # Email de confirmación
    SEND_CONFIRMATION_EMAIL = env_bool(os.getenv('SEND_CONFIRMATION_EMAIL'), True)
    SMTP_HOST = os.getenv('SMTP_HOST')
    SMTP_PORT = env_int(os.getenv('SMTP_PORT'), 587)
    SMTP_USERNAME = os.getenv('SMTP_USERNAME')
    SMTP_PASSWORD = os.getenv('SMTP_PASSWORD')
    SMTP_FROM = os.getenv('SMTP_FROM') or os.getenv('SMTP_USERNAME')
    SMTP_USE_TLS = env_bool(os.getenv('SMTP_USE_TLS'), True)

    # Cache de centros
    CACHE_DURATION_SECONDS = env_int(os.getenv('CACHE_DURATION_SECONDS'), 5 * 60)
    CACHE_REFRESH_DELAY_SECONDS = float(os.getenv('CACHE_REFRESH_DELAY_SECONDS', '1.0'))

    # Rate limiting de /webhook: 100 solicitudes cada 15 minutos por IP
    RATE_LIMIT_WINDOW_SECONDS = env_int(os.getenv('RATE_LIMIT_WINDOW_SECONDS'), 15 * 60)
    RATE_LIMIT_MAX_REQUESTS = env_int(os.getenv('RATE_LIMIT_MAX_REQUESTS'), 100)

    # Cantidad de proxies delante de la app. 0 = no confiar en X-Forwarded-For
    PROXY_FIX_X_FOR = env_int(os.getenv('PROXY_FIX_X_FOR'), 0)


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class VercelConfig(ProductionConfig):
    # Vercel agrega un proxy delante de la función
    PROXY_FIX_X_FOR = env_int(os.getenv('PROXY_FIX_X_FOR'), 1)


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    ALLOWED_ORIGINS = ['http://localhost']
    NAME_MIN_WORDS = 2
    NAME_MAX_WORDS = None
    PHONE_DEFAULT_REGION = 'ZM'
    SEND_CONFIRMATION_EMAIL = True
    CACHE_DURATION_SECONDS = 5 * 60
    CACHE_REFRESH_DELAY_SECONDS = 0
    RATE_LIMIT_WINDOW_SECONDS = 15 * 60
    RATE_LIMIT_MAX_REQUESTS = 100
    PROXY_FIX_X_FOR = 0
