import logging

from flask import Flask, request
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from cryo_webhooks.config.settings import DevelopmentConfig
from cryo_webhooks.controllers.intake_controller import IntakeController
from cryo_webhooks.controllers.faq_controller import FaqController
from cryo_webhooks.controllers.server_monitoring_controller import ServerMonitoringController
from cryo_webhooks.services.sheets_service import SheetsService
from cryo_webhooks.services.email_service import EmailService
from cryo_webhooks.services.facility_cache import FacilityCache
from cryo_webhooks.services.faq_service import FaqService
from cryo_webhooks.services.server_monitoring_service import ServerMonitoringService
from cryo_webhooks.utils.rate_limiter import FixedWindowRateLimiter
from cryo_webhooks.routes.intake_routes import intake_routes
from cryo_webhooks.routes.faq_routes import faq_routes
from cryo_webhooks.routes.monitoring_routes import monitoring_routes

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'SAMEORIGIN',
    'Referrer-Policy': 'no-referrer',
    'Cross-Origin-Resource-Policy': 'same-origin',
}


def setup_logging(level='INFO'):
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def build_services(config, overrides=None):
    """
    Crear los servicios compartidos de la aplicación

    :param config: app.config ya cargado
    :param overrides: Servicios ya construidos (tests, otros entrypoints)
    :return: Diccionario nombre -> instancia
    """
    overrides = overrides or {}

    sheets_service = overrides.get('sheets_service') or SheetsService.from_config(config)

    if 'email_service' in overrides:
        email_service = overrides['email_service']
    elif config.get('SEND_CONFIRMATION_EMAIL'):
        email_service = EmailService.from_config(config)
    else:
        email_service = None

    facility_cache = overrides.get('facility_cache') or FacilityCache(
        ttl_seconds=config['CACHE_DURATION_SECONDS'],
        refresh_delay=config['CACHE_REFRESH_DELAY_SECONDS'],
    )
    faq_service = overrides.get('faq_service') or FaqService(choice=overrides.get('choice'))
    rate_limiter = overrides.get('rate_limiter') or FixedWindowRateLimiter(
        max_requests=config['RATE_LIMIT_MAX_REQUESTS'],
        window_seconds=config['RATE_LIMIT_WINDOW_SECONDS'],
    )
    monitoring_service = ServerMonitoringService(facility_cache=facility_cache, version=config['APP_VERSION'])

    return {
        'sheets_service': sheets_service,
        'email_service': email_service,
        'facility_cache': facility_cache,
        'rate_limiter': rate_limiter,
        'intake_controller': IntakeController(
            sheets_service,
            email_service=email_service,
            collect_event=config['COLLECT_EVENT_NAME'],
            success_event=config['SUCCESS_EVENT_NAME'],
            language_code=config['LANGUAGE_CODE'],
            name_min_words=config['NAME_MIN_WORDS'],
            name_max_words=config['NAME_MAX_WORDS'],
            phone_region=config['PHONE_DEFAULT_REGION'],
        ),
        'faq_controller': FaqController(facility_cache, faq_service=faq_service),
        'monitoring_controller': ServerMonitoringController(monitoring_service),
    }


def create_app(config_class=DevelopmentConfig, services=None):
    setup_logging(config_class.LOG_LEVEL)

    app = Flask(__name__)
    app.config.from_object(config_class)

    if app.config.get('PROXY_FIX_X_FOR'):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=app.config['PROXY_FIX_X_FOR'])

    # Configurar CORS
    CORS(app, resources={
        r"/*": {
            "origins": app.config['ALLOWED_ORIGINS'],
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization", "Accept", "Origin"],
        }
    })

    @app.after_request
    def after_request(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        logger.info(f"{request.remote_addr} {request.method} {request.path} {response.status_code}")
        return response

    # Inicializar servicios globales
    logger.info('=== Initializing Global Services ===')
    global_services = build_services(app.config, services)
    for service_name, service_instance in global_services.items():
        app.config[service_name] = service_instance
        logger.debug(f"Initialized {service_name}")

    blueprints_config = [
        {'blueprint': monitoring_routes, 'url_prefix': ''},
        {'blueprint': intake_routes, 'url_prefix': '/api'},
        {'blueprint': faq_routes, 'url_prefix': ''},
    ]
    for bp_config in blueprints_config:
        app.register_blueprint(bp_config['blueprint'], url_prefix=bp_config['url_prefix'])

    return app
