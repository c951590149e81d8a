from flask import Blueprint, current_app, request, jsonify

from cryo_webhooks.constants.responses import FAQ_ERROR_TEXT
from cryo_webhooks.utils.rate_limiter import RATE_LIMIT_MESSAGE

faq_routes = Blueprint('faq', __name__)


def client_address():
    # ProxyFix (factory) ya resuelve X-Forwarded-For cuando corresponde
    return request.remote_addr or 'unknown'


@faq_routes.before_request
def apply_rate_limit():
    limiter = current_app.config['rate_limiter']
    if not limiter.take(client_address()):
        return RATE_LIMIT_MESSAGE, 429


@faq_routes.route('/webhook', methods=['POST'])
def faq_webhook():
    try:
        data = request.get_json(silent=True) or {}
        response, status_code = current_app.config['faq_controller'].handle(data)
        return jsonify(response), status_code
    except Exception:
        current_app.logger.exception('Unhandled error in FAQ webhook')
        return jsonify({'fulfillmentText': FAQ_ERROR_TEXT}), 500
