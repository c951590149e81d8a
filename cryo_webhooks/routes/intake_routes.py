from flask import Blueprint, current_app, request, jsonify

from cryo_webhooks.constants.responses import SAVE_ERROR_TEXT

intake_routes = Blueprint('intake', __name__)


@intake_routes.route('/webhook', methods=['POST'])
def intake_webhook():
    try:
        data = request.get_json(silent=True) or {}
        response, status_code = current_app.config['intake_controller'].handle(data)
        return jsonify(response), status_code
    except Exception:
        current_app.logger.exception('Unhandled error in intake webhook')
        return jsonify({'fulfillmentText': SAVE_ERROR_TEXT}), 500
