from flask import Blueprint, current_app, jsonify

from cryo_webhooks.constants.responses import LIVENESS_TEXT

monitoring_routes = Blueprint('monitoring', __name__)


@monitoring_routes.route('/', methods=['GET'])
def index():
    return LIVENESS_TEXT, 200


@monitoring_routes.route('/health', methods=['GET'])
def health():
    return jsonify(current_app.config['monitoring_controller'].health()), 200


@monitoring_routes.route('/api/ping', methods=['GET'])
def ping():
    result = current_app.config['monitoring_controller'].ping()
    return jsonify(result), result.get('status_code', 200)
