import functions_framework
from flask import jsonify

from cryo_webhooks import create_app
from cryo_webhooks.config.settings import ProductionConfig
from cryo_webhooks.controllers.faq_controller import FAQ_INTENTS
from cryo_webhooks.utils.dialogflow import get_intent_name, get_parameters
from cryo_webhooks.utils.rate_limiter import RATE_LIMIT_MESSAGE

INTAKE_PARAMETERS = ('fullname', 'email', 'phone-number')

app = create_app(ProductionConfig)


def select_controller(request_json):
    """
    Elegir el webhook según el intent o los parámetros recibidos.
    Los intents desconocidos sin datos de contacto van al FAQ (respuesta por defecto).
    """
    if get_intent_name(request_json) in FAQ_INTENTS:
        return app.config['faq_controller']
    parameters = get_parameters(request_json)
    if any(key in parameters for key in INTAKE_PARAMETERS):
        return app.config['intake_controller']
    return app.config['faq_controller']


@functions_framework.http
def webhook(request):
    request_json = request.get_json(silent=True) or {}
    controller = select_controller(request_json)

    # Mismo límite que POST /webhook en la app Flask
    if controller is app.config['faq_controller']:
        if not app.config['rate_limiter'].take(request.remote_addr or 'unknown'):
            return RATE_LIMIT_MESSAGE, 429

    response, status_code = controller.handle(request_json)
    return jsonify(response), status_code


if __name__ == "__main__":
    import os
    port = int(os.environ.get("PORT", 8080))
    functions_framework.create_app(target="webhook", source=__file__).run(host="0.0.0.0", port=port)
