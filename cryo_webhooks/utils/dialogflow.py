"""
Helpers for reading Dialogflow ES webhook requests and building
fulfillment responses.
"""
from cryo_webhooks.utils.validators import Submission


def get_query_result(request_json):
    if not isinstance(request_json, dict):
        return {}
    return request_json.get('queryResult') or {}


def get_parameters(request_json):
    parameters = get_query_result(request_json).get('parameters')
    return parameters if isinstance(parameters, dict) else {}


def get_intent_name(request_json):
    intent = get_query_result(request_json).get('intent') or {}
    if not isinstance(intent, dict):
        return ''
    return intent.get('displayName') or ''


def _as_text(value):
    # None / '' / [] -> ''
    if not value:
        return ''
    return value if isinstance(value, str) else str(value)


def extract_fullname(name_param):
    """
    El parámetro fullname puede llegar como string o como entidad
    compuesta {'name': '...'} (sys.person)
    """
    if isinstance(name_param, dict) and isinstance(name_param.get('name'), str):
        return name_param['name']
    return _as_text(name_param)


def extract_submission(parameters):
    """
    :param parameters: queryResult.parameters de Dialogflow
    :return: Submission con los campos vacíos como ''
    """
    parameters = parameters or {}
    return Submission(
        name=extract_fullname(parameters.get('fullname')),
        email=_as_text(parameters.get('email')),
        phone=_as_text(parameters.get('phone-number')),
    )


def followup_event(name, language_code='en', fulfillment_text=None):
    response = {
        'followupEventInput': {
            'name': name,
            'languageCode': language_code,
        }
    }
    if fulfillment_text:
        response['fulfillmentText'] = fulfillment_text
    return response


def fulfillment(text):
    return {'fulfillmentText': text}
