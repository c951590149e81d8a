import json
import logging

from cryo_webhooks.constants.facilities import VALID_CENTERS
from cryo_webhooks.constants.responses import INVALID_CENTER_TEXT, INVALID_SERVICE_TEXT, FAQ_ERROR_TEXT
from cryo_webhooks.services.faq_service import FaqService
from cryo_webhooks.utils.dialogflow import get_intent_name, get_parameters, fulfillment

BOOK_APPOINTMENT = 'Book Appointment'
EXPLAIN_CRYOTHERAPY = 'Explain Cryotherapy'
RESCHEDULE_APPOINTMENT = 'Reschedule Appointment'
ADDRESS_CONCERNS = 'Address Concerns'
PROVIDE_CENTER_INFORMATION = 'Provide Center Information'

FAQ_INTENTS = [
    BOOK_APPOINTMENT,
    EXPLAIN_CRYOTHERAPY,
    RESCHEDULE_APPOINTMENT,
    ADDRESS_CONCERNS,
    PROVIDE_CENTER_INFORMATION,
]


def normalize_parameter(value):
    # '' / None -> no especificado
    if not value:
        return ''
    if isinstance(value, str):
        return value.strip().lower()
    return value


class FaqController:
    def __init__(self, facility_cache, faq_service=None, valid_centers=None):
        self.facility_cache = facility_cache
        self.faq_service = faq_service or FaqService()
        self.valid_centers = valid_centers or VALID_CENTERS
        self.logger = logging.getLogger(__name__)

    def handle(self, request_json):
        """
        Responder un intent del FAQ

        :param request_json: Cuerpo JSON del webhook de Dialogflow
        :return: (respuesta, código HTTP)
        """
        try:
            self.logger.info(f"Webhook request received: {json.dumps(request_json, default=str)}")

            intent = get_intent_name(request_json)
            parameters = get_parameters(request_json)
            center = normalize_parameter(parameters.get('center'))
            service = normalize_parameter(parameters.get('service'))

            if center and center not in self.valid_centers:
                return fulfillment(INVALID_CENTER_TEXT.format(center=center)), 200
            if service and not isinstance(service, str):
                return fulfillment(INVALID_SERVICE_TEXT), 200

            centers = self.facility_cache.fetch_centers()
            return fulfillment(self.dispatch(intent, centers, center, service)), 200

        except Exception:
            self.logger.exception('Webhook error')
            return fulfillment(FAQ_ERROR_TEXT), 500

    def dispatch(self, intent, centers, center, service):
        if intent == BOOK_APPOINTMENT:
            return self.faq_service.book_appointment(centers, center, service)
        elif intent == EXPLAIN_CRYOTHERAPY:
            return self.faq_service.explain_cryotherapy()
        elif intent == RESCHEDULE_APPOINTMENT:
            return self.faq_service.reschedule_appointment(centers, center)
        elif intent == ADDRESS_CONCERNS:
            return self.faq_service.address_concerns()
        elif intent == PROVIDE_CENTER_INFORMATION:
            return self.faq_service.center_information(centers, center)

        self.logger.info(f"Unrecognized intent: {intent!r}")
        return self.faq_service.fallback()
