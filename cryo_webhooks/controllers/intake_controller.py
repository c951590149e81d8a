import json
import logging
from datetime import datetime

from cryo_webhooks.constants.responses import (
    MISSING_INFO_TEXT,
    INVALID_INFO_TEXT,
    INVALID_FIELD_PHRASES,
    SAVE_ERROR_TEXT,
)
from cryo_webhooks.utils.dialogflow import get_parameters, extract_submission, followup_event, fulfillment
from cryo_webhooks.utils.validators import validate_submission


class IntakeController:
    """
    Webhook de captura de datos de contacto (nombre, email, teléfono).

    Posibles respuestas:
      - faltan datos -> vuelve a lanzar el evento de recolección
      - datos inválidos -> mismo evento, indicando qué campos fallaron
      - datos válidos -> guarda en Sheets, envía email y lanza el evento de reserva
    """

    def __init__(self, sheets_service, email_service=None, collect_event='collect_user_info',
                 success_event='trigger-booking-intent', language_code='en', name_min_words=2,
                 name_max_words=None, phone_region=None, clock=datetime.now):
        self.sheets_service = sheets_service
        self.email_service = email_service
        self.collect_event = collect_event
        self.success_event = success_event
        self.language_code = language_code
        self.name_min_words = name_min_words
        self.name_max_words = name_max_words
        self.phone_region = phone_region
        self.clock = clock
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def build_invalid_message(invalid_fields):
        fields = ''
        for field_name in invalid_fields:
            fields += f"{INVALID_FIELD_PHRASES[field_name]}, "
        fields = fields.rstrip(', ')
        return INVALID_INFO_TEXT.format(fields=fields)

    def handle(self, request_json):
        """
        Procesar la solicitud de Dialogflow

        :param request_json: Cuerpo JSON del webhook
        :return: (respuesta, código HTTP)
        """
        parameters = get_parameters(request_json)
        self.logger.info(f"Dialogflow raw parameters received: {json.dumps(parameters, default=str)}")

        submission = extract_submission(parameters)
        self.logger.info(f"Extracted values for validation: {submission}")

        if not submission.is_complete():
            self.logger.warning('One or more required parameters are empty or missing after extraction')
            return followup_event(self.collect_event, self.language_code, MISSING_INFO_TEXT), 200

        result = validate_submission(
            submission,
            min_words=self.name_min_words,
            max_words=self.name_max_words,
            phone_region=self.phone_region,
        )
        self.logger.info(
            f"Validation results: name={result.name_valid}, email={result.email_valid}, phone={result.phone_valid}"
        )

        if not result.is_valid:
            self.logger.info(f"Validation failed for {result.invalid_fields}. Re-triggering {self.collect_event}")
            message = self.build_invalid_message(result.invalid_fields)
            return followup_event(self.collect_event, self.language_code, message), 200

        try:
            self.sheets_service.append_submission(submission, submitted_at=self.clock())
            self.logger.info('User info saved to Google Sheets successfully')

            if self.email_service is not None:
                self.email_service.send_confirmation(submission.email, submission.name)
        except Exception:
            # El registro en Sheets queda aunque falle el email
            self.logger.exception('Error saving user info or sending confirmation')
            return fulfillment(SAVE_ERROR_TEXT), 500

        return followup_event(self.success_event, self.language_code), 200
