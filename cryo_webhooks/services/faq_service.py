import logging
import random

from cryo_webhooks.constants.responses import (
    BOOKING_CONFIRMATIONS,
    EXPLANATIONS,
    ASK_CENTER_TEXT,
    SERVICE_AVAILABLE_TEXT,
    SERVICE_UNAVAILABLE_TEXT,
    SERVICE_NOT_OFFERED_TEXT,
    RESCHEDULE_TEXT,
    RESCHEDULE_ASK_CENTER_TEXT,
    CONCERNS_TEXT,
    CENTER_INFO_TEXT,
    CENTER_INFO_ASK_CENTER_TEXT,
    FALLBACK_TEXT,
)

logger = logging.getLogger(__name__)


def find_service(center_data, service):
    for service_data in center_data['services']:
        if service_data['name'].lower() == service:
            return service_data
    return None


def service_names(center_data):
    return ', '.join(s['name'] for s in center_data['services'])


class FaqService:
    """
    Respuestas de texto para cada intent del FAQ.

    ``choice`` elige una plantilla de una lista; por defecto random.choice,
    en tests se puede pasar una función determinística.
    """

    def __init__(self, choice=None):
        self.choice = choice or random.choice

    def book_appointment(self, centers, center, service):
        logger.info(f"Booking requested - Center: {center}, Service: {service}")
        # Un centro sin datos en la cache se trata como no especificado
        if center and center not in centers:
            center = ''
        if not center:
            if not service:
                return ASK_CENTER_TEXT

            available_centers = [
                name for name, data in centers.items()
                if find_service(data, service) is not None
            ]
            if available_centers:
                return SERVICE_AVAILABLE_TEXT.format(service=service, centers=', '.join(available_centers))
            return SERVICE_UNAVAILABLE_TEXT.format(service=service)

        center_data = centers[center]
        if not service:
            return self.choice(BOOKING_CONFIRMATIONS).format(
                service='session',
                center=center,
                booking_link=center_data['general_booking_link'],
            )

        service_data = find_service(center_data, service)
        if service_data is None:
            return SERVICE_NOT_OFFERED_TEXT.format(
                service=service,
                center=center,
                services=service_names(center_data),
                booking_link=center_data['general_booking_link'],
            )

        return self.choice(BOOKING_CONFIRMATIONS).format(
            service=service,
            center=center,
            booking_link=service_data['booking_link'],
        )

    def explain_cryotherapy(self):
        return self.choice(EXPLANATIONS)

    def reschedule_appointment(self, centers, center):
        if center and center in centers:
            return RESCHEDULE_TEXT.format(center=center, business_link=centers[center]['business_link'])
        return RESCHEDULE_ASK_CENTER_TEXT

    def address_concerns(self):
        return CONCERNS_TEXT

    def center_information(self, centers, center):
        if center and center in centers:
            center_data = centers[center]
            return CENTER_INFO_TEXT.format(
                center=center,
                services=service_names(center_data),
                hours=center_data['hours'],
                business_link=center_data['business_link'],
            )
        return CENTER_INFO_ASK_CENTER_TEXT

    def fallback(self):
        return FALLBACK_TEXT
