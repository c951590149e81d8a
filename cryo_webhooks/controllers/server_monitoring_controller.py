import logging

from cryo_webhooks.services.server_monitoring_service import ServerMonitoringService

logger = logging.getLogger(__name__)


class ServerMonitoringController:
    def __init__(self, monitoring_service=None):
        self.monitoring_service = monitoring_service or ServerMonitoringService()

    def ping(self):
        """
        Obtener estado del servidor

        :return: Información de estado
        """
        try:
            result = self.monitoring_service.ping()
            result['status_code'] = 200 if result.get('success', False) else 500
            return result

        except Exception as e:
            logger.exception('Server monitoring failed')
            return {
                'success': False,
                'error': 'Server monitoring failed',
                'details': str(e),
                'status_code': 500
            }

    def health(self):
        return self.monitoring_service.health()
