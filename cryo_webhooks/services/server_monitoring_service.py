from datetime import datetime, timezone


class ServerMonitoringService:
    def __init__(self, facility_cache=None, version='1.0.0'):
        self.facility_cache = facility_cache
        self.version = version
        self.started_at = datetime.now(timezone.utc)
        self.last_ping_time = None

    def ping(self):
        """
        Actualizar tiempo de último ping

        :return: Información de estado del servidor
        """
        current_time = datetime.now(timezone.utc)
        self.last_ping_time = current_time

        return {
            'success': True,
            'status': 'active',
            'timestamp': current_time.isoformat(),
            'uptime_seconds': int((current_time - self.started_at).total_seconds()),
        }

    def health(self):
        """
        :return: Estado del servicio y de la cache de centros
        """
        cache_status = self.facility_cache.cache_status() if self.facility_cache else 'Not cached'
        return {
            'status': 'ok',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'version': self.version,
            'cacheStatus': cache_status,
        }
