import copy
import logging
import time
from datetime import datetime, timezone

from cryo_webhooks.constants.facilities import CENTERS

logger = logging.getLogger(__name__)


def load_static_centers():
    """Fuente de datos de los centros (hoy estática)"""
    return copy.deepcopy(CENTERS)


class FacilityCache:
    """
    Cache de lectura de los datos de centros con expiración por tiempo.

    El refresco reemplaza el diccionario completo en una sola asignación,
    así que quien lee nunca ve datos a medio actualizar. Dos solicitudes que
    vean la cache vencida al mismo tiempo pueden refrescar ambas; gana la
    última.
    """

    def __init__(self, loader=load_static_centers, ttl_seconds=5 * 60, refresh_delay=1.0,
                 clock=time.time, sleep=time.sleep):
        self.loader = loader
        self.ttl_seconds = ttl_seconds
        self.refresh_delay = refresh_delay
        self.clock = clock
        self.sleep = sleep
        self._centers = None
        self.last_fetch_time = None

    def is_expired(self):
        if self._centers is None or self.last_fetch_time is None:
            return True
        return self.clock() - self.last_fetch_time > self.ttl_seconds

    def refresh(self):
        # Simula la llamada a la API externa
        if self.refresh_delay:
            self.sleep(self.refresh_delay)
        centers = self.loader()
        self._centers = centers
        self.last_fetch_time = self.clock()
        logger.info('Center data refreshed and cached')
        return centers

    def fetch_centers(self):
        """
        :return: Diccionario centro -> datos del centro
        """
        centers = self._centers
        if centers is None or self.is_expired():
            centers = self.refresh()
        return centers

    def invalidate(self):
        self._centers = None
        self.last_fetch_time = None

    def cache_status(self):
        if self.last_fetch_time is None:
            return 'Not cached'
        updated = datetime.fromtimestamp(self.last_fetch_time, tz=timezone.utc)
        return f"Last updated: {updated.isoformat()}"
