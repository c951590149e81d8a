import logging
import threading
import time

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = 'Too many requests from this IP, please try again later.'


class FixedWindowRateLimiter:
    """
    Limitador en memoria de ventana fija por cliente (IP).

    Cada cliente tiene su propia ventana que empieza con su primera
    solicitud. Solo sirve para un proceso; no se comparte entre workers.
    """

    def __init__(self, max_requests=100, window_seconds=15 * 60, clock=time.monotonic):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        self._windows = {}
        self._last_sweep = clock()
        self._lock = threading.Lock()

    def _sweep(self, now):
        if now - self._last_sweep < self.window_seconds:
            return
        expired = [
            key for key, (started, _) in self._windows.items()
            if now - started >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]
        self._last_sweep = now

    def take(self, key):
        """
        Consumir una solicitud para el cliente

        :param key: Identificador del cliente
        :return: False si el cliente superó el límite de la ventana
        """
        now = self.clock()
        with self._lock:
            self._sweep(now)
            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window_seconds:
                started, count = now, 0

            if count >= self.max_requests:
                logger.warning(f"Rate limit hit for {key}")
                return False

            self._windows[key] = (started, count + 1)
            return True

    def remaining(self, key):
        now = self.clock()
        with self._lock:
            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window_seconds:
                return self.max_requests
            return max(self.max_requests - count, 0)

    def reset(self):
        with self._lock:
            self._windows.clear()
