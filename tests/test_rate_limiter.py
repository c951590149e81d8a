import unittest

from cryo_webhooks.utils.rate_limiter import FixedWindowRateLimiter


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestFixedWindowRateLimiter(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.limiter = FixedWindowRateLimiter(max_requests=3, window_seconds=900, clock=self.clock)

    def test_blocks_after_cap(self):
        results = [self.limiter.take('10.0.0.1') for _ in range(4)]
        self.assertEqual(results, [True, True, True, False])

    def test_clients_are_counted_separately(self):
        for _ in range(3):
            self.limiter.take('10.0.0.1')
        self.assertFalse(self.limiter.take('10.0.0.1'))
        self.assertTrue(self.limiter.take('10.0.0.2'))

    def test_window_resets(self):
        for _ in range(3):
            self.limiter.take('10.0.0.1')
        self.clock.now += 899
        self.assertFalse(self.limiter.take('10.0.0.1'))
        self.clock.now += 1
        self.assertTrue(self.limiter.take('10.0.0.1'))

    def test_remaining(self):
        self.assertEqual(self.limiter.remaining('10.0.0.1'), 3)
        self.limiter.take('10.0.0.1')
        self.assertEqual(self.limiter.remaining('10.0.0.1'), 2)

    def test_expired_clients_are_swept(self):
        self.limiter.take('10.0.0.1')
        self.clock.now += 1000
        self.limiter.take('10.0.0.2')
        self.assertNotIn('10.0.0.1', self.limiter._windows)

    def test_reset(self):
        for _ in range(3):
            self.limiter.take('10.0.0.1')
        self.limiter.reset()
        self.assertTrue(self.limiter.take('10.0.0.1'))


if __name__ == '__main__':
    unittest.main()
