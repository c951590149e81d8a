import unittest

from cryo_webhooks.config.settings import Config, TestingConfig
from cryo_webhooks.utils.environment import env_bool, env_int


class TestEnvironmentHelpers(unittest.TestCase):
    def test_env_bool(self):
        for value in ['1', 'true', 'TRUE', 'yes', ' on ']:
            with self.subTest(value=value):
                self.assertTrue(env_bool(value))
        self.assertFalse(env_bool('false', default=True))
        self.assertTrue(env_bool(None, default=True))
        self.assertTrue(env_bool('', default=True))

    def test_env_int(self):
        self.assertEqual(env_int('42'), 42)
        self.assertIsNone(env_int(''))
        self.assertEqual(env_int(None, 5), 5)


class TestConfig(unittest.TestCase):
    def test_rate_limit_defaults(self):
        self.assertEqual(TestingConfig.RATE_LIMIT_WINDOW_SECONDS, 15 * 60)
        self.assertEqual(TestingConfig.RATE_LIMIT_MAX_REQUESTS, 100)

    def test_events(self):
        self.assertEqual(Config.COLLECT_EVENT_NAME, 'collect_user_info')
        self.assertEqual(Config.SUCCESS_EVENT_NAME, 'trigger-booking-intent')


if __name__ == '__main__':
    unittest.main()
