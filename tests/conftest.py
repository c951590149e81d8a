from unittest.mock import MagicMock

import pytest

from cryo_webhooks import create_app
from cryo_webhooks.config.settings import TestingConfig


def first_choice(options):
    return options[0]


@pytest.fixture
def services():
    return {
        'sheets_service': MagicMock(),
        'email_service': MagicMock(),
        'choice': first_choice,
    }


@pytest.fixture
def app(services):
    return create_app(TestingConfig, services=services)


@pytest.fixture
def client(app):
    return app.test_client()
