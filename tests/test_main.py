from unittest.mock import patch

from flask import request

import main
from cryo_webhooks.constants.responses import CONCERNS_TEXT
from cryo_webhooks.utils.rate_limiter import FixedWindowRateLimiter, RATE_LIMIT_MESSAGE


def test_faq_intents_go_to_faq_controller():
    body = {'queryResult': {'intent': {'displayName': 'Explain Cryotherapy'}, 'parameters': {}}}
    assert main.select_controller(body) is main.app.config['faq_controller']


def test_contact_parameters_go_to_intake_controller():
    body = {'queryResult': {'intent': {'displayName': 'Collect Info'},
                            'parameters': {'fullname': 'John Smith', 'email': '', 'phone-number': ''}}}
    assert main.select_controller(body) is main.app.config['intake_controller']


def test_unknown_requests_fall_back_to_faq():
    assert main.select_controller({}) is main.app.config['faq_controller']


def test_webhook_entrypoint():
    body = {'queryResult': {'intent': {'displayName': 'Address Concerns'}, 'parameters': {}}}

    with patch.object(main.app.config['facility_cache'], 'refresh_delay', 0):
        with main.app.test_request_context('/', method='POST', json=body):
            response, status = main.webhook(request)

    assert status == 200
    assert response.get_json() == {'fulfillmentText': CONCERNS_TEXT}


def test_webhook_entrypoint_applies_rate_limit_to_faq():
    body = {'queryResult': {'intent': {'displayName': 'Address Concerns'}, 'parameters': {}}}
    limiter = FixedWindowRateLimiter(max_requests=2, window_seconds=900)

    statuses = []
    with patch.dict(main.app.config, {'rate_limiter': limiter}), \
            patch.object(main.app.config['facility_cache'], 'refresh_delay', 0):
        for _ in range(4):
            with main.app.test_request_context('/', method='POST', json=body):
                result = main.webhook(request)
            statuses.append(result[1])
        blocked_body = result[0]

    assert statuses == [200, 200, 429, 429]
    assert blocked_body == RATE_LIMIT_MESSAGE


def test_webhook_entrypoint_does_not_limit_intake():
    body = {'queryResult': {'parameters': {'fullname': '', 'email': '', 'phone-number': ''}}}
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=900)

    with patch.dict(main.app.config, {'rate_limiter': limiter}):
        statuses = []
        for _ in range(3):
            with main.app.test_request_context('/', method='POST', json=body):
                statuses.append(main.webhook(request)[1])

    assert statuses == [200, 200, 200]
