import smtplib
import unittest
from unittest.mock import patch

from cryo_webhooks.services.email_service import EmailService, EmailServiceError


class TestEmailService(unittest.TestCase):
    def setUp(self):
        self.service = EmailService(
            host='smtp.example.com',
            port=587,
            username='bookings@uscryo.example',
            password='secret',
        )

    def test_build_confirmation(self):
        msg = self.service.build_confirmation('john@example.com', 'John Smith')

        self.assertEqual(msg['To'], 'john@example.com')
        self.assertEqual(msg['From'], 'bookings@uscryo.example')
        self.assertTrue(msg.is_multipart())
        self.assertIn('John Smith', msg.get_body(preferencelist=('plain',)).get_content())
        self.assertIn('John Smith', msg.get_body(preferencelist=('html',)).get_content())

    @patch('cryo_webhooks.services.email_service.smtplib.SMTP')
    def test_send_confirmation(self, mock_smtp):
        smtp = mock_smtp.return_value.__enter__.return_value

        self.service.send_confirmation('john@example.com', 'John Smith')

        mock_smtp.assert_called_once_with('smtp.example.com', 587, timeout=10)
        smtp.starttls.assert_called_once()
        smtp.login.assert_called_once_with('bookings@uscryo.example', 'secret')
        sent = smtp.send_message.call_args[0][0]
        self.assertEqual(sent['To'], 'john@example.com')

    @patch('cryo_webhooks.services.email_service.smtplib.SMTP')
    def test_without_tls(self, mock_smtp):
        service = EmailService(host='localhost', port=25, from_email='noreply@uscryo.example', use_tls=False)
        smtp = mock_smtp.return_value.__enter__.return_value

        service.send_confirmation('john@example.com', 'John Smith')

        smtp.starttls.assert_not_called()
        smtp.login.assert_not_called()
        smtp.send_message.assert_called_once()

    def test_not_configured(self):
        with self.assertRaises(EmailServiceError):
            EmailService(host=None).send_confirmation('john@example.com', 'John Smith')

    @patch('cryo_webhooks.services.email_service.smtplib.SMTP')
    def test_smtp_errors_are_wrapped(self, mock_smtp):
        smtp = mock_smtp.return_value.__enter__.return_value
        smtp.send_message.side_effect = smtplib.SMTPRecipientsRefused({})

        with self.assertRaises(EmailServiceError):
            self.service.send_confirmation('john@example.com', 'John Smith')

    @patch('cryo_webhooks.services.email_service.smtplib.SMTP')
    def test_connection_errors_are_wrapped(self, mock_smtp):
        mock_smtp.side_effect = ConnectionRefusedError('refused')

        with self.assertRaises(EmailServiceError):
            self.service.send_confirmation('john@example.com', 'John Smith')


if __name__ == '__main__':
    unittest.main()
