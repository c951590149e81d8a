import logging
import smtplib
from email.message import EmailMessage

from cryo_webhooks.constants.responses import (
    CONFIRMATION_EMAIL_SUBJECT,
    CONFIRMATION_EMAIL_TEXT,
    CONFIRMATION_EMAIL_HTML,
)

logger = logging.getLogger(__name__)


class EmailServiceError(Exception):
    pass


class EmailService:
    def __init__(self, host, port=587, username=None, password=None, from_email=None,
                 use_tls=True, timeout=10):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email or username
        self.use_tls = use_tls
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            host=config.get('SMTP_HOST'),
            port=config.get('SMTP_PORT', 587),
            username=config.get('SMTP_USERNAME'),
            password=config.get('SMTP_PASSWORD'),
            from_email=config.get('SMTP_FROM'),
            use_tls=config.get('SMTP_USE_TLS', True),
        )

    def build_confirmation(self, to_email, name):
        """
        Mensaje de confirmación con cuerpo de texto plano y alternativa HTML

        :param to_email: Destinatario
        :param name: Nombre enviado por el usuario
        :return: EmailMessage listo para enviar
        """
        msg = EmailMessage()
        msg['Subject'] = CONFIRMATION_EMAIL_SUBJECT
        msg['From'] = self.from_email
        msg['To'] = to_email
        msg.set_content(CONFIRMATION_EMAIL_TEXT.format(name=name))
        msg.add_alternative(CONFIRMATION_EMAIL_HTML.format(name=name), subtype='html')
        return msg

    def send_confirmation(self, to_email, name):
        if not self.host or not self.from_email:
            raise EmailServiceError('SMTP is not configured')

        msg = self.build_confirmation(to_email, name)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.username and self.password:
                    smtp.login(self.username, self.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise EmailServiceError(f"Error sending confirmation email to {to_email}: {e}") from e

        logger.info(f"Confirmation email sent to {to_email}")
