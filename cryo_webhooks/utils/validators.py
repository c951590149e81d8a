import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

import phonenumbers
from phonenumbers import NumberParseException

logger = logging.getLogger(__name__)

NAME_TOKEN_PATTERN = re.compile(r'^[A-Za-z]+$')
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


@dataclass(frozen=True)
class Submission:
    name: str
    email: str
    phone: str

    def is_complete(self) -> bool:
        return bool(self.name.strip() and self.email.strip() and self.phone.strip())


@dataclass(frozen=True)
class ValidationResult:
    name_valid: bool
    email_valid: bool
    phone_valid: bool
    invalid_fields: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.name_valid and self.email_valid and self.phone_valid


def is_valid_name(name, min_words: int = 2, max_words: Optional[int] = None) -> bool:
    """
    Nombre completo: solo letras, palabras separadas por espacios

    :param name: Valor recibido de Dialogflow
    :param min_words: Cantidad mínima de palabras
    :param max_words: Cantidad máxima de palabras (None = sin límite)
    :return: True si el nombre es válido
    """
    if not isinstance(name, str):
        logger.error(f"is_valid_name: Received non-string input: {name!r}")
        return False

    tokens = name.split()
    if len(tokens) < min_words:
        return False
    if max_words is not None and len(tokens) > max_words:
        return False

    return all(NAME_TOKEN_PATTERN.match(token) for token in tokens)


def is_valid_email(email) -> bool:
    """Formato básico de email (no verifica que exista el buzón)"""
    if not isinstance(email, str):
        logger.error(f"is_valid_email: Received non-string input: {email!r}")
        return False
    return EMAIL_PATTERN.match(email.strip()) is not None


def is_valid_phone_number(phone, region: Optional[str] = None) -> bool:
    """
    Teléfono en formato internacional usando phonenumbers

    El region se usa como pista para números locales sin prefijo '+'.

    :param phone: Número recibido
    :param region: Código de país por defecto (ej. 'ZM')
    :return: True si el número es válido según la metadata de su país
    """
    if not isinstance(phone, str):
        logger.error(f"is_valid_phone_number: Received non-string input: {phone!r}")
        return False
    try:
        parsed = phonenumbers.parse(phone, region)
    except NumberParseException as e:
        logger.error(f"Phone number parsing error: {e} for phone: {phone!r}")
        return False
    return phonenumbers.is_valid_number(parsed)


def validate_submission(submission: Submission, min_words: int = 2,
                        max_words: Optional[int] = None,
                        phone_region: Optional[str] = None) -> ValidationResult:
    name_valid = is_valid_name(submission.name, min_words=min_words, max_words=max_words)
    email_valid = is_valid_email(submission.email)
    phone_valid = is_valid_phone_number(submission.phone, region=phone_region)

    invalid_fields = tuple(
        field_name
        for field_name, valid in (('name', name_valid), ('email', email_valid), ('phone', phone_valid))
        if not valid
    )
    return ValidationResult(
        name_valid=name_valid,
        email_valid=email_valid,
        phone_valid=phone_valid,
        invalid_fields=invalid_fields,
    )
