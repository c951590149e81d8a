import logging
from datetime import datetime

import gspread

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/spreadsheets']
TOKEN_URI = 'https://oauth2.googleapis.com/token'


class SheetsServiceError(Exception):
    pass


class SheetsService:
    """
    Guarda los datos de contacto validados en Google Sheets.

    Las credenciales de la service account se leen de GOOGLE_CLIENT_EMAIL /
    GOOGLE_PRIVATE_KEY o de un archivo JSON (GOOGLE_CREDENTIALS_FILE).
    El cliente de gspread se crea en la primera escritura.
    """

    def __init__(self, spreadsheet_id, sheet_range='Sheet1!A1:E1', client_email=None,
                 private_key=None, credentials_file=None):
        self.spreadsheet_id = spreadsheet_id
        self.sheet_range = sheet_range
        self.client_email = client_email
        self.private_key = private_key
        self.credentials_file = credentials_file
        self._client = None

    @classmethod
    def from_config(cls, config):
        return cls(
            spreadsheet_id=config.get('SPREADSHEET_ID'),
            sheet_range=config.get('SHEET_RANGE', 'Sheet1!A1:E1'),
            client_email=config.get('GOOGLE_CLIENT_EMAIL'),
            private_key=config.get('GOOGLE_PRIVATE_KEY'),
            credentials_file=config.get('GOOGLE_CREDENTIALS_FILE'),
        )

    def _credentials_info(self):
        if not self.client_email or not self.private_key:
            raise SheetsServiceError('Google service account credentials are not configured')
        return {
            'type': 'service_account',
            'client_email': self.client_email,
            # Las variables de entorno guardan los saltos de línea escapados
            'private_key': self.private_key.replace('\\n', '\n'),
            'token_uri': TOKEN_URI,
        }

    def get_client(self):
        if self._client is None:
            if self.credentials_file:
                self._client = gspread.service_account(filename=self.credentials_file, scopes=SCOPES)
            else:
                self._client = gspread.service_account_from_dict(self._credentials_info(), scopes=SCOPES)
        return self._client

    @staticmethod
    def build_row(submission, submitted_at=None):
        submitted_at = submitted_at or datetime.now()
        return [
            submission.name,
            submission.email,
            submission.phone,
            submitted_at.strftime('%Y-%m-%d'),
            submitted_at.strftime('%H:%M:%S'),
        ]

    def append_submission(self, submission, submitted_at=None):
        """
        Agregar una fila [nombre, email, teléfono, fecha, hora]

        :param submission: Submission validado
        :param submitted_at: datetime local de la solicitud
        :raises SheetsServiceError: si falla la autenticación o la escritura
        """
        if not self.spreadsheet_id:
            raise SheetsServiceError('SPREADSHEET_ID is not configured')

        row = self.build_row(submission, submitted_at)
        try:
            spreadsheet = self.get_client().open_by_key(self.spreadsheet_id)
            spreadsheet.values_append(
                self.sheet_range,
                {'valueInputOption': 'USER_ENTERED'},
                {'values': [row]},
            )
        except SheetsServiceError:
            raise
        except Exception as e:
            raise SheetsServiceError(f"Error sending data to Google Sheets: {e}") from e

        logger.info(f"Row appended to spreadsheet {self.spreadsheet_id} ({self.sheet_range})")
        return row
