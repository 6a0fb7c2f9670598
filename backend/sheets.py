import json
import logging

from google.oauth2 import service_account
from googleapiclient.discovery import build

from errors import SheetsNotConfigured, UpstreamFetchFailed, UpstreamWriteFailed
from settings import SHEETS_SCOPES

logger = logging.getLogger(__name__)


def load_credentials(settings):
    """Build service-account credentials, inline key first, then key file.

    Returns None when neither is configured.
    """
    if settings.service_account_key:
        try:
            info = json.loads(settings.service_account_key)
            return service_account.Credentials.from_service_account_info(info, scopes=SHEETS_SCOPES)
        except ValueError as e:
            raise SheetsNotConfigured(f"Invalid GOOGLE_SERVICE_ACCOUNT_KEY: {e}") from e

    if settings.credentials_file:
        try:
            return service_account.Credentials.from_service_account_file(
                settings.credentials_file, scopes=SHEETS_SCOPES
            )
        except (OSError, ValueError) as e:
            raise SheetsNotConfigured(f"Could not load {settings.credentials_file}: {e}") from e

    return None


def build_sheets_service(credentials):
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


class SheetsGateway:
    """Reads and appends rows in a single spreadsheet."""

    def __init__(self, service, spreadsheet_id):
        self.service = service
        self.spreadsheet_id = spreadsheet_id

    def verify(self):
        self.service.spreadsheets().get(spreadsheetId=self.spreadsheet_id).execute()

    def read(self, range_name):
        try:
            response = self.service.spreadsheets().values().get(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
            ).execute()
        except Exception as e:
            raise UpstreamFetchFailed(f"Error fetching {range_name}: {e}") from e
        return response.get("values", [])

    def append(self, range_name, row):
        try:
            return self.service.spreadsheets().values().append(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption="USER_ENTERED",
                insertDataOption="INSERT_ROWS",
                body={"values": [row]},
            ).execute()
        except Exception as e:
            raise UpstreamWriteFailed(f"Error appending to {range_name}: {e}") from e


class CredentialResolver:
    """Lazily connects to Google Sheets.

    A failed attempt is not remembered: every call to resolve() while
    unconfigured tries again, so fixing the environment takes effect on the
    next cache miss or submission.
    """

    def __init__(self, settings, service_factory=build_sheets_service):
        self.settings = settings
        self.service_factory = service_factory
        self.gateway = None

    @property
    def configured(self) -> bool:
        return self.gateway is not None

    def resolve(self):
        if self.gateway is not None:
            return self.gateway

        if not self.settings.has_spreadsheet_id:
            logger.info("Google Sheets not configured - GOOGLE_SPREADSHEET_ID missing or default value")
            return None

        try:
            credentials = load_credentials(self.settings)
            if credentials is None:
                logger.info("No Google credentials found. Questions will not be available.")
                return None

            gateway = SheetsGateway(self.service_factory(credentials), self.settings.spreadsheet_id)
            # Test the connection before trusting it
            gateway.verify()
        except Exception as e:
            logger.error("❌ Error initializing Google Sheets API: %s", str(e))
            return None

        self.gateway = gateway
        logger.info("✅ Google Sheets API initialized successfully")
        return gateway
