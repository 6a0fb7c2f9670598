import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

PLACEHOLDER_SPREADSHEET_ID = "your_spreadsheet_id_here"
SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

DEFAULT_QUESTIONS_RANGE = "Sheet1!A:G"
DEFAULT_USER_DATA_RANGE = "UserData!A:H"
DEFAULT_CACHE_TTL = 5 * 60  # seconds


def env_number(name, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", name, raw, default)
        return default


class Settings:
    def __init__(self, spreadsheet_id=None, questions_range=DEFAULT_QUESTIONS_RANGE,
                 user_data_range=DEFAULT_USER_DATA_RANGE, service_account_key=None,
                 credentials_file=None, cache_ttl=DEFAULT_CACHE_TTL, log_level="INFO",
                 port=5000, cors_origins="*"):
        self.spreadsheet_id = spreadsheet_id
        self.questions_range = questions_range
        self.user_data_range = user_data_range
        self.service_account_key = service_account_key
        self.credentials_file = credentials_file
        self.cache_ttl = cache_ttl
        self.log_level = log_level
        self.port = port
        self.cors_origins = cors_origins

    @classmethod
    def from_env(cls):
        return cls(
            spreadsheet_id=os.getenv("GOOGLE_SPREADSHEET_ID"),
            questions_range=os.getenv("GOOGLE_SHEETS_RANGE") or DEFAULT_QUESTIONS_RANGE,
            user_data_range=os.getenv("GOOGLE_SHEETS_USER_DATA_RANGE") or DEFAULT_USER_DATA_RANGE,
            service_account_key=os.getenv("GOOGLE_SERVICE_ACCOUNT_KEY"),
            credentials_file=os.getenv("GOOGLE_APPLICATION_CREDENTIALS"),
            cache_ttl=env_number("QUESTIONS_CACHE_TTL", DEFAULT_CACHE_TTL, float),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            port=env_number("PORT", 5000, int),
            cors_origins=os.getenv("CORS_ORIGINS", "*"),
        )

    @property
    def has_spreadsheet_id(self) -> bool:
        return bool(self.spreadsheet_id) and self.spreadsheet_id != PLACEHOLDER_SPREADSHEET_ID

    def cors_origin_list(self):
        if self.cors_origins.strip() == "*":
            return "*"
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
