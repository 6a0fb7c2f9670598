import logging

from errors import UpstreamWriteFailed
from models import SubmissionAck, utc_timestamp
from settings import DEFAULT_USER_DATA_RANGE

logger = logging.getLogger(__name__)

NOT_SAVED_WARNING = "Data was not saved to Google Sheets"


class SubmissionRecorder:
    """Appends quiz results to the user-data sheet.

    Writes are best effort: record() always returns an acknowledgement and a
    failed or skipped write only shows up as a warning on it.
    """

    def __init__(self, resolver, user_data_range=DEFAULT_USER_DATA_RANGE, clock=utc_timestamp):
        self.resolver = resolver
        self.user_data_range = user_data_range
        self.clock = clock

    def record(self, submission) -> SubmissionAck:
        gateway = self.resolver.resolve()
        if gateway is None:
            logger.warning("⚠️ Google Sheets not configured - user data only logged")
            return SubmissionAck(
                saved=False,
                message="User data received (Google Sheets not configured)",
                timestamp=self.clock(),
                warning=NOT_SAVED_WARNING,
            )

        timestamp = self.clock()
        try:
            gateway.append(self.user_data_range, submission.to_row(timestamp))
        except UpstreamWriteFailed as e:
            logger.error("❌ Error saving to Google Sheets: %s", str(e))
            return SubmissionAck(
                saved=False,
                message="User data received (Google Sheets save failed)",
                timestamp=self.clock(),
                warning=NOT_SAVED_WARNING,
            )

        logger.info("✅ User data saved to Google Sheets successfully")
        return SubmissionAck(
            saved=True,
            message="User data saved to Google Sheets successfully",
            timestamp=timestamp,
        )
