import logging
import threading
import time
from datetime import datetime, timezone

from errors import NoSourceAvailable, QuestionNotFound, UpstreamFetchFailed
from settings import DEFAULT_CACHE_TTL, DEFAULT_QUESTIONS_RANGE
from utils.question_utils import transform_rows, weightage_breakdown

logger = logging.getLogger(__name__)

SOURCE_SHEETS = "Google Sheets"
SOURCE_UNAVAILABLE = "Error: No source available"


class Snapshot:
    __slots__ = ("questions", "fetched_at", "stale")

    def __init__(self, questions=(), fetched_at=None, stale=False):
        self.questions = tuple(questions)
        self.fetched_at = fetched_at
        self.stale = stale

    def __len__(self):
        return len(self.questions)

    def age(self, now):
        if self.fetched_at is None or self.stale:
            return None
        return now - self.fetched_at

    def expired(self):
        # fetched_at stays for reporting; stale alone forces the next fetch
        return Snapshot(self.questions, self.fetched_at, stale=True)


class QuestionCache:
    """Time-bounded in-memory copy of the question sheet.

    The snapshot is only ever replaced as a whole. When the sheet cannot be
    read the previous snapshot keeps being served; an empty cache with no
    reachable sheet raises NoSourceAvailable.
    """

    def __init__(self, resolver, questions_range=DEFAULT_QUESTIONS_RANGE, ttl=DEFAULT_CACHE_TTL, clock=time.time):
        self.resolver = resolver
        self.questions_range = questions_range
        self.ttl = ttl
        self.clock = clock
        self.snapshot = Snapshot()
        self._refresh_lock = threading.Lock()

    @property
    def configured(self) -> bool:
        return self.resolver.configured

    @property
    def source_label(self) -> str:
        return SOURCE_SHEETS if self.configured else SOURCE_UNAVAILABLE

    def is_fresh(self, snapshot=None):
        if snapshot is None:
            snapshot = self.snapshot
        if not snapshot.questions:
            return False
        age = snapshot.age(self.clock())
        return age is not None and age < self.ttl

    def get_questions(self):
        snapshot = self.snapshot
        if self.is_fresh(snapshot):
            return list(snapshot.questions)

        with self._refresh_lock:
            # Another request may have refreshed while we waited
            if self.snapshot is not snapshot and self.is_fresh():
                return list(self.snapshot.questions)
            return self._refresh()

    def refresh(self):
        """Drop the freshness timestamp and reload from the sheet."""
        with self._refresh_lock:
            self.snapshot = self.snapshot.expired()
            return self._refresh()

    def _refresh(self):
        previous = self.snapshot
        gateway = self.resolver.resolve()

        if gateway is not None:
            try:
                rows = gateway.read(self.questions_range)
            except UpstreamFetchFailed as e:
                logger.error("Error fetching from Google Sheets: %s", str(e))
            else:
                self.snapshot = Snapshot(transform_rows(rows), self.clock())
                logger.info("Loaded %d questions from Google Sheets", len(self.snapshot))
                return list(self.snapshot.questions)

        if previous.questions:
            logger.warning("Serving %d cached questions, refresh unavailable", len(previous))
            return list(previous.questions)

        raise NoSourceAvailable()

    def get_question(self, question_id):
        for question in self.get_questions():
            if question.id == question_id:
                return question
        raise QuestionNotFound(question_id)

    def stats(self):
        questions = self.get_questions()
        return {
            "total": len(questions),
            "byWeightage": weightage_breakdown(questions),
            "lastUpdated": self.last_updated(),
        }

    def last_updated(self):
        fetched_at = self.snapshot.fetched_at
        if fetched_at is None:
            return None
        return datetime.fromtimestamp(fetched_at, timezone.utc).isoformat().replace("+00:00", "Z")
