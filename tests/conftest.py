from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
BACKEND = ROOT / "backend"
if str(BACKEND) not in sys.path:
    sys.path.insert(0, str(BACKEND))

from errors import UpstreamFetchFailed, UpstreamWriteFailed  # noqa: E402
from main import create_app  # noqa: E402
from question_cache import QuestionCache  # noqa: E402
from settings import Settings  # noqa: E402
from submission_recorder import SubmissionRecorder  # noqa: E402


HEADER = ["Question", "Option A", "Option B", "Option C", "Option D", "Correct Answer", "Weightage"]


class FakeGateway:
    """In-memory stand-in for SheetsGateway."""

    def __init__(self, rows=None):
        self.rows = rows if rows is not None else []
        self.reads = 0
        self.appended = []
        self.fail_reads = False
        self.fail_appends = False

    def read(self, range_name):
        self.reads += 1
        if self.fail_reads:
            raise UpstreamFetchFailed("sheet unavailable")
        return [list(r) for r in self.rows]

    def append(self, range_name, row):
        if self.fail_appends:
            raise UpstreamWriteFailed("quota exceeded")
        self.appended.append((range_name, row))


class FakeResolver:
    """Resolver whose availability can be flipped between calls."""

    def __init__(self, gateway=None, available=True):
        self.gateway_impl = gateway or FakeGateway()
        self.available = available
        self.attempts = 0

    @property
    def configured(self):
        return self.available

    def resolve(self):
        self.attempts += 1
        return self.gateway_impl if self.available else None


class ManualClock:
    def __init__(self, now=1_700_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def sample_rows():
    return [
        HEADER,
        ["What is 2 + 2?", "3", "4", "5", "6", "1", "easy"],
        ["Capital of France?", "London", "Paris", "Berlin", "", "Paris", "medium"],
        ["Largest planet?", "Mars", "Venus", "Jupiter", "Saturn", "2", "hard"],
    ]


@pytest.fixture
def gateway(sample_rows):
    return FakeGateway(sample_rows)


@pytest.fixture
def resolver(gateway):
    return FakeResolver(gateway)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def cache(resolver, clock):
    return QuestionCache(resolver, ttl=300, clock=clock)


@pytest.fixture
def settings():
    return Settings(spreadsheet_id="sheet-123", log_level="WARNING")


@pytest.fixture
def app(settings, resolver, cache):
    app = create_app(
        settings=settings,
        resolver=resolver,
        cache=cache,
        recorder=SubmissionRecorder(resolver, clock=lambda: "2024-01-01T00:00:00Z"),
    )
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
