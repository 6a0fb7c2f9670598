import logging
import os

import requests
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000/api"
DEFAULT_TIMEOUT = 10  # seconds


class QuizApiError(Exception):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class QuizApiClient:
    """Small client for the quiz backend's HTTP API."""

    def __init__(self, base_url=None, timeout=DEFAULT_TIMEOUT, session=None):
        self.base_url = (base_url or os.getenv("QUIZ_API_URL") or DEFAULT_API_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_all_questions(self):
        url = self._url("questions")
        logger.info("🔗 Fetching questions from: %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout, headers={"Content-Type": "application/json"})
        except requests.Timeout:
            logger.error("🕐 Request timed out after %s seconds", self.timeout)
            raise
        except requests.ConnectionError:
            logger.error("🔌 Network error - backend may be down or unreachable")
            raise

        if not response.ok:
            raise QuizApiError(f"HTTP error! status: {response.status_code}", response.status_code)

        data = response.json()
        if not data.get("success"):
            raise QuizApiError(data.get("error") or "Failed to fetch questions", response.status_code)

        questions = data.get("questions", [])
        logger.info("✅ Questions loaded from: %s (%d questions)", data.get("source"), len(questions))
        return questions

    def get_question_by_id(self, question_id):
        try:
            response = self.session.get(self._url(f"questions/{question_id}"), timeout=self.timeout)
            if response.status_code == 404:
                return None
            if not response.ok:
                raise QuizApiError(f"HTTP error! status: {response.status_code}", response.status_code)

            data = response.json()
            if not data.get("success"):
                raise QuizApiError("Failed to fetch question", response.status_code)
            return data["question"]
        except (requests.RequestException, QuizApiError, ValueError, KeyError) as e:
            logger.error("Error fetching question %s: %s", question_id, e)
            return None

    def check_backend_health(self) -> bool:
        try:
            return self.session.get(self._url("health"), timeout=self.timeout).ok
        except requests.RequestException as e:
            logger.warning("Backend health check failed: %s", e)
            return False

    def submit_user_data(self, payload):
        response = self.session.post(self._url("user-data"), json=payload, timeout=self.timeout)
        if not response.ok:
            try:
                data = response.json()
            except ValueError:
                data = {}
            raise QuizApiError(data.get("message") or data.get("error")
                               or f"HTTP error! status: {response.status_code}", response.status_code)
        return response.json()
