import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class QuestionRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(gt=0)
    question: str = Field(min_length=1)
    options: List[str] = Field(min_length=2, max_length=4)
    correct_answer: int = Field(alias="correctAnswer", ge=0)
    weightage: int = Field(gt=0)

    @model_validator(mode="after")
    def check_answer_in_range(self):
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correctAnswer {self.correct_answer} out of range for {len(self.options)} options"
            )
        return self

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class UserSubmission(BaseModel):
    """Quiz result as sent by the client.

    Values are stored as given; the row is opaque to the backend.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Any = ""
    email: Any = ""
    score: Any = 0
    total_questions: Any = Field(default=0, alias="totalQuestions")
    correct_answers: Any = Field(default=0, alias="correctAnswers")
    percentage: Any = 0
    answers: Any = Field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload):
        """Build a submission from a request body.

        Falsy values (null, "", 0, false) fall back to the field default and
        anything that is not a JSON object is treated as an empty one.
        """
        if not isinstance(payload, dict):
            payload = {}
        present = {
            key: value for key, value in payload.items()
            if value is not None and value is not False and value != "" and value != 0
        }
        return cls.model_validate(present)

    def to_row(self, timestamp: str) -> list:
        return [
            timestamp,
            cell_value(self.name),
            cell_value(self.email),
            cell_value(self.score),
            cell_value(self.total_questions),
            cell_value(self.correct_answers),
            cell_value(self.percentage),
            json.dumps(self.answers),
        ]


def cell_value(value):
    if isinstance(value, (str, int, float, bool)):
        return value
    return json.dumps(value)


class SubmissionAck(BaseModel):
    saved: bool
    message: str
    timestamp: str
    warning: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        body = {"success": True, "message": self.message, "timestamp": self.timestamp}
        if self.warning:
            body["warning"] = self.warning
        return body


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
