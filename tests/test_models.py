import json

import pytest
from pydantic import ValidationError

from models import QuestionRecord, SubmissionAck, UserSubmission


def test_question_record_serialises_camel_case():
    q = QuestionRecord(id=1, question="Q", options=["A", "B"], correctAnswer=1, weightage=5)
    assert q.to_json() == {"id": 1, "question": "Q", "options": ["A", "B"], "correctAnswer": 1, "weightage": 5}


def test_question_record_rejects_out_of_range_answer():
    with pytest.raises(ValidationError):
        QuestionRecord(id=1, question="Q", options=["A", "B"], correct_answer=2, weightage=5)


def test_question_record_rejects_too_many_options():
    with pytest.raises(ValidationError):
        QuestionRecord(id=1, question="Q", options=list("ABCDE"), correct_answer=0, weightage=5)


def test_submission_defaults_for_missing_and_falsy_fields():
    sub = UserSubmission.from_payload({"name": None, "email": "", "score": 0})

    assert sub.to_row("ts") == ["ts", "", "", 0, 0, 0, 0, "{}"]


def test_submission_from_non_object_payload():
    assert UserSubmission.from_payload(["x"]).name == ""
    assert UserSubmission.from_payload(None).answers == {}


def test_submission_row_order():
    sub = UserSubmission.from_payload({
        "percentage": 50.5,
        "answers": {"3": 1},
        "correctAnswers": 2,
        "totalQuestions": 4,
        "score": 12,
        "email": "e@x.io",
        "name": "Bo",
    })

    assert sub.to_row("ts") == ["ts", "Bo", "e@x.io", 12, 4, 2, 50.5, json.dumps({"3": 1})]


def test_ack_omits_empty_warning():
    ack = SubmissionAck(saved=True, message="ok", timestamp="ts")
    assert ack.to_json() == {"success": True, "message": "ok", "timestamp": "ts"}
