import logging
import re

from pydantic import ValidationError

from models import QuestionRecord

logger = logging.getLogger(__name__)

MIN_ROW_CELLS = 6
OPTION_COLUMNS = (1, 2, 3, 4)
ANSWER_COLUMN = 5
WEIGHTAGE_COLUMN = 6

NUMERIC_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")
LEADING_INT_RE = re.compile(r"^[+-]?[0-9]+")

DEFAULT_WEIGHTAGE = 10
DIFFICULTY_WEIGHTAGE = {
    "easy": 5,
    "medium": 10,
    "hard": 20,
}


def cell_text(row, index):
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()


def parse_number(value):
    """Return the leading integer of a numeric cell, or None if it isn't numeric.

    "1e3" reads as 1 and "2.9" as 2. Only ASCII digits count.
    """
    if not isinstance(value, str):
        value = str(value)
    if not NUMERIC_RE.match(value):
        return None
    leading = LEADING_INT_RE.match(value)
    if leading is None:
        # ".5" style, no integer part
        return 0
    return int(leading.group())


def has_header(rows):
    if not rows or not rows[0]:
        return False
    return "question" in cell_text(rows[0], 0).lower()


def resolve_correct_answer(value, options):
    if not value:
        return None
    index = parse_number(value)
    if index is not None:
        return index

    lowered = value.lower()
    for i, option in enumerate(options):
        if option.lower() == lowered:
            return i
    return 0


def resolve_weightage(value):
    if not value:
        return DEFAULT_WEIGHTAGE
    number = parse_number(value)
    if number is not None:
        return number
    return DIFFICULTY_WEIGHTAGE.get(value.lower(), DEFAULT_WEIGHTAGE)


def transform_rows(rows):
    """Convert raw sheet rows into validated question records.

    Expected columns: question, option A-D, correct answer (index or option
    text) and an optional weightage (number or easy/medium/hard). A first row
    whose first cell mentions "question" is treated as a header. Ids follow
    the row position after the header, so rows dropped as invalid leave gaps.
    """
    rows = rows or []
    start = 1 if has_header(rows) else 0
    questions = []

    for position, row in enumerate(rows[start:]):
        if not row or len(row) < MIN_ROW_CELLS:
            continue

        options = [cell_text(row, i) for i in OPTION_COLUMNS]
        options = [option for option in options if option]

        correct_answer = resolve_correct_answer(cell_text(row, ANSWER_COLUMN), options)
        if correct_answer is None:
            logger.debug("Skipping row %d: empty correct answer", position + start + 1)
            continue

        try:
            question = QuestionRecord(
                id=position + 1,
                question=cell_text(row, 0),
                options=options,
                correct_answer=correct_answer,
                weightage=resolve_weightage(cell_text(row, WEIGHTAGE_COLUMN)),
            )
        except ValidationError as e:
            logger.debug("Skipping invalid row %d: %s", position + start + 1, e)
            continue  # Skip invalid questions

        questions.append(question)

    return questions


def weightage_breakdown(questions):
    return {
        label: sum(1 for q in questions if q.weightage == weight)
        for label, weight in DIFFICULTY_WEIGHTAGE.items()
    }
