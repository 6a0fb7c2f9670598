class QuizBackendError(Exception):
    """Base class for errors raised by the quiz backend."""


class SheetsNotConfigured(QuizBackendError):
    """No usable credentials or spreadsheet id."""


class NoSourceAvailable(QuizBackendError):
    """The question cache is empty and could not be refreshed."""

    def __init__(self, message="Google Sheets not configured and no cached questions available"):
        super().__init__(message)


class UpstreamFetchFailed(QuizBackendError):
    pass


class UpstreamWriteFailed(QuizBackendError):
    pass


class QuestionNotFound(QuizBackendError):
    def __init__(self, question_id):
        self.question_id = question_id
        super().__init__(f"No question found with ID {question_id}")
