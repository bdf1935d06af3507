class FormBuilderError(Exception):
    """Base class for errors raised while building forms or recording responses"""

    def __init__(self, message: str = None):
        super().__init__(message)
        self.message = message


class ValidationError(FormBuilderError):
    """Required client input is missing or blank"""


class InvalidQuestionType(FormBuilderError):
    """A question names a type that is not in the question_type lookup"""

    def __init__(self, question_type: str):
        super().__init__(f"Invalid question type: {question_type}")
        self.question_type = question_type


class NotFound(FormBuilderError):
    """The referenced form does not exist"""


class PersistenceError(FormBuilderError):
    """The database rejected a statement, the transaction has been rolled back"""


class FormSubmissionError(FormBuilderError):
    """The forms API answered a client call with an error"""

    def __init__(self, message: str = None, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
