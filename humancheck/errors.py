"""
HumanCheck Exceptions

The scoring pipeline itself never raises on well-formed input; these
cover the collaborators around it.
"""


class HumanCheckError(Exception):
    """Base class for HumanCheck errors."""
    pass


class UnknownQuestionError(HumanCheckError):
    """Raised when a submission references a question not in the bank."""

    def __init__(self, question_id: str) -> None:
        super().__init__(f"Unknown question id: {question_id}")
        self.question_id = question_id
