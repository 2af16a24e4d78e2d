"""Errors raised by the quiz engine."""


class QuizError(Exception):
    """Base exception for quiz errors."""
    pass


class PreconditionViolation(QuizError):
    """Operation called in a state where it is not allowed."""
    pass


class AnswerTypeError(QuizError, TypeError):
    """Answer does not match the variant of the question it answers."""
    pass


class InvalidQuestionError(QuizError, ValueError):
    """Malformed question definition."""
    pass
