"""Errors raised by the hand evaluators."""


class EvaluatorError(ValueError):
    """Base class for hand evaluation failures."""


class NotEnoughCards(EvaluatorError):
    """The cards given do not reach the minimum the evaluator needs."""

    def __init__(self, context: str, minimum: int):
        self.context = context
        self.minimum = minimum
        super().__init__(f"{context} must have at least {minimum} cards")


class TooManyCards(EvaluatorError):
    """The cards given exceed the maximum the evaluator accepts."""

    def __init__(self, context: str, maximum: int):
        self.context = context
        self.maximum = maximum
        super().__init__(f"{context} must have at most {maximum} cards")


class UnknownError(EvaluatorError):
    """Evaluation produced no rank."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DescriptionError(ValueError):
    """A category / sub-rank pair that has no readable description."""
