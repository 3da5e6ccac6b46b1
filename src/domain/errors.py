"""Domain exceptions for the advisor flow."""


class AnalysisFailure(Exception):
    """Base error for a failed profile analysis.

    Attributes:
        message: Human-readable description of the failure.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RequestFailure(AnalysisFailure):
    """The analysis service could not be reached or raised an error."""


class EmptyResponse(AnalysisFailure):
    """The analysis service replied without any content."""


class SchemaViolation(AnalysisFailure):
    """The reply is not JSON or does not satisfy the result schema."""


class InvalidTransitionError(ValueError):
    """A session transition was requested from an incompatible state."""


class FormIncompleteError(ValueError):
    """The financial form cannot be submitted yet.

    Attributes:
        issues: Problems preventing submission.
    """

    def __init__(self, issues: list[str]) -> None:
        super().__init__("; ".join(issues) or "Form is incomplete")
        self.issues = issues


__all__ = [
    "AnalysisFailure",
    "RequestFailure",
    "EmptyResponse",
    "SchemaViolation",
    "InvalidTransitionError",
    "FormIncompleteError",
]
