"""Custom exceptions for the intake context."""

from typing import Optional


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when a résumé document does not have the expected shape.

    Raised during normalization when a required object is missing or a field has
    the wrong type (e.g., a string where a list of highlights is expected).

    Attributes:
        message: Error description
        path: Location of the offending value (e.g., "work[2].highlights")
        expected: Human-readable description of the expected type
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        expected: Optional[str] = None,
    ):
        self.message = message
        self.path = path
        self.expected = expected

        parts = [message]

        if path:
            parts.append(f"Location: {path}")
        if expected:
            parts.append(f"Expected: {expected}")

        super().__init__("\n".join(parts))
