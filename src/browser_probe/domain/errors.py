"""Domain errors."""


class SubmissionDecodeError(ValueError):
    """Raised when a submission body cannot be decoded into a Submission."""
