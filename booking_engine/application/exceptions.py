from __future__ import annotations


class BackendUnavailableError(RuntimeError):
    """Raised when a backend read fails (network error, non-2xx status, invalid JSON)."""
    pass


class BookingValidationError(ValueError):
    """Raised before submission when required booking fields are missing."""

    def __init__(self, errors: dict[str, bool]) -> None:
        self.errors = errors
        missing = ", ".join(name for name, flagged in errors.items() if flagged)
        super().__init__(f"Missing required booking fields: {missing}")


class BookingSubmissionError(RuntimeError):
    """Raised when the backend rejects a booking. Carries the backend's error fields verbatim."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error: str | None = None,
        detail: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.detail = detail
        self.hint = hint
