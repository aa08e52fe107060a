"""Error types raised by the energy engine."""


class FitSyncError(Exception):
    """Base exception for fitsync errors."""


class IncompleteProfileError(FitSyncError):
    """Raised when a calculation needs profile fields that are missing."""

    def __init__(self, missing_fields: tuple[str, ...]) -> None:
        self.missing_fields = missing_fields
        super().__init__(f"Profile is incomplete: {', '.join(missing_fields)}")


class InvalidAmountError(FitSyncError, ValueError):
    """Raised when a negative or non-numeric amount reaches a tracker."""

    def __init__(self, amount: object, field: str = "amount") -> None:
        self.amount = amount
        self.field = field
        super().__init__(f"{field} must be a non-negative number, got {amount!r}")
