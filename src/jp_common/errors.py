"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Request validation
  2xxx: Venue
  3xxx: Contribution
  4xxx: Payout / payout rules
  9xxx: System (storage, internal)

Every condition has its own code so callers can tell "fix your request"
(1xxx, 422), "does not exist" (2xxx-4xxx, 404) and "try later" (9xxx)
apart without parsing messages.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Validation ---

class InvalidRequestError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, f"Invalid request: {detail}", 422)


class NothingToUpdateError(AppError):
    def __init__(self, fields: tuple[str, ...]) -> None:
        super().__init__(
            1002,
            f"Nothing to update: send at least one of {', '.join(fields)}",
            422,
        )


class BlankFieldError(AppError):
    def __init__(self, field: str) -> None:
        super().__init__(1003, f"Field must not be blank: {field}", 422)


# --- 2xxx: Venue ---

class VenueNotFoundError(AppError):
    def __init__(self, venue_id: int) -> None:
        super().__init__(2001, f"Venue not found: {venue_id}", 404)


# --- 3xxx: Contribution ---

class ContributionNotFoundError(AppError):
    def __init__(self, contribution_id: int) -> None:
        super().__init__(3001, f"Contribution not found: {contribution_id}", 404)


# --- 4xxx: Payout ---

class PayoutNotFoundError(AppError):
    def __init__(self, payout_id: int) -> None:
        super().__init__(4001, f"Payout not found: {payout_id}", 404)


class RuleNotFoundError(AppError):
    def __init__(self, variant: str, table_label: str, hand_label: str) -> None:
        super().__init__(
            4002,
            f"Payout rule not found: variant={variant} table={table_label} hand={hand_label}",
            404,
        )


# --- 9xxx: System ---

class StorageError(AppError):
    def __init__(self, detail: str = "Storage unavailable") -> None:
        super().__init__(9001, detail, 503)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
