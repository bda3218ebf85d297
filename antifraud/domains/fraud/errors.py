"""Fraud domain exceptions."""


class FraudDomainError(Exception):
    """Base class for errors raised by the fraud domain."""


class ProfileNotFoundError(FraudDomainError, LookupError):
    """No profile is stored for the user. Expected for new users."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"profile not found for user {user_id}")
        self.user_id = user_id


class StoreUnavailableError(FraudDomainError):
    """A store operation could not complete."""

    def __init__(self, store: str, message: str = "store unavailable") -> None:
        super().__init__(f"{store}: {message}")
        self.store = store
