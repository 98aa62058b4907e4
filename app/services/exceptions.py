"""
Domain errors raised by the service layer.

Each error carries the HTTP status the API surface answers with; the message is
shown to the user as-is.
"""


class MarketplaceError(Exception):
    """Base class for expected, user-facing failures."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(MarketplaceError):
    status_code = 404


class PostingNotFoundError(NotFoundError):
    def __init__(self, job_posting_id: int):
        super().__init__("Job posting not found")
        self.job_posting_id = job_posting_id


class SeekerNotFoundError(NotFoundError):
    def __init__(self, job_seeker_id: int):
        super().__init__("Job seeker profile not found")
        self.job_seeker_id = job_seeker_id


class ForeignKeyViolationError(MarketplaceError):
    status_code = 400


class DuplicateEmailError(MarketplaceError):
    status_code = 409

    def __init__(self):
        super().__init__("Email already registered")


class DuplicateProfileError(MarketplaceError):
    status_code = 409


class DuplicateApplicationError(MarketplaceError):
    status_code = 409

    def __init__(self):
        super().__init__("You have already applied for this job")


class PostingInactiveError(MarketplaceError):
    status_code = 400

    def __init__(self):
        super().__init__("Job posting is not active")


class InvalidCredentialsError(MarketplaceError):
    status_code = 401

    def __init__(self):
        # Same message for unknown email and wrong password
        super().__init__("Invalid email or password")
