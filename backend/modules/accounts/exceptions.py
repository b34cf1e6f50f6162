"""
Accounts module exceptions.

Session and "user gone" failures live in modules.auth.exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class MissingFieldsError(ValidationError):
    """Raised when required request fields are missing or empty."""

    def __init__(self, fields: list[str]):
        super().__init__(
            f"Missing required fields: {', '.join(fields)}",
            code="MISSING_FIELDS",
            details={"fields": fields},
        )
        self.fields = fields


class EmptyUpdateError(ValidationError):
    """Raised when a profile update carries no fields at all."""

    def __init__(self, message: str = "Update body is empty"):
        super().__init__(message, code="EMPTY_UPDATE")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when an email is already used by another account."""

    def __init__(self, email: str):
        super().__init__(
            "Email is already registered",
            code="EMAIL_TAKEN",
            details={"email": email},
        )


class InvalidCredentialsError(NotFoundError):
    """
    Raised when login finds no account for the email/password pair.

    Unknown email and wrong password raise the same error.
    """

    def __init__(self, message: str = "Email and/or password is incorrect"):
        super().__init__(message, code="INVALID_CREDENTIALS")
