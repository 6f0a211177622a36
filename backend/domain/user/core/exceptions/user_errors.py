"""User domain exceptions."""


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class InvalidUserError(UserDomainError):
    """Registration or login data is missing or malformed."""

    pass


class UserNotFoundError(UserDomainError):
    """User was not found in the repository."""

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: User ID or email that was not found
        """
        self.identifier = identifier
        super().__init__(f"User not found: {identifier}")


class UserAlreadyExistsError(UserDomainError):
    """An account is already registered with this email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already registered")


class InvalidCredentialsError(UserDomainError):
    """Unknown email or wrong password, reported with one message."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class InvalidSessionError(UserDomainError):
    """Token does not belong to an open session."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired token")


class AuthenticationRequiredError(UserDomainError):
    """Operation needs a logged-in caller."""

    def __init__(self, action: str = "perform this action"):
        self.action = action
        super().__init__(f"Authentication required to {action}")
