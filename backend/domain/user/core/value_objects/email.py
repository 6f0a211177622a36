"""Email value object."""

import re
from dataclasses import dataclass

from ..exceptions.user_errors import InvalidUserError

# Something@something.something, no whitespace
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Email:
    """Account email address.

    Stored as given after trimming surrounding whitespace; lookups are
    exact, so ``Cook@Example.com`` and ``cook@example.com`` are different
    accounts.

    Examples:
        >>> str(Email(" cook@example.com "))
        'cook@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidUserError("Invalid email format")
        object.__setattr__(self, "value", self.value.strip())
        if not _EMAIL_PATTERN.match(self.value):
            raise InvalidUserError("Invalid email format")

    def __str__(self) -> str:
        return self.value
