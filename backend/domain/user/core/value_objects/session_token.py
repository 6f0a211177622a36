"""SessionToken value object."""

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class SessionToken:
    """Opaque login token sent back in the ``X-Authorization`` header."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError(f"Invalid session token: {self.value!r}")

    @staticmethod
    def generate() -> "SessionToken":
        return SessionToken(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value
