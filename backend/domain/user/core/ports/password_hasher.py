"""IPasswordHasher port - one-way password hashing."""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Port for hashing and checking passwords."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a clear-text password for storage."""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check a clear-text password against a stored hash."""
        pass
