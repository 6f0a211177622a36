"""bcrypt implementation of IPasswordHasher."""

from typing import Optional

import bcrypt

from domain.user.core.ports.password_hasher import IPasswordHasher
from infrastructure.config import get_bcrypt_rounds


class BcryptPasswordHasher(IPasswordHasher):
    """Salted bcrypt hashes, stored as ``$2b$...`` strings.

    Args:
        rounds: bcrypt cost factor, defaults to BCRYPT_ROUNDS
    """

    def __init__(self, rounds: Optional[int] = None) -> None:
        self.rounds = rounds if rounds is not None else get_bcrypt_rounds()

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Not a bcrypt hash
            return False
