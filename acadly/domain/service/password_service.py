"""Password hashing domain service."""

from passlib.context import CryptContext

from .base import Service


class PasswordService(Service):
    """Hashes and verifies profile passwords."""

    def __init__(self) -> None:
        self.context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plain password against a stored hash.

        Malformed hashes count as a mismatch.
        """
        try:
            return self.context.verify(password, password_hash)
        except ValueError:
            return False
