"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from anonbox.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted hashes via werkzeug; ``method`` carries the work factor.

    ``None`` keeps werkzeug's current default (scrypt). Something like
    ``"pbkdf2:sha256:600000"`` pins the algorithm and iteration count.
    """

    def __init__(self, method: str | None = None, salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        if self._method is None:
            return str(generate_password_hash(password, salt_length=self._salt_length))
        return str(
            generate_password_hash(
                password, method=self._method, salt_length=self._salt_length
            )
        )

    def verify(self, password: str, hashed: str) -> bool:
        return bool(check_password_hash(hashed, password))
