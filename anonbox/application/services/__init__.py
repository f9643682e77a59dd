from .password_hashing import WerkzeugPasswordHasher
from .session_tokens import JwtSessionTokenService

__all__ = ["JwtSessionTokenService", "WerkzeugPasswordHasher"]
