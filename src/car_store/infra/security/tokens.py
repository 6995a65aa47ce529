"""
Signed session tokens.

Tokens are HS256 JWTs carrying the user id (as `sub`), email, username and
role, with issued-at and expiry claims.
"""

from __future__ import annotations

from datetime import timedelta

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from car_store.domain.clock import Clock, utc_now
from car_store.domain.errors import UnauthorizedError
from car_store.domain.user import TokenClaims

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ("sub", "email", "username", "role", "exp")


class TokenService:
    def __init__(self, secret: str, ttl: timedelta, clock: Clock = utc_now) -> None:
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    def issue(self, claims: TokenClaims) -> str:
        now = self._clock()
        payload = {
            "sub": claims.user_id,
            "email": claims.email,
            "username": claims.username,
            "role": claims.role,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def validate(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the claims.

        Raises:
            UnauthorizedError: If the token is malformed, expired or forged
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": list(REQUIRED_CLAIMS), "verify_iat": False},
            )
        except ExpiredSignatureError:
            raise UnauthorizedError("Token has expired")
        except InvalidTokenError:
            raise UnauthorizedError("Invalid token")

        return TokenClaims(
            user_id=str(payload["sub"]),
            email=str(payload["email"]),
            username=str(payload["username"]),
            role=str(payload["role"]),
        )
