"""
Identity Service - Bearer token verification

The identity provider issues signed JWTs whose subject is the external
user id. Only the claims the backend needs are extracted:
uid (sub), email, name and picture.
"""
import logging
from typing import Optional

from jose import jwt, JWTError

from gotogether.config.settings import settings
from gotogether.services.exceptions import IdentityError
from gotogether.services.protocols import IdentityClaims

logger = logging.getLogger(__name__)


class JWTIdentityProvider:
    """Verifies identity tokens signed with a shared secret or public key."""

    def __init__(
        self,
        key: str,
        algorithm: str = "HS256",
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
    ):
        self.key = key
        self.algorithm = algorithm
        self.audience = audience
        self.issuer = issuer

    async def verify_token(self, token: str) -> IdentityClaims:
        try:
            payload = jwt.decode(
                token,
                self.key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
                options={"verify_aud": self.audience is not None},
            )
        except JWTError as e:
            logger.warning(f"Identity token rejected: {e}")
            raise IdentityError("Invalid token") from e

        uid = payload.get("user_id") or payload.get("sub")
        if not uid:
            raise IdentityError("Invalid token payload")

        return IdentityClaims(
            uid=uid,
            email=payload.get("email"),
            name=payload.get("name"),
            picture=payload.get("picture"),
            provider_id=(payload.get("firebase") or {}).get("sign_in_provider"),
        )


def create_identity_token(uid: str, **claims) -> str:
    """Issue a token the default provider accepts (local tooling and tests)."""
    to_encode = {"sub": uid, **claims}
    if settings.IDENTITY_JWT_AUDIENCE:
        to_encode.setdefault("aud", settings.IDENTITY_JWT_AUDIENCE)
    if settings.IDENTITY_JWT_ISSUER:
        to_encode.setdefault("iss", settings.IDENTITY_JWT_ISSUER)
    return jwt.encode(to_encode, settings.IDENTITY_JWT_SECRET, algorithm=settings.IDENTITY_JWT_ALGORITHM)


identity_provider = JWTIdentityProvider(
    key=settings.IDENTITY_JWT_SECRET,
    algorithm=settings.IDENTITY_JWT_ALGORITHM,
    audience=settings.IDENTITY_JWT_AUDIENCE,
    issuer=settings.IDENTITY_JWT_ISSUER,
)
