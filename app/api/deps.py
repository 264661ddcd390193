"""
API dependencies.

Verifies the Firebase ID token sent by the dashboard and exposes the
signed-in user to the health record and settings routes.
"""

from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from firebase_admin import auth
from pydantic import BaseModel

security = HTTPBearer(auto_error=True)


class AuthUser(BaseModel):
    """The verified token's owner; `uid` keys every stored analysis."""

    uid: str
    email: Optional[str] = None
    email_verified: bool = False

    @classmethod
    def from_token(cls, decoded: dict) -> "AuthUser":
        return cls(
            uid=decoded["uid"],
            email=decoded.get("email"),
            email_verified=bool(decoded.get("email_verified", False)),
        )


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AuthUser:
    """
    Expects:
        Authorization: Bearer <firebase id_token>
    """
    try:
        decoded = auth.verify_id_token(credentials.credentials)
        return AuthUser.from_token(decoded)
    except Exception as exc:
        raise HTTPException(
            status_code=401,
            detail="Invalid ID token",
        ) from exc
