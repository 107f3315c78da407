"""
Token authentication and role gating for API endpoints.

Tokens are issued elsewhere; this module only verifies a bearer JWT and
turns its claims into a ``User``. Routes declare what they need with
``Depends(get_current_user)`` or ``Depends(require_roles([...]))``.
"""

from datetime import datetime, timedelta
from typing import List, Optional
import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError

from .config import settings

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
AGENT_ROLE = "agent"

security = HTTPBearer(auto_error=False)


class User(BaseModel):
    """Authenticated caller, built from token claims"""

    id: int
    username: str
    role: str = AGENT_ROLE
    full_name: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Mint a signed token carrying the user's identity and role."""
    expire = datetime.utcnow() + (
        expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes)
    )
    claims = {
        "sub": str(user.id),
        "username": user.username,
        "role": user.role,
        "full_name": user.full_name,
        "exp": expire,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> User:
    try:
        payload = jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
        return User(
            id=int(payload["sub"]),
            username=payload["username"],
            role=payload.get("role", AGENT_ROLE),
            full_name=payload.get("full_name"),
        )
    except (JWTError, KeyError, ValueError, ValidationError) as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise _credentials_exception()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> User:
    if credentials is None:
        raise _credentials_exception()
    return verify_token(credentials.credentials)


def require_roles(required_roles: List[str]):
    """Dependency factory rejecting callers whose role is not listed"""

    async def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in required_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"{', '.join(required_roles)} only",
            )
        return current_user

    return role_checker


require_admin = require_roles([ADMIN_ROLE])
