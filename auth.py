import hmac
import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError

from config import Settings, get_settings
from errors import AuthError


# ===============================
# JWT CONFIG
# ===============================
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 120
ADMIN_ROLE = "admin"

INVALID_CREDENTIALS = "Invalid admin credentials"
INVALID_TOKEN = "Invalid or expired token"
MISSING_TOKEN = "Missing admin token"

# auto_error=False so a missing header gets our own 401 body instead of a 403
security = HTTPBearer(auto_error=False)

logger = logging.getLogger(__name__)


def create_access_token(data: dict, settings: Settings):
    to_encode = data.copy()
    expire = datetime.utcnow() + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=ALGORITHM)


def _matches(given: Optional[str], expected: str) -> bool:
    if not isinstance(given, str):
        return False
    return hmac.compare_digest(given.encode(), expected.encode())


def authenticate_admin(username: Optional[str], password: Optional[str], settings: Settings) -> str:
    # evaluate both so neither field short-circuits the other
    username_ok = _matches(username, settings.admin_username)
    password_ok = _matches(password, settings.admin_password)

    if not (username_ok and password_ok):
        logger.warning("Rejected admin login attempt")
        raise AuthError(INVALID_CREDENTIALS)

    logger.info("Admin %s logged in", settings.admin_username)
    return create_access_token(
        {"role": ADMIN_ROLE, "username": settings.admin_username},
        settings,
    )


def decode_admin_token(token: str, settings: Settings) -> dict:
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[ALGORITHM],
            options={"require_exp": True},
        )
    except JWTError:
        raise AuthError(INVALID_TOKEN)

    if payload.get("role") != ADMIN_ROLE:
        raise AuthError(INVALID_TOKEN)

    return payload


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    settings: Settings = Depends(get_settings),
):
    if credentials is None or not credentials.credentials:
        raise AuthError(MISSING_TOKEN)

    return decode_admin_token(credentials.credentials, settings)
