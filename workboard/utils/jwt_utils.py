from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings

from workboard.constants.messages import AuthErrorMessages
from workboard.exceptions.auth_exceptions import (
    RefreshTokenExpiredError,
    TokenExpiredError,
    TokenInvalidError,
)
from workboard.utils.session import generate_session_id

TOKEN_ISSUER = "workboard-auth"


def _generate_token(user_id: str, token_type: str, lifetime_seconds: int, session_id: str) -> str:
    now = datetime.now(timezone.utc)
    expiry = now + timedelta(seconds=lifetime_seconds)

    payload = {
        "iss": TOKEN_ISSUER,
        "exp": int(expiry.timestamp()),
        "iat": int(now.timestamp()),
        "sub": user_id,
        "sid": session_id,
        "token_type": token_type,
    }

    try:
        return jwt.encode(
            payload=payload,
            key=settings.JWT_CONFIG.get("PRIVATE_KEY"),
            algorithm=settings.JWT_CONFIG.get("ALGORITHM"),
        )
    except Exception as e:
        raise TokenInvalidError(f"Token generation failed: {str(e)}")


def generate_access_token(user_id: str, session_id: str) -> str:
    return _generate_token(user_id, "access", settings.JWT_CONFIG.get("ACCESS_TOKEN_LIFETIME"), session_id)


def generate_refresh_token(user_id: str, session_id: str) -> str:
    return _generate_token(user_id, "refresh", settings.JWT_CONFIG.get("REFRESH_TOKEN_LIFETIME"), session_id)


def _decode(token: str) -> dict:
    return jwt.decode(
        jwt=token,
        key=settings.JWT_CONFIG.get("PUBLIC_KEY"),
        algorithms=[settings.JWT_CONFIG.get("ALGORITHM")],
    )


def validate_access_token(token: str) -> dict:
    try:
        payload = _decode(token)
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except jwt.InvalidTokenError as e:
        raise TokenInvalidError(f"Invalid token: {str(e)}")

    if payload.get("token_type") != "access" or not payload.get("sub"):
        raise TokenInvalidError(AuthErrorMessages.TOKEN_INVALID)
    return payload


def validate_refresh_token(token: str) -> dict:
    try:
        payload = _decode(token)
    except jwt.ExpiredSignatureError:
        raise RefreshTokenExpiredError()
    except jwt.InvalidTokenError as e:
        raise TokenInvalidError(f"Invalid refresh token: {str(e)}")

    if payload.get("token_type") != "refresh" or not payload.get("sub"):
        raise TokenInvalidError(AuthErrorMessages.TOKEN_INVALID)
    return payload


def generate_token_pair(user_id: str, session_id: str | None = None) -> dict:
    session_id = session_id or generate_session_id()
    return {
        "access_token": generate_access_token(user_id, session_id),
        "refresh_token": generate_refresh_token(user_id, session_id),
        "session_id": session_id,
        "expires_in": settings.JWT_CONFIG.get("ACCESS_TOKEN_LIFETIME"),
    }
