# ============================================
# accounts/tokens.py
# ============================================
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from django.conf import settings


def _secret() -> str:
    return getattr(settings, 'JWT_SECRET', None) or settings.SECRET_KEY


def _algorithm() -> str:
    return getattr(settings, 'JWT_ALGORITHM', 'HS256')


def sign_token(user) -> str:
    """Issue a bearer token for the user (sub = user id)."""
    minutes = int(getattr(settings, 'JWT_EXPIRATION_MINUTES', 120))
    now = datetime.now(timezone.utc)
    payload = {
        'sub': str(user.id),
        'email': user.email,
        'iat': now,
        'exp': now + timedelta(minutes=minutes),
    }
    return jwt.encode(payload, _secret(), algorithm=_algorithm())


def decode_token(token: str) -> Optional[dict]:
    """Return the token payload, or None when it is malformed or expired."""
    try:
        return jwt.decode(token, _secret(), algorithms=[_algorithm()])
    except jwt.InvalidTokenError:
        return None
