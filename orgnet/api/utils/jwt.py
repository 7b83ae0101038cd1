from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode a bearer token issued by the identity provider

    Returns:
        Decoded payload dict (``sub``, ``email``) or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
