from fastapi import Header, HTTPException, status

from core.settings import get_settings


def require_auth(authorization: str | None = Header(default=None)):
    settings = get_settings()
    if not settings.auth_enabled:
        return

    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    token = authorization.removeprefix("Bearer ").strip()
    expected = settings.auth_token

    if not expected or token != expected:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
