"""Session cookie and caller identity helpers shared by routes."""

from fastapi import HTTPException, Request, Response, status

from newsdesk.config import Settings
from newsdesk.domain.service import JWTService

AUTH_COOKIE = "auth_token"


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """User ID from the session cookie.

    Raises:
        HTTPException: 401 when the cookie is missing, expired or invalid
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user_id


def client_ip(request: Request) -> str | None:
    """Caller IP, preferring the first X-Forwarded-For hop."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


def set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session cookie.

    Production serves the front end from another origin, so the cookie is
    cross-site there (secure, samesite=none) and same-site elsewhere.
    """
    is_production = settings.environment == "production"
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(key=AUTH_COOKIE, path="/")
