"""Caller identification for API routes."""

BEARER_PREFIX = "bearer "


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the access token from the Authorization header or the auth cookie.

    The header wins when both are present.
    """
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return auth_token
