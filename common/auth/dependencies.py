"""
FastAPI authentication dependencies.

Example:
    from common.auth import JWTVerifier, create_auth_dependency

    verifier = JWTVerifier(secret="your-secret")
    get_current_user_id = create_auth_dependency(lambda: verifier)

    @app.get("/checkin/streak")
    async def get_streak(user_id: str = Depends(get_current_user_id)):
        ...
"""

from typing import Callable, Optional
from fastapi import Header

from common.auth.jwt_auth import JWTVerifier
from common.utils.exceptions import UnauthorizedException


def create_auth_dependency(
    get_verifier: Callable[[], JWTVerifier],
    header_name: str = "Authorization",
    scheme: str = "Bearer",
):
    """
    Factory to create a FastAPI dependency returning the caller's user ID.

    Args:
        get_verifier: Callable that returns the JWTVerifier instance
        header_name: Header to extract token from (default: Authorization)
        scheme: Auth scheme prefix (default: Bearer)
    """

    async def get_current_user_id(
        authorization: Optional[str] = Header(None, alias=header_name),
    ) -> str:
        """
        Extract and verify user ID from the authorization header.

        Raises:
            UnauthorizedException: If token is missing, invalid, or expired
        """
        if not authorization:
            raise UnauthorizedException("Missing authorization header")

        prefix = f"{scheme} "
        if not authorization.startswith(prefix):
            raise UnauthorizedException(
                f"Invalid authorization scheme. Expected: {scheme}",
                code="INVALID_AUTH_SCHEME",
            )

        token = authorization[len(prefix):]
        if not token:
            raise UnauthorizedException("Token is empty", code="EMPTY_TOKEN")

        try:
            payload = await get_verifier().verify_token(token)
        except ValueError as e:
            raise UnauthorizedException(str(e), code="INVALID_TOKEN")

        user_id = payload.get("sub")
        if not user_id:
            raise UnauthorizedException("Token missing user ID", code="INVALID_TOKEN")

        return user_id

    return get_current_user_id
