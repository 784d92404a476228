"""
JWT access token verification.

Tokens are issued by the identity service; this side only verifies the
signature and expiry and reads the subject.

Example:
    verifier = JWTVerifier(secret="your-secret-key")
    claims = await verifier.verify_token(token)
    print(claims["sub"])  # user_id
"""

from typing import Dict, Any

from jose import jwt, JWTError


class JWTVerifier:
    """Verifies HS256 (or configured algorithm) bearer tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256"):
        """
        Initialize the verifier.

        Args:
            secret: Secret key used to sign tokens (keep this secure!)
            algorithm: JWT algorithm (default: HS256)
        """
        self.secret = secret
        self.algorithm = algorithm

    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Raises:
            ValueError: If the token is invalid or expired
        """
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise ValueError(f"Invalid token: {e}")
