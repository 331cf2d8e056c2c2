import logging
from datetime import datetime, timezone

from bson.objectid import ObjectId
from fastapi import Depends, Request
from fastapi.security import APIKeyHeader
from passlib.context import CryptContext
from jose import jwt, JWTError
from pydantic import BaseModel, ConfigDict

from todo_app.models.user import User
from todo_app.utils.base import TokenScope
from todo_app.utils.config import Settings
from todo_app.utils.errors import Unauthorized


logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)
auth_header_scheme = APIKeyHeader(name="x-auth", auto_error=False)


class TokenClaims(BaseModel):
    """Identity and scope carried by a verified token."""
    user_id: str
    scope: str


class AuthContext(BaseModel):
    """Authenticated identity attached to a request."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    user: User
    token: str


def verify_password(plain: str, hashed: str) -> bool:
    """Verify plaintext password against a bcrypt hash."""
    return pwd_context.verify(plain, hashed)


def hash_password(plain: str) -> str:
    """Hash a plaintext password using bcrypt with a fresh salt."""
    return pwd_context.hash(plain)


class TokenService:
    """Issues and verifies signed bearer tokens.

    Tokens carry no expiry. Revocation is enforced by the auth gate, which
    also requires the token to be present in the owner's token list.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256") -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(secret_key=settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    def issue(self, user_id: str, scope: str = TokenScope.AUTH.value) -> str:
        payload = {
            "_id": user_id,
            "access": scope,
            "iat": int(datetime.now(timezone.utc).timestamp()),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError:
            raise Unauthorized()
        user_id = payload.get("_id")
        scope = payload.get("access")
        if not isinstance(user_id, str) or not isinstance(scope, str):
            raise Unauthorized()
        return TokenClaims(user_id=user_id, scope=scope)


def authenticate(token: str | None, token_service: TokenService) -> AuthContext:
    """Resolve a presented token to its user or raise Unauthorized.

    The token must verify AND still be listed on the user with the same scope,
    so a token removed at logout is rejected even though its signature holds.
    """
    if not token:
        logger.info("Rejected request without a token")
        raise Unauthorized()
    try:
        claims = token_service.verify(token)
    except Unauthorized:
        logger.info("Rejected token that failed verification")
        raise
    if not ObjectId.is_valid(claims.user_id):
        logger.info("Rejected token with malformed user id")
        raise Unauthorized()

    user: User | None = User.objects(id=claims.user_id).first()
    if not user or not user.has_token(token, claims.scope):
        logger.info("Rejected token for user %s", claims.user_id)
        raise Unauthorized()
    return AuthContext(user=user, token=token)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_auth_context(
    token: str | None = Depends(auth_header_scheme),
    token_service: TokenService = Depends(get_token_service),
) -> AuthContext:
    """Auth dependency: runs the gate once before the handler body."""
    return authenticate(token, token_service)


def get_current_user(auth: AuthContext = Depends(get_auth_context)) -> User:
    return auth.user
