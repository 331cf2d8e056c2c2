import logging
from typing import Any

from mongoengine.errors import NotUniqueError, ValidationError as DocumentValidationError

from todo_app.models.user import AuthToken, User
from todo_app.services.auth import TokenService, hash_password, verify_password
from todo_app.utils.base import TokenScope
from todo_app.utils.errors import DuplicateEmail, InvalidCredentials, ValidationError


logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def to_public_view(user: User) -> dict[str, Any]:
    """The only serialized form of a user: no password hash, no tokens."""
    return {"_id": str(user.id), "email": user.email}


def create_user(email: str, password: str) -> User:
    """Register a user with a bcrypt-hashed password."""
    email = (email or "").strip()
    if not email:
        raise ValidationError("Email is required")
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    # Reject duplicate email signups early; the unique index covers races
    if User.objects(email=email).first():
        raise DuplicateEmail()

    user = User(email=email, password=hash_password(password))
    try:
        user.save()
    except NotUniqueError:
        raise DuplicateEmail()
    except DocumentValidationError:
        raise ValidationError(f"{email} is not a valid email")
    logger.info("Registered user %s", user.id)
    return user


def set_password(user: User, password: str) -> None:
    """Replace the stored hash; a new salt is drawn on every change."""
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    user.password = hash_password(password)
    user.save()


def generate_auth_token(user: User, token_service: TokenService) -> str:
    """Issue an auth-scoped token and persist it on the user."""
    access = TokenScope.AUTH.value
    token = token_service.issue(str(user.id), access)
    user.tokens.append(AuthToken(access=access, token=token))
    user.save()
    return token


def find_by_credentials(email: str, password: str, token_service: TokenService) -> tuple[User, str]:
    """Log a user in and return it with a freshly issued token.

    Unknown email and wrong password raise the same error.
    """
    user: User | None = User.objects(email=(email or "").strip()).first()
    if not user or not password or not verify_password(password, user.password):
        raise InvalidCredentials()
    token = generate_auth_token(user, token_service)
    logger.info("User %s logged in", user.id)
    return user, token


def remove_token(user: User, token: str) -> None:
    """Revoke a token by dropping it from the user's list. Idempotent."""
    remaining = [t for t in user.tokens if t.token != token]
    if len(remaining) == len(user.tokens):
        return
    user.tokens = remaining
    user.save()
    logger.info("Revoked a token for user %s", user.id)
