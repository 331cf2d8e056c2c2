from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, EmailStr, field_validator

from todo_app.services.auth import (
    AuthContext,
    TokenService,
    get_auth_context,
    get_token_service,
)
from todo_app.services.credentials import (
    create_user,
    find_by_credentials,
    generate_auth_token,
    remove_token,
    to_public_view,
)


router = APIRouter()


class RegisterBody(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def _strip_email(cls, value):
        return value.strip() if isinstance(value, str) else value


class LoginBody(BaseModel):
    # Format is not checked here; a malformed email is just an unknown one
    email: str = ""
    password: str = ""


@router.post("")
def register(
    body: RegisterBody,
    response: Response,
    token_service: TokenService = Depends(get_token_service),
) -> dict:
    """PUBLIC: Register a user; the new token comes back in the x-auth header."""
    user = create_user(body.email, body.password)
    response.headers["x-auth"] = generate_auth_token(user, token_service)
    return to_public_view(user)


@router.post("/login")
def login(
    body: LoginBody,
    response: Response,
    token_service: TokenService = Depends(get_token_service),
) -> dict:
    """PUBLIC: Exchange email and password for a new token."""
    _, token = find_by_credentials(body.email, body.password, token_service)
    response.headers["x-auth"] = token
    return {"token": token}


@router.get("/me")
def me(auth: AuthContext = Depends(get_auth_context)) -> dict:
    """PROTECTED: The authenticated user."""
    return to_public_view(auth.user)


@router.delete("/me/token")
def logout(auth: AuthContext = Depends(get_auth_context)) -> Response:
    """PROTECTED: Revoke the token used on this request."""
    remove_token(auth.user, auth.token)
    return Response(status_code=200)
