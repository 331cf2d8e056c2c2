"""Shared fixtures: an in-memory MongoDB (mongomock) and a test client.

The client is not used as a context manager, so the app lifespan (which
would connect to a real server) never runs.
"""
from __future__ import annotations

from typing import Callable, Iterator

import mongomock
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from main import create_app
from todo_app.connections import close_mongo, init_mongo
from todo_app.models import Todo, User
from todo_app.services.auth import TokenService
from todo_app.services.credentials import create_user, generate_auth_token
from todo_app.utils.config import Settings


@pytest.fixture(scope="session")
def settings() -> Settings:
    return Settings(
        environment="test",
        debug=False,
        mongo_db="TodoAppTest",
        jwt_secret_key="test_secret",
    )


@pytest.fixture(scope="session", autouse=True)
def mongo(settings: Settings) -> Iterator[None]:
    init_mongo(settings, mongo_client_class=mongomock.MongoClient)
    yield
    close_mongo()


@pytest.fixture(autouse=True)
def _clean_collections() -> Iterator[None]:
    yield
    Todo.drop_collection()
    User.drop_collection()


@pytest.fixture
def token_service(settings: Settings) -> TokenService:
    return TokenService.from_settings(settings)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_user(token_service: TokenService) -> Callable[..., tuple[User, str]]:
    """Create a user directly through the credential store and log it in."""

    def _make(email: str = "a@x.com", password: str = "secret1") -> tuple[User, str]:
        user = create_user(email, password)
        token = generate_auth_token(user, token_service)
        return user, token

    return _make
