from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from todo_app.models.user import User
from todo_app.services.auth import get_current_user
from todo_app.services.todos import create_todo, delete_todo, get_todo, list_todos, update_todo
from todo_app.utils.errors import PersistenceError, ValidationError


router = APIRouter()


class CreateTodoBody(BaseModel):
    text: Any = None


class PatchTodoBody(BaseModel):
    text: Any = None
    # Anything other than a literal true counts as not completed
    completed: Any = None


@router.post("")
def create(body: CreateTodoBody, current_user: User = Depends(get_current_user)) -> dict:
    """PROTECTED: Create a todo owned by the caller."""
    try:
        todo = create_todo(current_user, body.text)
    except PyMongoError:
        raise ValidationError("Unable to save Todo")
    return todo.to_output()


@router.get("")
def list_all(current_user: User = Depends(get_current_user)) -> dict:
    """PROTECTED: List the caller's todos."""
    try:
        todos = list_todos(current_user)
    except PyMongoError:
        raise ValidationError("Unable to list Todos")
    return {"todos": [t.to_output() for t in todos]}


@router.get("/{todo_id}")
def get_one(todo_id: str, current_user: User = Depends(get_current_user)) -> dict:
    """PROTECTED: Fetch one of the caller's todos."""
    try:
        todo = get_todo(current_user, todo_id)
    except PyMongoError:
        raise PersistenceError("Internal Error")
    return {"todo": todo.to_output()}


@router.patch("/{todo_id}")
def patch(todo_id: str, body: PatchTodoBody, current_user: User = Depends(get_current_user)) -> dict:
    """PROTECTED: Update text and/or completion of one of the caller's todos."""
    try:
        todo = update_todo(current_user, todo_id, body.model_dump(exclude_unset=True))
    except PyMongoError:
        raise PersistenceError("An error occurred while trying to update a Todo")
    return {"todo": todo.to_output()}


@router.delete("/{todo_id}")
def delete(todo_id: str, current_user: User = Depends(get_current_user)) -> dict:
    """PROTECTED: Delete one of the caller's todos and return it."""
    try:
        todo = delete_todo(current_user, todo_id)
    except PyMongoError:
        raise PersistenceError("An error occurred while trying to delete a Todo")
    return {"todo": todo.to_output()}
