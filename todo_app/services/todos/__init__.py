"""Ownership-scoped access to to-do records.

Every query is filtered by the creator, so another user's record is
reported exactly like a missing one.
"""
from datetime import datetime, timezone
from typing import Any

from bson.objectid import ObjectId

from todo_app.models.todo import Todo
from todo_app.models.user import User
from todo_app.utils.errors import InvalidId, NotFound, ValidationError


PATCHABLE_FIELDS = ("text", "completed")


def _object_id(todo_id: str) -> ObjectId:
    if not ObjectId.is_valid(todo_id):
        raise InvalidId()
    return ObjectId(todo_id)


def _clean_text(text: Any) -> str:
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Todo text is required")
    return text.strip()


def _now_millis() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def create_todo(creator: User, text: Any) -> Todo:
    todo = Todo(text=_clean_text(text), creator=creator)
    todo.save()
    return todo


def list_todos(creator: User) -> list[Todo]:
    return list(Todo.objects(creator=creator))


def get_todo(creator: User, todo_id: str) -> Todo:
    todo: Todo | None = Todo.objects(id=_object_id(todo_id), creator=creator).first()
    if not todo:
        raise NotFound("Todo object not found")
    return todo


def update_todo(creator: User, todo_id: str, patch: dict[str, Any]) -> Todo:
    """Apply a text/completed patch.

    Only ``completed is True`` marks the record done and stamps the time;
    anything else clears both ``completed`` and ``completed_at``.
    """
    oid = _object_id(todo_id)
    body = {k: v for k, v in patch.items() if k in PATCHABLE_FIELDS}

    changes: dict[str, Any] = {}
    if "text" in body:
        changes["set__text"] = _clean_text(body["text"])
    if body.get("completed") is True:
        changes["set__completed"] = True
        changes["set__completed_at"] = _now_millis()
    else:
        changes["set__completed"] = False
        changes["set__completed_at"] = None
    changes["set__updated_at"] = datetime.now(timezone.utc)

    todo: Todo | None = Todo.objects(id=oid, creator=creator).modify(new=True, **changes)
    if not todo:
        raise NotFound("Todo Not Found")
    return todo


def delete_todo(creator: User, todo_id: str) -> Todo:
    oid = _object_id(todo_id)
    todo: Todo | None = Todo.objects(id=oid, creator=creator).first()
    if not todo:
        raise NotFound("Todo Not Found")
    todo.delete()
    return todo
