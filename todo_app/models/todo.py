from mongoengine import BooleanField, LongField, ReferenceField, StringField

from todo_app.models.base import BaseDocument
from todo_app.models.user import User


class Todo(BaseDocument):
    """To-do record owned by the user who created it.

    Fields:
    - text (str): Free-form description, trimmed, non-empty
    - completed (bool)
    - completed_at (int|None): Epoch milliseconds, only set while completed
    - creator (Ref[User]): Owner, fixed at creation
    """
    text = StringField(required=True, null=False, min_length=1)
    completed = BooleanField(required=True, null=False, default=False)
    completed_at = LongField(db_field="completedAt", required=False, null=True, default=None)
    creator = ReferenceField(document_type=User, db_field="_creator", required=True, null=False)

    meta = {
        "collection": "todos",
        "indexes": [
            {"fields": ["creator"]},
        ],
    }

    def to_output(self, fields=None, exclude=None):
        data = super().to_output(fields=fields, exclude=exclude)
        if data.get("completedAt") is None:
            data.pop("completedAt", None)
        return data
