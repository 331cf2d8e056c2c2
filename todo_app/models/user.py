from mongoengine import EmailField, StringField, ListField, EmbeddedDocumentField

from todo_app.models.base import BaseDocument, BaseEmbeddedDocument
from todo_app.utils.base import TokenScope


class AuthToken(BaseEmbeddedDocument):
    """Embedded: one issued bearer token and the scope it was issued for."""
    access = StringField(required=True, null=False, choices=TokenScope.choices())
    token = StringField(required=True, null=False)


class User(BaseDocument):
    """User document.

    Fields:
    - email (str, unique): Login identifier, trimmed
    - password (str, hashed): Bcrypt hash, never the plaintext
    - tokens (list[AuthToken]): Currently valid tokens, in issue order.
      Removing an entry revokes the token.
    """
    email = EmailField(required=True, null=False, unique=True, min_length=1)
    password = StringField(required=True, null=False)
    tokens = ListField(EmbeddedDocumentField(AuthToken), required=False, default=list, null=False)

    meta = {
        "collection": "users",
        "indexes": [
            {"fields": ["email"], "unique": True},
        ],
    }

    def has_token(self, token: str, access: str) -> bool:
        return any(t.token == token and t.access == access for t in self.tokens)
