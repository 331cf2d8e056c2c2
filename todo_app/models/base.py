from datetime import datetime, timezone
from typing import Any
from bson.objectid import ObjectId
from mongoengine import Document, DateTimeField, EmbeddedDocument


class BaseDocumentMixin:
    """Serialize a document to a JSON-ready dict keyed by stored field names."""

    def _sanitize_value(self, value: Any) -> Any:
        if isinstance(value, Document):
            # References are rendered as the referenced id, never inlined
            return str(value.pk)
        elif isinstance(value, EmbeddedDocument):
            value = {value._fields[k].db_field: self._sanitize_value(getattr(value, k)) for k in value._fields}
        if isinstance(value, list):
            return [self._sanitize_value(v) for v in value]
        if isinstance(value, dict):
            return {k: self._sanitize_value(v) for k, v in value.items()}
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, ObjectId):
            return str(value)
        return value

    def to_output(self, fields=None, exclude=None):
        data: dict[str, Any] = {}
        exclude = exclude or []
        fields = fields or self._fields.keys()

        for field in fields:
            if field in exclude or field == "id":
                continue
            value = getattr(self, field)
            data[self._fields[field].db_field] = self._sanitize_value(value)

        if getattr(self, "pk", None) is not None:
            data["_id"] = str(self.pk)
        return data


class BaseEmbeddedDocument(EmbeddedDocument, BaseDocumentMixin):
    meta = {
        "abstract": True,
    }


class BaseDocument(Document, BaseDocumentMixin):
    created_at = DateTimeField(db_field="createdAt", default=lambda: datetime.now(timezone.utc), null=False)
    updated_at = DateTimeField(db_field="updatedAt", default=lambda: datetime.now(timezone.utc), null=False)

    meta = {
        "abstract": True,
    }

    def save(self, *args, **kwargs):
        self.updated_at = datetime.now(timezone.utc)
        return super().save(*args, **kwargs)
