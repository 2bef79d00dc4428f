"""Whole-document JSON persistence.

Every collection (ingredient prices, the price lookup, recipes, sales,
orders) is kept as one JSON document per key and rewritten in full on each
change. Reads never fail: a missing, malformed or mis-shaped document is
treated as empty.
"""
import json
import logging
from typing import Any, Callable, TypeVar

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from bakery.models import Document

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DocumentStore:
    """Read and overwrite named JSON documents in the documents table."""

    def __init__(self, db: Session):
        self.db = db

    def read_raw(self, key: str) -> Any:
        """Return the decoded JSON for a key, or None if absent or malformed."""
        doc = self.db.get(Document, key)
        if doc is None:
            return None
        try:
            return json.loads(doc.body)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring malformed document '{key}': {e}")
            return None

    def write_raw(self, key: str, value: Any, commit: bool = True) -> None:
        """Replace the whole document stored under key."""
        body = json.dumps(value)
        doc = self.db.get(Document, key)
        if doc is None:
            self.db.add(Document(key=key, body=body))
        else:
            doc.body = body
        if commit:
            self.db.commit()
        else:
            self.db.flush()

    def load(self, key: str, type_: Any, default_factory: Callable[[], T]) -> T:
        """Load a document and validate it into type_.

        Falls back to default_factory() when the document is absent or does
        not match the expected shape.
        """
        raw = self.read_raw(key)
        if raw is None:
            return default_factory()
        try:
            return TypeAdapter(type_).validate_python(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring document '{key}' with unexpected shape: {e.error_count()} errors")
            return default_factory()

    def save(self, key: str, type_: Any, value: Any, commit: bool = True) -> None:
        """Serialize value as type_ and overwrite the document."""
        self.write_raw(key, TypeAdapter(type_).dump_python(value, mode="json"), commit=commit)
