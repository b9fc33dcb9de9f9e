"""Composite-key record store over a SQLAlchemy session.

Gives each ledger table explicit existence semantics:

- insert: fails with AlreadyExistsError when the key is present
- update: fails with NotFoundError when the key is absent
- upsert: insert-or-replace, never fails
"""

from typing import Any, Generic, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy.orm import Session

from src.services.errors import AlreadyExistsError, NotFoundError

M = TypeVar("M")


class KeyedStore(Generic[M]):
    """Key-value view of one ORM model keyed by its primary key columns."""

    def __init__(self, db: Session, model: Type[M], key_fields: Sequence[str]):
        """Initialize store.

        Args:
            db: SQLAlchemy database session
            model: ORM model class
            key_fields: Primary key attribute names, in primary key order
        """
        self.db = db
        self.model = model
        self.key_fields = tuple(key_fields)

    def _key(self, key: Any) -> Tuple[Any, ...]:
        if not isinstance(key, tuple):
            key = (key,)
        if len(key) != len(self.key_fields):
            raise ValueError(
                f"{self.model.__name__} key must have {len(self.key_fields)} parts, got {key!r}"
            )
        return key

    def describe(self, key: Any) -> str:
        """Render a key as text, e.g. "1:7:alice"."""
        return ":".join(str(part) for part in self._key(key))

    def get(self, key: Any) -> Optional[M]:
        key = self._key(key)
        return self.db.get(self.model, key if len(key) > 1 else key[0])

    def exists(self, key: Any) -> bool:
        return self.get(key) is not None

    def insert(self, key: Any, **fields: Any) -> M:
        key = self._key(key)
        if self.exists(key):
            raise AlreadyExistsError(f"{self.model.__name__} {self.describe(key)} already exists")

        record = self.model(**dict(zip(self.key_fields, key)), **fields)
        self.db.add(record)
        self.db.flush()
        return record

    def update(self, key: Any, **fields: Any) -> M:
        record = self.get(key)
        if record is None:
            raise NotFoundError(f"{self.model.__name__} {self.describe(key)} not found")

        for name, value in fields.items():
            setattr(record, name, value)
        self.db.flush()
        return record

    def upsert(self, key: Any, **fields: Any) -> M:
        if self.exists(key):
            return self.update(key, **fields)
        return self.insert(key, **fields)


__all__ = ["KeyedStore"]
