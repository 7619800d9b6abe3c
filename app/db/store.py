"""
Document-style access layer over the portal's tables.

Every table is addressed by a collection name and queried with plain
dictionaries, so models and services never build SQLAlchemy filters
themselves:

    store.find_one("otps", {"email": email, "expires_at": {"$gt": now}})

Plain values mean equality (``None`` means IS NULL). Nested dictionaries
apply the operators in ``OPERATORS``. Sorting takes ``(field, direction)``
pairs where a negative direction means descending.
"""
import logging
from contextlib import contextmanager
from typing import Iterable, Optional

from sqlalchemy import func, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.base import Base, User, OTP, College, NewsArticle, UserSession

logger = logging.getLogger(__name__)

COLLECTIONS = {
    "users": User,
    "otps": OTP,
    "colleges": College,
    "articles": NewsArticle,
    "sessions": UserSession,
}

OPERATORS = {
    "$gt": lambda column, value: column > value,
    "$gte": lambda column, value: column >= value,
    "$lt": lambda column, value: column < value,
    "$lte": lambda column, value: column <= value,
    "$ne": lambda column, value: column != value,
    "$in": lambda column, value: column.in_(list(value)),
    # Case-insensitive matching for name lookups
    "$ieq": lambda column, value: func.lower(column) == value.lower(),
    "$icontains": lambda column, value: column.icontains(value, autoescape=True),
}


class UnknownCollection(KeyError):
    pass


class DocumentStore:
    def __init__(self, db: Session):
        self.db = db

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def collection(self, name: str):
        try:
            return COLLECTIONS[name]
        except KeyError:
            raise UnknownCollection(name)

    def _conditions(self, model, query: Optional[dict]) -> list:
        conditions = []
        for field, value in (query or {}).items():
            column = getattr(model, field, None)
            if column is None:
                raise ValueError(f"Unknown field '{field}' for {model.__tablename__}")

            if isinstance(value, dict):
                for op, operand in value.items():
                    if op not in OPERATORS:
                        raise ValueError(f"Unsupported operator '{op}'")
                    conditions.append(OPERATORS[op](column, operand))
            elif value is None:
                conditions.append(column.is_(None))
            else:
                conditions.append(column == value)
        return conditions

    def _query(self, name: str, query: Optional[dict] = None, sort: Iterable = None):
        model = self.collection(name)
        q = self.db.query(model).filter(*self._conditions(model, query))
        for field, direction in sort or ():
            column = getattr(model, field)
            q = q.order_by(column.desc() if direction < 0 else column.asc())
        return q

    @contextmanager
    def _guard(self, action: str, name: str):
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Error {action} in {name}: {e}")
            self.db.rollback()
            raise

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def find_one(self, name: str, query: Optional[dict] = None, sort: Iterable = None):
        with self._guard("finding document", name):
            return self._query(name, query, sort).first()

    def find_many(
        self,
        name: str,
        query: Optional[dict] = None,
        sort: Iterable = None,
        limit: Optional[int] = None,
        skip: int = 0,
    ) -> list:
        with self._guard("finding documents", name):
            q = self._query(name, query, sort)
            if skip:
                q = q.offset(skip)
            if limit is not None:
                q = q.limit(limit)
            return q.all()

    def count(self, name: str, query: Optional[dict] = None) -> int:
        with self._guard("counting documents", name):
            return self._query(name, query).count()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def insert_one(self, name: str, document: dict):
        model = self.collection(name)
        with self._guard("inserting document", name):
            record = model(**document)
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
            return record

    def insert_many(self, name: str, documents: Iterable[dict]) -> list:
        model = self.collection(name)
        with self._guard("inserting documents", name):
            records = [model(**document) for document in documents]
            self.db.add_all(records)
            self.db.commit()
            for record in records:
                self.db.refresh(record)
            return records

    def update_one(self, name: str, query: dict, update: dict):
        """
        Applies `update` to the first record matching `query` and returns the
        updated record, or None when nothing matched.

        The UPDATE statement repeats the query conditions, so a record that
        stopped matching between the lookup and the write (e.g. an OTP used
        by a concurrent request) is left untouched and None is returned.
        """
        model = self.collection(name)
        with self._guard("updating document", name):
            target = self._query(name, query).first()
            if target is None:
                return None

            conditions = self._conditions(model, query)
            modified = (
                self.db.query(model)
                .filter(model.id == target.id, *conditions)
                .update(update, synchronize_session=False)
            )
            if not modified:
                self.db.rollback()
                return None

            self.db.commit()
            self.db.refresh(target)
            return target

    def update_many(self, name: str, query: dict, update: dict) -> int:
        with self._guard("updating documents", name):
            modified = self._query(name, query).update(update, synchronize_session=False)
            self.db.commit()
            return modified

    def delete_one(self, name: str, query: dict) -> int:
        with self._guard("deleting document", name):
            target = self._query(name, query).first()
            if target is None:
                return 0
            self.db.delete(target)
            self.db.commit()
            return 1

    def delete_many(self, name: str, query: Optional[dict] = None) -> int:
        with self._guard("deleting documents", name):
            deleted = self._query(name, query).delete(synchronize_session=False)
            self.db.commit()
            return deleted

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------
    def collection_exists(self, name: str) -> bool:
        model = self.collection(name)
        return inspect(self.db.get_bind()).has_table(model.__tablename__)

    def create_collections(self) -> list[str]:
        """Creates missing tables and returns the names of the new ones."""
        missing = [name for name in COLLECTIONS if not self.collection_exists(name)]
        Base.metadata.create_all(bind=self.db.get_bind())
        for name in COLLECTIONS:
            if name in missing:
                logger.info(f"Created collection: {name}")
            else:
                logger.info(f"Collection '{name}' already exists (skipping)")
        return missing

    def drop_collections(self) -> list[str]:
        """Drops every existing collection. Returns the names dropped."""
        existing = [name for name in COLLECTIONS if self.collection_exists(name)]
        self.db.close()
        Base.metadata.drop_all(bind=self.db.get_bind())
        for name in existing:
            logger.info(f"Dropped collection: {name}")
        return existing
