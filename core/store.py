"""
Entity store for the content core.

ContentStore is the single storage abstraction the slug resolver, the
relational synchronizer and the content services talk to. It is implemented
over a SQLAlchemy session and exposes only the operations those callers need:

- find_one: find a record by field value, optionally excluding one id
- get: fetch a record by primary key
- create / create_many: insert one or many records
- update: assign fields on a record by id
- delete / delete_many: remove a record by id, or all records matching a
  parent reference
- transaction: group writes into one all-or-nothing unit

Writes are flushed, never committed, outside transaction(); the outermost
transaction() block owns the commit.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.errors import ContentConflictError, ContentNotFoundError, StoreError

logger = logging.getLogger(__name__)

T_Model = TypeVar('T_Model')

# Key in Session.info tracking nested transaction() blocks
_DEPTH_KEY = 'content_store_depth'


class ContentStore:
    """
    SQLAlchemy-backed implementation of the entity store.

    Args:
        session: A SQLAlchemy Session or scoped_session. With a scoped session
            one store instance can be shared by every request.
    """

    def __init__(self, session):
        self.session = session

    # Queries

    def find_one(self, model: Type[T_Model], field: str, value: Any,
                 exclude_id: Optional[Any] = None) -> Optional[T_Model]:
        """
        Find the first record whose field equals value.

        Args:
            model: Model class to query
            field: Column attribute name
            value: Value to match
            exclude_id: When given, records with this id are ignored

        Returns:
            The matching record or None
        """
        column = getattr(model, field)
        stmt = select(model).where(column == value)
        if exclude_id is not None:
            stmt = stmt.where(model.id != exclude_id)
        return self._run(lambda: self.session.execute(stmt.limit(1)).scalars().first())

    def get(self, model: Type[T_Model], entity_id: Any) -> Optional[T_Model]:
        """Fetch a record by primary key, None if missing."""
        return self._run(lambda: self.session.get(model, entity_id))

    def get_or_raise(self, model: Type[T_Model], entity_id: Any,
                     resource_type: Optional[str] = None) -> T_Model:
        """Fetch a record by primary key or raise ContentNotFoundError."""
        instance = self.get(model, entity_id)
        if instance is None:
            raise ContentNotFoundError(resource_type or model.__name__, entity_id)
        return instance

    def get_many(self, model: Type[T_Model], ids: Iterable[Any]) -> List[T_Model]:
        """Fetch all records whose id is in ids, in no particular order."""
        ids = list(ids)
        if not ids:
            return []
        stmt = select(model).where(model.id.in_(ids))
        return self._run(lambda: list(self.session.execute(stmt).scalars()))

    def list(self, model: Type[T_Model], *order_by) -> List[T_Model]:
        """Return all records of a model in the given order."""
        stmt = select(model)
        if order_by:
            stmt = stmt.order_by(*order_by)
        return self._run(lambda: list(self.session.execute(stmt).scalars()))

    def scalars(self, stmt) -> List[Any]:
        """Execute a prepared select and return its scalar rows."""
        return self._run(lambda: list(self.session.execute(stmt).scalars()))

    def count(self, stmt) -> int:
        """Count the rows a prepared select would return."""
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        return self._run(lambda: self.session.execute(count_stmt).scalar_one())

    # Writes

    def create(self, model: Type[T_Model], **values) -> T_Model:
        """Insert a new record and flush it so its id is assigned."""
        instance = model(**values)
        self.session.add(instance)
        self._flush()
        return instance

    def create_many(self, model: Type[T_Model], rows: Iterable[Dict[str, Any]]) -> List[T_Model]:
        """Insert many records, preserving the order of rows."""
        instances = [model(**row) for row in rows]
        if instances:
            self.session.add_all(instances)
            self._flush()
        return instances

    def update(self, model: Type[T_Model], entity_id: Any, **values) -> T_Model:
        """
        Assign values to the record with the given id.

        Raises:
            ContentNotFoundError: If no such record exists
        """
        instance = self.get_or_raise(model, entity_id)
        for key, value in values.items():
            if not hasattr(instance, key):
                logger.warning("Attempted to update non-existent attribute %s on %s",
                               key, model.__name__)
                continue
            setattr(instance, key, value)
        self._flush()
        return instance

    def delete(self, model: Type[T_Model], entity_id: Any) -> T_Model:
        """
        Delete the record with the given id.

        Raises:
            ContentNotFoundError: If no such record exists
        """
        instance = self.get_or_raise(model, entity_id)
        self.session.delete(instance)
        self._flush()
        return instance

    def delete_many(self, model: Type[T_Model], field: str, value: Any) -> int:
        """
        Delete every record whose field equals value.

        Returns:
            Number of deleted records
        """
        stmt = delete(model).where(getattr(model, field) == value)
        result = self._run(lambda: self.session.execute(stmt, execution_options={
            'synchronize_session': 'fetch'
        }))
        return result.rowcount or 0

    def expire(self, instance: Any, *attributes: str) -> None:
        """Mark loaded attributes stale so the next access reloads them."""
        self.session.expire(instance, list(attributes) or None)

    # Transactions

    @contextmanager
    def transaction(self) -> Iterator['ContentStore']:
        """
        Run a block of writes as one all-or-nothing unit.

        Nested blocks join the outermost one; only the outermost block commits
        or rolls back.

        Raises:
            ContentConflictError: If a unique constraint is violated
            StoreError: If any other database error occurs
        """
        info = self.session.info
        depth = info.get(_DEPTH_KEY, 0)
        info[_DEPTH_KEY] = depth + 1
        try:
            yield self
            if depth == 0:
                self.session.commit()
        except IntegrityError as e:
            if depth == 0:
                self.session.rollback()
            logger.warning("Integrity error in content store: %s", e.orig)
            raise ContentConflictError(details={"reason": str(e.orig)}) from e
        except SQLAlchemyError as e:
            if depth == 0:
                self.session.rollback()
            logger.error("Content store transaction failed: %s", e)
            raise StoreError() from e
        except Exception:
            if depth == 0:
                self.session.rollback()
            raise
        finally:
            info[_DEPTH_KEY] = depth

    def rollback(self) -> None:
        """Discard any uncommitted work on the current session."""
        self.session.rollback()
        self.session.info[_DEPTH_KEY] = 0

    def close(self) -> None:
        """Release the current session; the next use starts a fresh one."""
        remove = getattr(self.session, 'remove', None)
        if callable(remove):
            remove()
        else:
            self.session.close()

    # Internal helpers

    def _flush(self) -> None:
        try:
            self.session.flush()
        except IntegrityError as e:
            logger.warning("Integrity error in content store: %s", e.orig)
            raise ContentConflictError(details={"reason": str(e.orig)}) from e
        except SQLAlchemyError as e:
            logger.error("Content store flush failed: %s", e)
            raise StoreError() from e

    def _run(self, operation):
        try:
            return operation()
        except IntegrityError as e:
            raise ContentConflictError(details={"reason": str(e.orig)}) from e
        except SQLAlchemyError as e:
            logger.error("Content store query failed: %s", e)
            raise StoreError() from e
