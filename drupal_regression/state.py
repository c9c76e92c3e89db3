"""Process-wide key/value state shared between requests.

The manifest of generated entities is kept here between the request that
generates content and the requests that fetch it. Writes are last-write-wins
and never expire.
"""
from __future__ import annotations
import copy
from datetime import datetime
from typing import Any, Dict
from sqlalchemy import select
from sqlalchemy.orm import Session
from drupal_regression.db.models import KeyValue

ENDPOINTS_STATE_KEY = "drupal_regression.endpoints"


class StateStore:
    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError


class MemoryStateStore(StateStore):
    def __init__(self):
        self._values: Dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._values:
            return default
        return copy.deepcopy(self._values[key])

    def set(self, key: str, value: Any) -> None:
        self._values[key] = copy.deepcopy(value)


class KeyValueStateStore(StateStore):
    """State rows in the ``key_value`` table."""

    def __init__(self, db: Session, collection: str = "state"):
        self.db = db
        self.collection = collection

    def _row(self, key: str) -> KeyValue | None:
        stmt = select(KeyValue).where(KeyValue.collection == self.collection, KeyValue.name == key)
        return self.db.execute(stmt).scalar_one_or_none()

    def get(self, key: str, default: Any = None) -> Any:
        row = self._row(key)
        if row is None:
            return default
        return row.value

    def set(self, key: str, value: Any) -> None:
        row = self._row(key)
        if row is None:
            row = KeyValue(collection=self.collection, name=key)
            self.db.add(row)
        row.value = value
        row.updated_at = datetime.utcnow()
        self.db.commit()
