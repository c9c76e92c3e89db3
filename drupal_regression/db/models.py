from __future__ import annotations
from datetime import datetime
from typing import Any
from sqlalchemy import Boolean, DateTime, Integer, JSON, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from drupal_regression.db.session import Base

class ContentEntity(Base):
    __tablename__ = "content_entities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    entity_type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    bundle: Mapped[str] = mapped_column(String(64), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    path_alias: Mapped[str | None] = mapped_column(Text, nullable=True)

    field_values: Mapped[dict] = mapped_column(JSON, default=dict, nullable=False)

    def get(self, field_name: str, default: Any = None) -> Any:
        return (self.field_values or {}).get(field_name, default)

    def __repr__(self) -> str:
        return f"<ContentEntity {self.entity_type}:{self.bundle} id={self.id}>"


class KeyValue(Base):
    __tablename__ = "key_value"
    __table_args__ = (UniqueConstraint("collection", "name", name="uq_key_value_collection_name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    collection: Mapped[str] = mapped_column(String(128), nullable=False, default="state")
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
