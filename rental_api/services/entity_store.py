"""Document-style persistence over SQLAlchemy tables.

A ``Collection`` pairs a table with the pydantic schema holding its
required fields. Every write is validated against the schema before it
reaches the database, and every operation commits on its own: there are
no multi-document transactions.
"""
import logging
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rental_api.utils.exceptions import StoreFault

logger = logging.getLogger(__name__)


def _to_column_value(value: Any) -> Any:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="microseconds")
    return value


class Collection:
    def __init__(self, session: AsyncSession, model: type, schema: type[BaseModel]):
        self.session = session
        self.model = model
        self.schema = schema

    def _columns(self, doc: dict) -> dict:
        """Validate ``doc`` and return column values keyed by attribute name."""
        validated = self.schema.model_validate(doc)
        return {
            name: _to_column_value(getattr(validated, name))
            for name in self.schema.model_fields
        }

    def _as_document(self, row) -> dict:
        return {
            field.alias or name: getattr(row, name)
            for name, field in self.schema.model_fields.items()
        }

    def _by_alias(self, partial: dict) -> dict:
        """Rename attribute-name keys so they overwrite the stored alias keys."""
        aliases = {
            name: field.alias
            for name, field in self.schema.model_fields.items()
            if field.alias
        }
        return {aliases.get(key, key): value for key, value in partial.items()}

    async def insert(self, doc: dict):
        row = self.model(id=str(uuid.uuid4()), **self._columns(doc))
        self.session.add(row)
        await self.session.commit()
        await self.session.refresh(row)
        return row

    async def find_all(self, order_by=None) -> list:
        query = select(self.model)
        if order_by is not None:
            query = query.order_by(order_by)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_by_id(self, entity_id: str):
        return await self.session.get(self.model, entity_id)

    async def find_one(self, **criteria):
        result = await self.session.execute(
            select(self.model).filter_by(**criteria).limit(1)
        )
        return result.scalars().first()

    async def update_by_id(self, entity_id: str, partial: dict):
        row = await self.find_by_id(entity_id)
        if row is None:
            return None

        merged = {**self._as_document(row), **self._by_alias(partial)}
        for name, value in self._columns(merged).items():
            setattr(row, name, value)
        await self.session.commit()
        await self.session.refresh(row)
        return row

    async def delete_by_id(self, entity_id: str):
        row = await self.find_by_id(entity_id)
        if row is None:
            return None

        await self.session.delete(row)
        await self.session.commit()
        return row


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Report validation and database failures as a ``StoreFault``."""
    try:
        yield
    except (ValidationError, SQLAlchemyError) as exc:
        logger.exception(message)
        raise StoreFault(message, error=str(exc)) from exc
