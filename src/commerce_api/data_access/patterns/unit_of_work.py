"""
Unit of Work Pattern Implementation

The persistence manager consumed by the domain services. A ``UnitOfWork`` wraps
one ``AsyncSession`` (one connection, one transaction) and exposes the handful
of operations services need.
"""

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any, TypeVar

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from commerce_api.core.logging import get_logger
from commerce_api.data_access.db import get_session_maker
from commerce_api.data_access.filters import Specification
from commerce_api.data_access.models import utcnow

logger = get_logger(__name__)

T = TypeVar("T", bound=SQLModel)


class UnitOfWork:
    """
    Transaction scope shared by every step of one aggregate operation.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, model: type[T], values: dict[str, Any]) -> str:
        """Insert one row and return its id. Constraint violations surface immediately."""
        entity = model(**values)
        self.session.add(entity)
        await self.session.flush()
        return entity.id

    async def insert_many(self, model: type[T], rows: Sequence[dict[str, Any]]) -> list[str]:
        entities = [model(**values) for values in rows]
        self.session.add_all(entities)
        await self.session.flush()
        return [entity.id for entity in entities]

    def _select(self, model: type[T], spec: Specification | None, options: Sequence[Any]) -> Any:
        statement = select(model).execution_options(populate_existing=True)
        if options:
            statement = statement.options(*options)
        if spec is not None:
            statement = spec.apply(statement)
        return statement

    async def find_one(
        self,
        model: type[T],
        spec: Specification,
        options: Sequence[Any] = (),
    ) -> T | None:
        result = await self.session.execute(self._select(model, spec, options).limit(1))
        return result.scalars().first()

    async def find(
        self,
        model: type[T],
        spec: Specification | None = None,
        options: Sequence[Any] = (),
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[T]:
        statement = self._select(model, spec, options).order_by(model.created_at, model.id)
        if limit is not None:
            statement = statement.limit(limit)
        if offset:
            statement = statement.offset(offset)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, model: type[T], spec: Specification, changes: dict[str, Any]) -> int:
        """Update matching rows; returns the number of rows affected."""
        values = dict(changes) or {"updated_at": utcnow()}
        statement = spec.apply(update(model)).values(**values)
        result = await self.session.execute(
            statement.execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def delete(self, model: type[T], spec: Specification) -> int:
        """Delete matching rows; returns the number of rows affected."""
        statement = spec.apply(delete(model))
        result = await self.session.execute(
            statement.execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def scalars(self, statement: Any) -> list[Any]:
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


@asynccontextmanager
async def unit_of_work(uow: UnitOfWork | None = None) -> AsyncIterator[UnitOfWork]:
    """
    Run a block inside a transaction.

    With an ambient unit of work the block joins it unchanged. Otherwise a new
    session is opened, committed on success, rolled back on any exception and
    always closed.
    """
    if uow is not None:
        yield uow
        return

    async with get_session_maker()() as session:
        scoped = UnitOfWork(session)
        try:
            yield scoped
            await scoped.commit()
        except Exception as exc:
            logger.warning(f"Transaction rolled back: {type(exc).__name__}: {exc}")
            await scoped.rollback()
            raise
