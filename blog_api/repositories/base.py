"""Base repository for database operations."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from blog_api.errors.database import DatabaseError, DuplicateEntryError, RecordNotFoundError
from blog_api.errors.validation import InvalidIdError

type FilterValue = str | int | float | bool | UUID | datetime | None


def parse_id(raw_id: str | UUID, detail: str = "Invalid blog ID") -> UUID:
    """
    Parse a path identifier into a UUID.

    Args:
        raw_id: Identifier as received from the caller
        detail: Message for the raised error

    Returns:
        UUID: Parsed identifier

    Raises:
        InvalidIdError: If the identifier is malformed
    """
    if isinstance(raw_id, UUID):
        return raw_id
    try:
        return UUID(raw_id)
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidIdError(detail) from e


class BaseRepository[ModelT: SQLModel, CreateSchemaT: BaseModel]:
    """
    Base repository implementing common CRUD operations.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
        order_field: Column used to order ``get_all`` (default: "created_at").
        not_found_detail: Message for ``RecordNotFoundError``.
    """

    model: type[ModelT]
    id_field: str = "id"
    order_field: str | None = "created_at"
    not_found_detail: str = "Record not found"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, schema: CreateSchemaT, **kwargs: Any) -> ModelT:
        """
        Create a new record in the database.

        Args:
            schema: Creation schema with data
            **kwargs: Extra column values not present on the schema

        Returns:
            ModelT: Created database model
        """
        data = schema.model_dump(exclude_unset=True)
        data.update(kwargs)
        db_obj = self.model.model_validate(data)
        return await self._add_and_refresh(db_obj)

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_field(
        self,
        field_name: str,
        value: FilterValue,
    ) -> ModelT | None:
        """
        Get a record by a specific field value.

        Args:
            field_name: Name of the field to search
            value: Value to search for

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        field = getattr(self.model, field_name)
        statement = select(self.model).where(field == value)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_or_raise(self, record_id: UUID) -> ModelT:
        """
        Get a record by ID or raise an exception if not found.

        Raises:
            RecordNotFoundError: If record is not found
        """
        record = await self.get_by_id(record_id)
        if not record:
            raise RecordNotFoundError(detail=self.not_found_detail)
        return record

    async def get_all(self) -> list[ModelT]:
        """Get all records, oldest first when the model has an order column."""
        statement = select(self.model)
        if self.order_field:
            statement = statement.order_by(getattr(self.model, self.order_field))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Returns:
            bool: True if record was deleted, False if not found
        """
        record = await self.get_by_id(record_id)
        if not record:
            return False

        await self.session.delete(record)
        await self.session.flush()
        return True

    async def count(self) -> int:
        statement = select(func.count()).select_from(self.model)
        result = await self.session.execute(statement)
        count = result.scalar()
        return count if count is not None else 0

    async def _add_and_refresh(
        self,
        record: ModelT,
        duplicate_detail: str | None = None,
    ) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add
            duplicate_detail: Message used when a unique constraint fails

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other database errors
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=duplicate_detail or error_msg) from e
            raise DatabaseError(
                detail="Database integrity error",
                error=error_msg,
            ) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseError(detail="Failed to save record", error=str(e)) from e

    async def _check_exists_by_field(self, field_name: str, value: FilterValue) -> bool:
        field = getattr(self.model, field_name)
        statement = select(1).where(field == value).limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none() is not None
