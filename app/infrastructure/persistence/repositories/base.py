"""Base repository: generic read helpers shared by SQLAlchemy repositories."""

from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with primary-key lookup.

    Repositories here are read-only; participant rows are written by the
    registration and admin flows of the wider platform.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        return await self.db.get(self.model, entity_id)
