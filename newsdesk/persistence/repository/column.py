"""PostgreSQL implementation of Column repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.domain.model import Column
from newsdesk.domain.repository import ColumnRepository
from newsdesk.domain.value import ColumnId
from newsdesk.persistence.mappers import row_to_column
from newsdesk.persistence.tables import columns_table


class PostgresColumnRepository(ColumnRepository):
    """PostgreSQL implementation of ColumnRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, column_id: ColumnId) -> Optional[Column]:
        """Find a column by ID."""
        stmt = select(columns_table).where(columns_table.c.id == column_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_column(dict(row)) if row else None

    async def find_by_parent_ids(
        self,
        parent_ids: Sequence[ColumnId],
        language: Optional[str] = None,
    ) -> List[Column]:
        """Find direct children of the given columns, ordered by ID."""
        if not parent_ids:
            return []

        stmt = select(columns_table).where(columns_table.c.parent_id.in_(parent_ids))
        if language is not None:
            stmt = stmt.where(columns_table.c.language == language)
        stmt = stmt.order_by(columns_table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_column(dict(row)) for row in result.mappings().all()]
