"""In-memory column repository for testing."""

from typing import List, Optional, Sequence

from newsdesk.domain.model import Column
from newsdesk.domain.repository import ColumnRepository
from newsdesk.domain.value import ColumnId


class InMemoryColumnRepository(ColumnRepository):
    """In-memory implementation of ColumnRepository for testing."""

    def __init__(self) -> None:
        self._columns: dict[ColumnId, Column] = {}

    def add(self, *columns: Column) -> None:
        """Seed columns (the content store is read-only to the service)."""
        for column in columns:
            self._columns[column.id] = column

    async def find_by_id(self, column_id: ColumnId) -> Optional[Column]:
        """Find a column by ID."""
        return self._columns.get(column_id)

    async def find_by_parent_ids(
        self,
        parent_ids: Sequence[ColumnId],
        language: Optional[str] = None,
    ) -> List[Column]:
        """Find direct children of the given columns, ordered by ID."""
        parents = set(parent_ids)
        return sorted(
            (
                c
                for c in self._columns.values()
                if c.parent_id in parents and (language is None or c.language == language)
            ),
            key=lambda c: c.id,
        )
