"""Column repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from newsdesk.domain.model.column import Column
from newsdesk.domain.value import ColumnId


class ColumnRepository(ABC):
    """Read-only repository for content columns."""

    @abstractmethod
    async def find_by_id(self, column_id: ColumnId) -> Optional[Column]:
        """Find a column by ID."""
        pass

    @abstractmethod
    async def find_by_parent_ids(
        self,
        parent_ids: Sequence[ColumnId],
        language: Optional[str] = None,
    ) -> List[Column]:
        """Find direct children of the given columns.

        Args:
            parent_ids: Parent column IDs
            language: Optional language filter

        Returns:
            Columns ordered by ID
        """
        pass
