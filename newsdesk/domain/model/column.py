"""Column entity (content category from the content store)."""

from typing import Optional

from newsdesk.domain.model.common import DomainModel
from newsdesk.domain.value import ColumnId


class Column(DomainModel):
    """Content column. Columns form a tree through parent_id."""

    id: ColumnId
    name: str
    parent_id: Optional[ColumnId] = None
    language: str = "zh-cn"
