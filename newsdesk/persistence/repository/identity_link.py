"""PostgreSQL implementation of IdentityLink repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.domain.model import IdentityLink, LinkEntry
from newsdesk.domain.repository import IdentityLinkRepository
from newsdesk.domain.value import AuthProvider, LinkToken
from newsdesk.persistence.mappers import identity_link_to_dict, row_to_identity_link
from newsdesk.persistence.tables import identity_links_table


class PostgresIdentityLinkRepository(IdentityLinkRepository):
    """PostgreSQL implementation of IdentityLinkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_token(self, token: LinkToken) -> Optional[IdentityLink]:
        """Find a link by its token."""
        stmt = select(identity_links_table).where(
            identity_links_table.c.token == token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_identity_link(dict(row)) if row else None

    async def find_by_provider(
        self, provider: AuthProvider, open_id: str
    ) -> Optional[IdentityLink]:
        """Find a link by external identity."""
        stmt = select(identity_links_table).where(
            and_(
                identity_links_table.c.provider == provider.value,
                identity_links_table.c.open_id == open_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_identity_link(dict(row)) if row else None

    async def insert_if_absent(self, link: IdentityLink) -> IdentityLink:
        """Insert unless (provider, open_id) exists, then read back the winner.

        ON CONFLICT DO NOTHING lets concurrent callbacks race safely: the
        unique constraint keeps one row and everyone reads that row.
        """
        stmt = (
            insert(identity_links_table)
            .values(**identity_link_to_dict(link))
            .on_conflict_do_nothing(
                index_elements=[
                    identity_links_table.c.provider,
                    identity_links_table.c.open_id,
                ]
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

        result = await self.session.execute(
            select(identity_links_table).where(
                and_(
                    identity_links_table.c.provider == link.provider.value,
                    identity_links_table.c.open_id == link.open_id,
                )
            )
        )
        return row_to_identity_link(dict(result.mappings().one()))

    async def update_entry(self, token: LinkToken, entry: LinkEntry) -> bool:
        """Overwrite the entry of the link with this token."""
        stmt = (
            update(identity_links_table)
            .where(identity_links_table.c.token == token.root)
            .values(
                entry_username=entry.username,
                entry_password=entry.encrypted_password,
                updated_at=datetime.now(),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def rename_entry_username(self, old_username: str, new_username: str) -> int:
        """Rewrite entry usernames after an account email change."""
        stmt = (
            update(identity_links_table)
            .where(identity_links_table.c.entry_username == old_username)
            .values(entry_username=new_username, updated_at=datetime.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
