"""PostgreSQL implementation of RefreshToken repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import RefreshToken
from blog.domain.repository import RefreshTokenRepository
from blog.persistence.mappers import (
    refresh_token_to_dict,
    row_to_refresh_token,
    row_to_user,
)
from blog.persistence.tables import refresh_tokens_table, users_table


class PostgresRefreshTokenRepository(RefreshTokenRepository):
    """PostgreSQL implementation of RefreshTokenRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_token(self, token: str) -> Optional[RefreshToken]:
        """Find a refresh token by secret, embedding the owning user."""
        stmt = select(refresh_tokens_table).where(
            refresh_tokens_table.c.token == token
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None

        token_row = row._asdict()
        user_stmt = select(users_table).where(users_table.c.id == token_row["user_id"])
        user_result = await self.session.execute(user_stmt)
        user_row = user_result.fetchone()
        user = row_to_user(user_row._asdict()) if user_row else None

        return row_to_refresh_token(token_row, user=user)

    async def save(self, refresh_token: RefreshToken) -> RefreshToken:
        """Insert a new refresh token record."""
        stmt = refresh_tokens_table.insert().values(
            **refresh_token_to_dict(refresh_token)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return refresh_token

    async def mark_revoked(self, token: str, revoked_at: datetime) -> bool:
        """Stamp revoked_at on the record, keeping an earlier revocation."""
        stmt = select(
            refresh_tokens_table.c.id, refresh_tokens_table.c.revoked_at
        ).where(refresh_tokens_table.c.token == token)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return False

        if row.revoked_at is None:
            update_stmt = (
                refresh_tokens_table.update()
                .where(refresh_tokens_table.c.id == row.id)
                .values(revoked_at=revoked_at)
            )
            await self.session.execute(update_stmt)
            await self.session.flush()
        return True
