"""PostgreSQL implementation of Lead repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.model import Lead
from remark.domain.repository import LeadRepository
from remark.domain.value import LeadId, LeadSource
from remark.persistence.mappers import lead_to_dict, row_to_lead
from remark.persistence.tables import leads_table


class PostgresLeadRepository(LeadRepository):
    """PostgreSQL implementation of LeadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(self, lead: Lead) -> Lead:
        """Insert or refresh a lead keyed by (email, post_id).

        Runs inside a SAVEPOINT so a failed lead write leaves the request
        transaction, and the comment written in it, usable.
        """
        values = lead_to_dict(lead)
        stmt = insert(leads_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            constraint="uq_leads_email_post",
            set_={
                "name": stmt.excluded.name,
                "phone": stmt.excluded.phone,
                "post_title": stmt.excluded.post_title,
                "comment_id": stmt.excluded.comment_id,
                "updated_at": stmt.excluded.updated_at,
                "expires_at": stmt.excluded.expires_at,
            },
        ).returning(leads_table)

        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.mappings().one()
        return row_to_lead(dict(row))

    async def find_by_id(self, lead_id: LeadId) -> Optional[Lead]:
        """Find a lead by ID."""
        stmt = select(leads_table).where(leads_table.c.id == lead_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_lead(dict(row)) if row else None

    async def find_all(
        self,
        source: Optional[LeadSource] = None,
        active_at: Optional[datetime] = None,
    ) -> List[Lead]:
        """List leads newest first."""
        stmt = select(leads_table)
        if source is not None:
            stmt = stmt.where(leads_table.c.source == source.value)
        if active_at is not None:
            stmt = stmt.where(leads_table.c.expires_at > active_at)
        stmt = stmt.order_by(leads_table.c.updated_at.desc())

        result = await self.session.execute(stmt)
        return [row_to_lead(dict(row)) for row in result.mappings().all()]

    async def delete(self, lead_id: LeadId) -> bool:
        """Delete a lead."""
        stmt = delete(leads_table).where(leads_table.c.id == lead_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
