"""In-memory lead repository for testing."""

from datetime import datetime
from typing import Optional

from remark.domain.model.lead import Lead
from remark.domain.repository.lead import LeadRepository
from remark.domain.value import LeadId, LeadSource, PostId


class InMemoryLeadRepository(LeadRepository):
    """In-memory implementation of LeadRepository for testing."""

    def __init__(self) -> None:
        self._leads: dict[LeadId, Lead] = {}
        self._by_key: dict[tuple[str, Optional[PostId]], LeadId] = {}

    async def upsert(self, lead: Lead) -> Lead:
        """Insert or refresh a lead keyed by (email, post_id)."""
        key = (lead.email, lead.post_id)
        existing_id = self._by_key.get(key)
        if existing_id is None:
            self._leads[lead.id] = lead
            self._by_key[key] = lead.id
            return lead

        existing = self._leads[existing_id]
        refreshed = existing.model_copy(
            update={
                "name": lead.name,
                "phone": lead.phone,
                "post_title": lead.post_title,
                "comment_id": lead.comment_id,
                "updated_at": lead.updated_at,
                "expires_at": lead.expires_at,
            }
        )
        self._leads[existing_id] = refreshed
        return refreshed

    async def find_by_id(self, lead_id: LeadId) -> Optional[Lead]:
        """Find a lead by ID."""
        return self._leads.get(lead_id)

    async def find_all(
        self,
        source: Optional[LeadSource] = None,
        active_at: Optional[datetime] = None,
    ) -> list[Lead]:
        """List leads newest first."""
        leads = list(self._leads.values())
        if source is not None:
            leads = [lead for lead in leads if lead.source == source]
        if active_at is not None:
            leads = [lead for lead in leads if not lead.is_expired(active_at)]
        leads.sort(key=lambda lead: lead.updated_at, reverse=True)
        return leads

    async def delete(self, lead_id: LeadId) -> bool:
        """Delete a lead."""
        lead = self._leads.pop(lead_id, None)
        if lead is None:
            return False
        self._by_key.pop((lead.email, lead.post_id), None)
        return True
