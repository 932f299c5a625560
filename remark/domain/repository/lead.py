"""Lead repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from remark.domain.model.lead import Lead
from remark.domain.value import LeadId, LeadSource


class LeadRepository(ABC):
    """Repository for Lead entity."""

    @abstractmethod
    async def upsert(self, lead: Lead) -> Lead:
        """Insert a lead or refresh the one with the same (email, post_id).

        On conflict the stored lead keeps its id and created_at; name,
        phone, post_title, comment_id, updated_at and expires_at are
        overwritten.

        Args:
            lead: Lead to insert

        Returns:
            The stored lead
        """
        pass

    @abstractmethod
    async def find_by_id(self, lead_id: LeadId) -> Optional[Lead]:
        """Find a lead by ID."""
        pass

    @abstractmethod
    async def find_all(
        self,
        source: Optional[LeadSource] = None,
        active_at: Optional[datetime] = None,
    ) -> List[Lead]:
        """List leads newest first.

        Args:
            source: Only leads captured from this source (None for all)
            active_at: Only leads not yet expired at this time (None for all)

        Returns:
            Leads ordered by updated_at descending
        """
        pass

    @abstractmethod
    async def delete(self, lead_id: LeadId) -> bool:
        """Delete a lead.

        Returns:
            True if a lead was removed
        """
        pass
