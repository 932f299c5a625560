"""List leads use case."""

from datetime import datetime

from pydantic import BaseModel

from remark.application.usecase.base import BaseUseCase
from remark.domain.model import Actor, Lead
from remark.domain.service import Action, LeadService, can_perform
from remark.domain.value import LeadSource


class LeadItem(BaseModel):
    """Lead item in response."""

    lead_id: str
    name: str
    email: str
    phone: str | None
    source: LeadSource
    post_id: str | None
    post_title: str | None
    comment_id: str | None
    created_at: datetime
    updated_at: datetime
    expires_at: datetime

    @classmethod
    def from_lead(cls, lead: Lead) -> "LeadItem":
        return cls(
            lead_id=str(lead.id),
            name=lead.name,
            email=lead.email,
            phone=lead.phone,
            source=lead.source,
            post_id=str(lead.post_id) if lead.post_id else None,
            post_title=lead.post_title,
            comment_id=str(lead.comment_id) if lead.comment_id else None,
            created_at=lead.created_at,
            updated_at=lead.updated_at,
            expires_at=lead.expires_at,
        )


class ListLeadsRequest(BaseModel):
    """List leads request."""

    actor: Actor | None
    source: LeadSource | None = None
    include_expired: bool = False


class ListLeadsResponse(BaseModel):
    """List leads response."""

    leads: list[LeadItem]
    results: int


class ListLeadsUseCase(BaseUseCase):
    """Use case for the admin leads screen."""

    def __init__(self, lead_service: LeadService) -> None:
        self.lead_service = lead_service

    async def execute(self, request: ListLeadsRequest) -> ListLeadsResponse:
        """Execute list leads flow.

        Raises:
            NotAuthenticatedError: If there is no active actor
            ForbiddenError: If the actor is not an admin
        """
        can_perform(request.actor, Action.MANAGE_LEADS).enforce()

        leads = await self.lead_service.list_leads(
            source=request.source, include_expired=request.include_expired
        )
        return ListLeadsResponse(
            leads=[LeadItem.from_lead(lead) for lead in leads],
            results=len(leads),
        )
