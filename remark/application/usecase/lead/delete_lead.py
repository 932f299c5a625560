"""Delete lead use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.application.usecase.base import BaseUseCase
from remark.domain.model import Actor
from remark.domain.service import Action, LeadService, can_perform
from remark.domain.value import LeadId


class DeleteLeadRequest(BaseModel):
    """Delete lead request."""

    lead_id: str  # UUID string
    actor: Actor | None


class DeleteLeadResponse(BaseModel):
    """Delete lead response."""

    lead_id: str


class DeleteLeadUseCase(BaseUseCase):
    """Use case for removing a lead."""

    def __init__(self, lead_service: LeadService) -> None:
        self.lead_service = lead_service

    async def execute(self, request: DeleteLeadRequest) -> DeleteLeadResponse:
        """Execute delete lead flow.

        Raises:
            NotAuthenticatedError: If there is no active actor
            ForbiddenError: If the actor is not an admin
            NotFoundError: If the lead does not exist
        """
        can_perform(request.actor, Action.MANAGE_LEADS).enforce()

        await self.lead_service.delete_lead(LeadId(UUID(request.lead_id)))
        return DeleteLeadResponse(lead_id=request.lead_id)
