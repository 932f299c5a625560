"""Export leads use case."""

from pydantic import BaseModel

from remark.application.usecase.base import BaseUseCase
from remark.domain.model import Actor
from remark.domain.service import Action, LeadService, can_perform
from remark.domain.value import ExportFormat, LeadSource


class ExportLeadsRequest(BaseModel):
    """Export leads request."""

    actor: Actor | None
    format: ExportFormat = ExportFormat.CSV
    source: LeadSource | None = None
    include_expired: bool = False


class ExportLeadsResponse(BaseModel):
    """Rendered export file."""

    content: str
    media_type: str
    filename: str
    count: int


class ExportLeadsUseCase(BaseUseCase):
    """Use case for downloading leads as CSV or JSON."""

    def __init__(self, lead_service: LeadService) -> None:
        self.lead_service = lead_service

    async def execute(self, request: ExportLeadsRequest) -> ExportLeadsResponse:
        """Execute export leads flow.

        Raises:
            NotAuthenticatedError: If there is no active actor
            ForbiddenError: If the actor is not an admin
        """
        can_perform(request.actor, Action.MANAGE_LEADS).enforce()

        leads = await self.lead_service.list_leads(
            source=request.source, include_expired=request.include_expired
        )
        export = self.lead_service.export(leads, request.format)
        return ExportLeadsResponse(
            content=export.content,
            media_type=export.media_type,
            filename=export.filename,
            count=len(leads),
        )
