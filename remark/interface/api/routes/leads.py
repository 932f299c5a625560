"""Lead administration routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Response

from remark.application.usecase.auth import GetCurrentActorUseCase
from remark.application.usecase.lead import (
    DeleteLeadRequest,
    DeleteLeadResponse,
    DeleteLeadUseCase,
    ExportLeadsRequest,
    ExportLeadsUseCase,
    ListLeadsRequest,
    ListLeadsResponse,
    ListLeadsUseCase,
)
from remark.domain.value import ExportFormat, LeadSource
from remark.interface.api.auth import read_token, resolve_actor
from remark.interface.api.envelope import Envelope, success

router = APIRouter(prefix="/leads", tags=["leads"], route_class=DishkaRoute)


@router.get("", response_model=Envelope[ListLeadsResponse])
async def list_leads(
    list_leads_use_case: FromDishka[ListLeadsUseCase],
    current_actor: FromDishka[GetCurrentActorUseCase],
    token: str | None = Depends(read_token),
    source: LeadSource | None = None,
    include_expired: bool = False,
) -> Envelope[ListLeadsResponse]:
    """List captured leads, newest first (admin only)."""
    actor = await resolve_actor(current_actor, token)
    result = await list_leads_use_case.execute(
        ListLeadsRequest(actor=actor, source=source, include_expired=include_expired)
    )
    return success(result)


@router.get("/export")
async def export_leads(
    export_leads_use_case: FromDishka[ExportLeadsUseCase],
    current_actor: FromDishka[GetCurrentActorUseCase],
    token: str | None = Depends(read_token),
    export_format: ExportFormat = Query(default=ExportFormat.CSV, alias="format"),
    source: LeadSource | None = None,
    include_expired: bool = False,
) -> Response:
    """Download leads as a CSV or JSON file (admin only)."""
    actor = await resolve_actor(current_actor, token)
    result = await export_leads_use_case.execute(
        ExportLeadsRequest(
            actor=actor,
            format=export_format,
            source=source,
            include_expired=include_expired,
        )
    )
    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )


@router.delete("/{lead_id}", response_model=Envelope[DeleteLeadResponse])
async def delete_lead(
    lead_id: UUID,
    delete_lead_use_case: FromDishka[DeleteLeadUseCase],
    current_actor: FromDishka[GetCurrentActorUseCase],
    token: str | None = Depends(read_token),
) -> Envelope[DeleteLeadResponse]:
    """Delete a lead (admin only)."""
    actor = await resolve_actor(current_actor, token)
    result = await delete_lead_use_case.execute(
        DeleteLeadRequest(lead_id=str(lead_id), actor=actor)
    )
    return success(result, message="Lead deleted")
