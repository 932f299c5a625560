"""Lead use cases."""

from .delete_lead import DeleteLeadRequest, DeleteLeadResponse, DeleteLeadUseCase
from .export_leads import ExportLeadsRequest, ExportLeadsResponse, ExportLeadsUseCase
from .list_leads import LeadItem, ListLeadsRequest, ListLeadsResponse, ListLeadsUseCase

__all__ = [
    "DeleteLeadRequest",
    "DeleteLeadResponse",
    "DeleteLeadUseCase",
    "ExportLeadsRequest",
    "ExportLeadsResponse",
    "ExportLeadsUseCase",
    "LeadItem",
    "ListLeadsRequest",
    "ListLeadsResponse",
    "ListLeadsUseCase",
]
