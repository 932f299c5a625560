"""Lead domain service."""

import csv
import io
import json
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from remark.config import LeadSettings
from remark.domain.error import NotFoundError, UpstreamWriteFailure
from remark.domain.model import Comment, Lead, Post
from remark.domain.model.common import utcnow
from remark.domain.repository import LeadRepository
from remark.domain.value import CommenterContact, ExportFormat, LeadId, LeadSource

from .base import Service

CSV_HEADERS = [
    "Name",
    "Email",
    "Phone",
    "Source",
    "Post Title",
    "Created At",
    "Expires At",
]


@dataclass
class LeadExport:
    """Rendered lead export ready to be sent as a file download."""

    content: str
    media_type: str
    filename: str


class LeadService(Service):
    """Domain service for lead capture and lead administration."""

    def __init__(
        self, lead_repository: LeadRepository, lead_settings: LeadSettings
    ) -> None:
        """Initialize lead service.

        Args:
            lead_repository: Lead repository
            lead_settings: Lead configuration
        """
        self.lead_repository = lead_repository
        self.settings = lead_settings

    def expiry_from(self, moment: datetime) -> datetime:
        return moment + timedelta(days=self.settings.ttl_days)

    def parse_contact(
        self, raw: dict[str, Any] | None, comment: Comment
    ) -> CommenterContact | None:
        """Read the contact block submitted with a comment.

        A block that does not validate is logged and dropped; it never
        fails the comment it came with.

        Args:
            raw: Contact block as submitted
            comment: Comment the block was submitted with

        Returns:
            Parsed contact, or None when absent or invalid
        """
        if raw is None:
            return None
        try:
            return CommenterContact.model_validate(raw)
        except PydanticValidationError as e:
            logfire.warn(
                "Contact details rejected",
                comment_id=str(comment.id),
                fields=sorted(
                    str(error["loc"][0]) for error in e.errors() if error["loc"]
                ),
            )
            return None

    async def capture_from_comment(
        self, contact: CommenterContact, post: Post, comment: Comment
    ) -> Lead | None:
        """Upsert a lead for a non-anonymous commenter.

        Resubmitting on the same post refreshes the existing lead.

        Args:
            contact: Contact details submitted with the comment
            post: Post commented on
            comment: Comment just created

        Returns:
            Stored lead, or None when the contact is anonymous

        Raises:
            UpstreamWriteFailure: If the lead store rejects the write
        """
        if not contact.identifies_commenter:
            return None

        with logfire.span(
            "lead_service.capture_from_comment",
            post_id=str(post.id),
            comment_id=str(comment.id),
        ):
            now = utcnow()
            lead = Lead(
                id=LeadId(uuid4()),
                name=contact.name,
                email=contact.email,
                phone=contact.phone,
                source=LeadSource.COMMENT,
                post_id=post.id,
                post_title=post.title,
                comment_id=comment.id,
                created_at=now,
                updated_at=now,
                expires_at=self.expiry_from(now),
            )
            try:
                stored = await self.lead_repository.upsert(lead)
            except Exception as e:
                logfire.error(
                    "Lead upsert failed",
                    post_id=str(post.id),
                    comment_id=str(comment.id),
                    error=str(e),
                )
                raise UpstreamWriteFailure("lead", e) from e

            logfire.info(
                "Lead captured",
                lead_id=str(stored.id),
                post_id=str(post.id),
                refreshed=stored.id != lead.id,
            )
            return stored

    async def list_leads(
        self, source: LeadSource | None = None, include_expired: bool = False
    ) -> list[Lead]:
        """List leads newest first.

        Args:
            source: Only leads from this source (None for all)
            include_expired: Include leads past their expiry

        Returns:
            Leads ordered by last submission, newest first
        """
        with logfire.span(
            "lead_service.list_leads",
            source=source.value if source else None,
            include_expired=include_expired,
        ):
            leads = await self.lead_repository.find_all(
                source=source,
                active_at=None if include_expired else utcnow(),
            )
            logfire.info("Leads listed", count=len(leads))
            return leads

    async def delete_lead(self, lead_id: LeadId) -> None:
        """Delete a lead.

        Raises:
            NotFoundError: If no lead has this ID
        """
        with logfire.span("lead_service.delete_lead", lead_id=str(lead_id)):
            removed = await self.lead_repository.delete(lead_id)
            if not removed:
                logfire.warn("Lead not found", lead_id=str(lead_id))
                raise NotFoundError("Lead", str(lead_id))
            logfire.info("Lead deleted", lead_id=str(lead_id))

    def export(
        self, leads: list[Lead], export_format: ExportFormat, today: datetime | None = None
    ) -> LeadExport:
        """Render leads as a CSV or JSON file.

        Args:
            leads: Leads to export
            export_format: Output format
            today: Date used in the file name (defaults to now)

        Returns:
            File content with its media type and download name
        """
        stamp = (today or utcnow()).date().isoformat()
        with logfire.span(
            "lead_service.export", format=export_format.value, count=len(leads)
        ):
            if export_format == ExportFormat.CSV:
                return LeadExport(
                    content=render_csv(leads),
                    media_type="text/csv",
                    filename=f"leads_{stamp}.csv",
                )
            return LeadExport(
                content=render_json(leads),
                media_type="application/json",
                filename=f"leads_{stamp}.json",
            )


def render_csv(leads: list[Lead]) -> str:
    """Render leads as CSV with every field quoted."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for lead in leads:
        writer.writerow(
            [
                lead.name,
                lead.email,
                lead.phone or "",
                lead.source.value,
                lead.post_title or "",
                lead.created_at.isoformat(),
                lead.expires_at.isoformat(),
            ]
        )
    return buffer.getvalue()


def render_json(leads: list[Lead]) -> str:
    """Render leads as an indented JSON array."""
    return json.dumps([lead.model_dump(mode="json") for lead in leads], indent=2)
