"""Unit tests for ExportLeadsUseCase."""

import json

import pytest

from remark.application.usecase.lead.export_leads import (
    ExportLeadsRequest,
    ExportLeadsUseCase,
)
from remark.domain.error import ForbiddenError
from remark.domain.repository import LeadRepository
from remark.domain.value import ExportFormat, LeadSource, UserRole
from tests.conftest import make_lead, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ADMIN = make_user("admin", role=UserRole.ADMIN).to_actor()


class TestExportLeadsUseCase:
    """Tests for ExportLeadsUseCase."""

    @pytest.mark.asyncio
    async def test_csv_is_default(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ExportLeadsUseCase)
        repo = await unit_env.get(LeadRepository)
        await repo.upsert(make_lead())

        # Act
        response = await use_case.execute(ExportLeadsRequest(actor=ADMIN))

        # Assert
        assert response.media_type == "text/csv"
        assert response.filename.endswith(".csv")
        assert response.count == 1
        assert "ada@example.com" in response.content

    @pytest.mark.asyncio
    async def test_json_export_filtered_by_source(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ExportLeadsUseCase)
        repo = await unit_env.get(LeadRepository)
        await repo.upsert(make_lead(email="a@example.com"))
        await repo.upsert(make_lead(email="b@example.com", source=LeadSource.CONTACT))

        # Act
        response = await use_case.execute(
            ExportLeadsRequest(
                actor=ADMIN, format=ExportFormat.JSON, source=LeadSource.CONTACT
            )
        )

        # Assert
        data = json.loads(response.content)
        assert [row["email"] for row in data] == ["b@example.com"]
        assert response.count == 1

    @pytest.mark.asyncio
    async def test_member_is_forbidden(self, unit_env):
        use_case = await unit_env.get(ExportLeadsUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(ExportLeadsRequest(actor=make_user().to_actor()))
