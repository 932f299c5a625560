"""Unit tests for DeleteLeadUseCase."""

from uuid import uuid4

import pytest

from remark.application.usecase.lead.delete_lead import (
    DeleteLeadRequest,
    DeleteLeadUseCase,
)
from remark.domain.error import ForbiddenError, NotFoundError
from remark.domain.repository import LeadRepository
from remark.domain.value import UserRole
from tests.conftest import make_lead, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ADMIN = make_user("admin", role=UserRole.ADMIN).to_actor()


class TestDeleteLeadUseCase:
    """Tests for DeleteLeadUseCase."""

    @pytest.mark.asyncio
    async def test_admin_deletes_lead(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteLeadUseCase)
        repo = await unit_env.get(LeadRepository)
        lead = await repo.upsert(make_lead())

        # Act
        response = await use_case.execute(
            DeleteLeadRequest(lead_id=str(lead.id), actor=ADMIN)
        )

        # Assert
        assert response.lead_id == str(lead.id)
        assert await repo.find_by_id(lead.id) is None

    @pytest.mark.asyncio
    async def test_missing_lead_is_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteLeadUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteLeadRequest(lead_id=str(uuid4()), actor=ADMIN))

    @pytest.mark.asyncio
    async def test_member_is_forbidden(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteLeadUseCase)
        repo = await unit_env.get(LeadRepository)
        lead = await repo.upsert(make_lead())

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await use_case.execute(
                DeleteLeadRequest(lead_id=str(lead.id), actor=make_user().to_actor())
            )
        assert await repo.find_by_id(lead.id) is not None
