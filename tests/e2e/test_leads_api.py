"""End-to-end tests for lead capture and the lead endpoints."""

import json

import pytest
from fastapi.testclient import TestClient

from remark.config import AuthSettings
from remark.domain.repository import PostRepository, UserRepository
from remark.domain.value import UserRole
from remark.interface.api.app import create_app
from tests.conftest import make_post, make_user, token_for
from tests.di import build_test_container


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app(container)
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def world(client, container):
    """Seed a member, an admin and a published post; return them with auth headers."""
    member = make_user("member")
    admin = make_user("admin", role=UserRole.ADMIN)
    post = make_post(title="Pricing update")

    async def _seed():
        users = await container.get(UserRepository)
        posts = await container.get(PostRepository)
        await users.save(member)
        await users.save(admin)
        await posts.save(post)
        return await container.get(AuthSettings)

    settings = client.portal.call(_seed)
    return {
        "post": post,
        "member": {"Authorization": f"Bearer {token_for(member, settings)}"},
        "admin": {"Authorization": f"Bearer {token_for(admin, settings)}"},
    }


def comment_with_contact(client, world, contact):
    return client.post(
        f"/posts/{world['post'].id}/comments",
        json={"content": "Interested", "contact": contact},
        headers=world["member"],
    )


class TestLeadCapture:
    """Leads are captured from non-anonymous commenters, once per email and post."""

    def test_resubmission_keeps_one_lead(self, client, world):
        # Act
        first = comment_with_contact(
            client, world, {"name": "Ada", "email": "ada@example.com"}
        )
        second = comment_with_contact(
            client, world, {"name": "Ada Lovelace", "email": "ADA@example.com"}
        )
        leads = client.get("/leads", headers=world["admin"]).json()["data"]

        # Assert
        assert first.json()["data"]["lead_captured"] is True
        assert second.json()["data"]["lead_captured"] is True
        assert leads["results"] == 1
        lead = leads["leads"][0]
        assert lead["name"] == "Ada Lovelace"
        assert lead["post_title"] == "Pricing update"
        assert lead["comment_id"] == second.json()["data"]["comment"]["comment_id"]

    def test_anonymous_contact_is_not_captured(self, client, world):
        # Act
        response = comment_with_contact(
            client,
            world,
            {"name": "Ada", "email": "ada@example.com", "is_anonymous": True},
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["data"]["lead_captured"] is False
        assert client.get("/leads", headers=world["admin"]).json()["data"]["results"] == 0

    def test_invalid_email_skips_lead_but_keeps_comment(self, client, world):
        response = comment_with_contact(
            client, world, {"name": "Ada", "email": "nope"}
        )

        assert response.status_code == 201
        assert response.json()["data"]["lead_captured"] is False
        assert client.get("/leads", headers=world["admin"]).json()["data"]["results"] == 0


class TestLeadAdministration:
    """Admin lead listing, export and deletion."""

    def test_export_csv_and_json(self, client, world):
        # Arrange
        comment_with_contact(client, world, {"name": "Ada", "email": "ada@example.com"})

        # Act
        csv_response = client.get("/leads/export", headers=world["admin"])
        json_response = client.get(
            "/leads/export", params={"format": "json"}, headers=world["admin"]
        )

        # Assert
        assert csv_response.status_code == 200
        assert csv_response.headers["content-type"].startswith("text/csv")
        assert "attachment" in csv_response.headers["content-disposition"]
        assert ".csv" in csv_response.headers["content-disposition"]
        assert csv_response.text.splitlines()[0].startswith('"Name","Email"')

        assert json_response.headers["content-type"].startswith("application/json")
        rows = json.loads(json_response.text)
        assert rows[0]["email"] == "ada@example.com"

    def test_delete_lead(self, client, world):
        # Arrange
        comment_with_contact(client, world, {"name": "Ada", "email": "ada@example.com"})
        lead_id = client.get("/leads", headers=world["admin"]).json()["data"]["leads"][
            0
        ]["lead_id"]

        # Act
        deleted = client.delete(f"/leads/{lead_id}", headers=world["admin"])
        again = client.delete(f"/leads/{lead_id}", headers=world["admin"])

        # Assert
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Lead deleted"
        assert again.status_code == 404

    def test_members_cannot_manage_leads(self, client, world):
        assert client.get("/leads", headers=world["member"]).status_code == 403
        assert client.get("/leads/export", headers=world["member"]).status_code == 403
        assert client.get("/leads").status_code == 401
