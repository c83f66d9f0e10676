import json
from urllib.parse import unquote

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from app.models import Membership
from app.services import membership_service
from app.utils.membership import generate_membership_number


def test_first_visit_creates_membership(client, db, member, member_headers):
    response = client.get("/api/membership/me", headers=member_headers)
    assert response.status_code == 200
    card = response.json()
    assert card["user_id"] == member.id
    assert card["membership_number"] == generate_membership_number(member.id)

    qr_payload = unquote(card["qr_code_url"].split("data=", 1)[1])
    assert json.loads(qr_payload) == {"membershipNumber": card["membership_number"], "userId": member.id}


def test_membership_is_created_once(client, db, member_headers):
    first = client.get("/api/membership/me", headers=member_headers).json()
    second = client.get("/api/membership/me", headers=member_headers).json()
    assert first["id"] == second["id"]
    assert db.query(Membership).count() == 1


def test_stored_number_wins_over_derivation(client, db, member, member_headers):
    db.add(Membership(id="m-1", user_id=member.id, membership_number="BP00001"))
    db.commit()
    assert client.get("/api/membership/me", headers=member_headers).json()["membership_number"] == "BP00001"


def test_membership_requires_login(client):
    assert client.get("/api/membership/me").status_code == 401


class BrokenSession:
    def query(self, *args, **kwargs):
        raise OperationalError("SELECT memberships", {}, Exception("connection refused"))


def test_lookup_errors_other_than_no_rows_are_surfaced():
    with pytest.raises(HTTPException) as exc_info:
        membership_service.get_or_create_membership(BrokenSession(), "user-1")
    assert exc_info.value.status_code == 503


class DeletedUserSession:
    """Session where the user row vanished: no membership, and the insert trips the foreign key."""

    def query(self, *args, **kwargs):
        return self

    def filter(self, *args, **kwargs):
        return self

    def one(self):
        raise NoResultFound("No row was found when one was required")

    def add(self, instance):
        pass

    def commit(self):
        raise IntegrityError("INSERT INTO memberships", {}, Exception("FOREIGN KEY constraint failed"))

    def rollback(self):
        pass


def test_membership_insert_for_missing_user_is_surfaced():
    with pytest.raises(HTTPException) as exc_info:
        membership_service.get_or_create_membership(DeletedUserSession(), "gone-user")
    assert exc_info.value.status_code == 503


def test_profile_image_upload(client, member_headers, fake_s3):
    card = client.get("/api/membership/me", headers=member_headers).json()

    response = client.post(
        "/api/membership/me/profile-image",
        files={"file": ("me.jpg", b"jpeg bytes", "image/jpeg")},
        headers=member_headers,
    )
    assert response.status_code == 200, response.text
    url = response.json()["profile_image_url"]
    assert f"/profile-images/{card['id']}-" in url
    assert url.endswith(".jpg")
    assert len(fake_s3.objects) == 1

    again = client.get("/api/membership/me", headers=member_headers).json()
    assert again["profile_image_url"] == url


def test_profile_image_extension_follows_content_type(client, member_headers, fake_s3):
    response = client.post(
        "/api/membership/me/profile-image",
        files={"file": ("page.html", b"\x89PNG fake", "image/png")},
        headers=member_headers,
    )
    assert response.status_code == 200, response.text
    assert response.json()["profile_image_url"].endswith(".png")
    (key, _), = fake_s3.objects.items()
    assert key.endswith(".png")
