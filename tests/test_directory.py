import pytest

from app.models import Partner, PartnerType
from app.schemas.partner import Discount, PartnerCreate, normalize_discounts
from app.services import partner_service


def _partner(name, partner_type):
    return Partner(name=name, type=partner_type, discounts=[], active=True)


@pytest.fixture
def mixed_partners():
    return [
        _partner("Centre Court", PartnerType.COURT),
        _partner("SportZone", PartnerType.SHOP),
        _partner("Ballers", PartnerType.BRAND),
        _partner("Racket Shack", PartnerType.SHOP),
    ]


def test_type_filter_keeps_relative_order(mixed_partners):
    result = partner_service.filter_partners(mixed_partners, "shop", "")
    assert [p.name for p in result] == ["SportZone", "Racket Shack"]


def test_all_filter_returns_everything(mixed_partners):
    assert partner_service.filter_partners(mixed_partners, "all", None) == mixed_partners


def test_search_is_case_insensitive_substring(mixed_partners):
    result = partner_service.filter_partners(mixed_partners, "all", "sport")
    assert [p.name for p in result] == ["SportZone"]


def test_search_and_type_combine(mixed_partners):
    assert partner_service.filter_partners(mixed_partners, "brand", "sport") == []


def test_normalize_discounts_mixed_shapes():
    result = normalize_discounts([
        "10% off rackets",
        {"description": "Free court Monday", "percentage": 100},
        {"id": 7, "description": "Grip bundle"},
        Discount(id="x", description="Kept as is"),
    ])
    assert [(d.id, d.description) for d in result] == [
        ("0", "10% off rackets"),
        ("1", "Free court Monday"),
        ("7", "Grip bundle"),
        ("x", "Kept as is"),
    ]
    assert result[1].percentage == 100


def test_normalize_discounts_empty():
    assert normalize_discounts(None) == []
    assert normalize_discounts([]) == []


def test_partner_create_accepts_string_discounts():
    data = PartnerCreate(name="SportZone", type="shop", discounts=["5% off shoes"])
    assert data.discounts == [Discount(id="0", description="5% off shoes")]


def test_public_directory_hides_inactive_partners(client, db):
    partner_service.create_partner(db, PartnerCreate(name="SportZone", type="shop"))
    partner_service.create_partner(db, PartnerCreate(name="Centre Court", type="court"))
    partner_service.create_partner(db, PartnerCreate(name="Hidden Gear", type="shop", active=False))

    response = client.get("/api/partners/")
    assert response.status_code == 200
    assert {p["name"] for p in response.json()} == {"SportZone", "Centre Court"}

    response = client.get("/api/partners/", params={"type": "shop"})
    assert [p["name"] for p in response.json()] == ["SportZone"]

    response = client.get("/api/partners/", params={"search": "COURT"})
    assert [p["name"] for p in response.json()] == ["Centre Court"]


def test_public_directory_rejects_unknown_type(client):
    response = client.get("/api/partners/", params={"type": "gym"})
    assert response.status_code == 400


def test_public_partner_detail(client, db):
    visible = partner_service.create_partner(db, PartnerCreate(name="SportZone", type="shop"))
    hidden = partner_service.create_partner(db, PartnerCreate(name="Hidden Gear", type="shop", active=False))

    response = client.get(f"/api/partners/{visible.id}")
    assert response.status_code == 200
    assert response.json()["image"].startswith("https://api.dicebear.com/7.x/initials/svg?seed=SportZone")

    assert client.get(f"/api/partners/{hidden.id}").status_code == 404
    assert client.get("/api/partners/does-not-exist").status_code == 404
