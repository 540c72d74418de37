"""Parolee persistence, exercised against a seeded SQLite database."""

import asyncio
import datetime

import pytest

from concert_lab_api.app.core.db import get_cursor
from concert_lab_api.app.schemas.parolee import Gender, ParoleeCreate
from concert_lab_api.app.services.parolee_service import ParoleeService


SEED = """
INSERT INTO parolees (id, last_name, first_name, gender, date_of_birth) VALUES
    (1, 'Sinnen', 'Oliver', 'Male', '1970-05-26'),
    (2, 'Watson', 'Sarah', 'Female', '1984-11-02'),
    (3, 'Larkin', 'Danny', 'Male', '1913-07-11'),
    (4, 'Corleone', 'Michael', 'Male', '1920-04-19'),
    (5, 'Barnes', 'Emma', 'Female', '1995-01-30');
"""


@pytest.fixture
def seeded(client):
    with get_cursor() as cursor:
        cursor.executescript(SEED)
    return client


def test_query_all_parolees_ordered_by_first_name(seeded):
    resp = seeded.get("/parolees")
    assert resp.status_code == 200
    parolees = resp.json()
    assert len(parolees) == 5
    assert parolees[0]["first_name"] == "Danny"
    assert parolees[0]["date_of_birth"] == "1913-07-11"


def test_query_parolee_twice_yields_equal_records(seeded):
    first = asyncio.run(ParoleeService.get_parolee(1))
    second = asyncio.run(ParoleeService.get_parolee(1))
    assert first == second
    assert first.gender is Gender.MALE


def test_add_parolee_assigns_id(seeded):
    resp = seeded.post(
        "/parolees",
        json={
            "first_name": "TestFirstName",
            "last_name": "TestLastName",
            "gender": "Male",
            "date_of_birth": "2005-12-01",
        },
    )
    assert resp.status_code == 201

    found = seeded.get("/parolees", params={"first_name": "TestFirstName"}).json()
    assert len(found) == 1
    assert found[0]["id"] == resp.json()["id"] == 6


def test_delete_parolee(seeded):
    michael = seeded.get("/parolees", params={"first_name": "Michael"}).json()[0]
    assert seeded.delete(f"/parolees/{michael['id']}").status_code == 204
    assert seeded.get(f"/parolees/{michael['id']}").status_code == 404
    assert seeded.delete(f"/parolees/{michael['id']}").status_code == 404


def test_update_parolee_date_of_birth(seeded):
    resp = seeded.put("/parolees/5", json={"date_of_birth": "2017-08-17"})
    assert resp.status_code == 200
    assert seeded.get("/parolees/5").json()["date_of_birth"] == "2017-08-17"
    assert resp.json()["first_name"] == "Emma"


def test_update_missing_parolee_is_404(seeded):
    assert seeded.put("/parolees/99", json={"first_name": "Nobody"}).status_code == 404


def test_create_parolee_via_service(client):
    created = asyncio.run(
        ParoleeService.create_parolee(
            ParoleeCreate(
                last_name="Doe",
                first_name="Jane",
                gender=Gender.FEMALE,
                date_of_birth=datetime.date(1990, 3, 4),
            )
        )
    )
    assert created.id == 1
    assert asyncio.run(ParoleeService.get_parolee(1)).date_of_birth == datetime.date(1990, 3, 4)


def test_rejects_unknown_gender(client):
    resp = client.post(
        "/parolees",
        json={"first_name": "A", "last_name": "B", "gender": "Other"},
    )
    assert resp.status_code == 422


def test_update_can_clear_date_of_birth(seeded):
    resp = seeded.put("/parolees/3", json={"date_of_birth": None})
    assert resp.status_code == 200
    assert resp.json()["date_of_birth"] is None
    assert resp.json()["first_name"] == "Danny"


def test_update_ignores_null_for_required_fields(seeded):
    resp = seeded.put("/parolees/3", json={"first_name": None, "last_name": "Lark"})
    assert resp.status_code == 200
    assert resp.json()["first_name"] == "Danny"
    assert resp.json()["last_name"] == "Lark"


def test_update_does_not_modify_callers_changes(seeded):
    changes = {"gender": Gender.FEMALE, "date_of_birth": datetime.date(2000, 1, 2)}
    updated = asyncio.run(ParoleeService.update_parolee(4, changes))
    assert changes == {"gender": Gender.FEMALE, "date_of_birth": datetime.date(2000, 1, 2)}
    assert updated.gender is Gender.FEMALE
    assert updated.date_of_birth == datetime.date(2000, 1, 2)
