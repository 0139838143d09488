# tests/conftest.py
"""
Shared fixtures: an in-memory SQLite database per test, a TestClient wired
to it, and small builders for the entities most tests need.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.db.init_db import init_db
from app.main import app

SCHOOL_YEAR = "2024-2025"


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = factory()
    init_db(session)
    session.close()
    yield factory
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def active_term(client):
    """Pin the active term so tests do not depend on today's date."""
    response = client.put("/api/settings", json={
        "active_school_year": SCHOOL_YEAR,
        "active_quarter_jhs": "1",
        "active_semester_shs": "1",
    })
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def grade_ids(client):
    return {g["name"]: g["id"] for g in client.get("/grade-levels").json()}


@pytest.fixture
def make_section(client):
    def _make(grade_level="Grade 7", name="Rose"):
        response = client.post("/sections", json={"gradeLevel": grade_level, "sectionName": name})
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_student(client):
    def _make(student_id, first_name, last_name, section_id=None, middle_name=None):
        response = client.post("/students", json={
            "studentId": student_id,
            "firstName": first_name,
            "middleName": middle_name,
            "lastName": last_name,
            "sectionId": section_id,
        })
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_subject(client):
    def _make(name, grade_level_id=None, semester=None):
        payload = {"name": name}
        if grade_level_id is not None:
            payload["gradeLevelId"] = grade_level_id
        if semester is not None:
            payload["semester"] = semester
        response = client.post("/subjects", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_account(client):
    def _make(name):
        response = client.post("/accounts", json={"name": name})
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_signatory(client):
    def _make(username, name=None, kind="signatories"):
        payload = {
            "firstName": "Maria",
            "lastName": username.capitalize(),
            "username": username,
            "password": "s3cret-pass",
        }
        if name:
            payload["name"] = name
        response = client.post(f"/{kind}", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def assign(client):
    def _assign(signatory_id, requirement_id, section_ids):
        response = client.post("/assignments/assign-classes", json={
            "signatoryId": signatory_id,
            "requirementId": requirement_id,
            "sectionIds": section_ids,
        })
        assert response.status_code == 200, response.text
        return response.json()
    return _assign


@pytest.fixture
def rose(active_term, grade_ids, make_section, make_student, make_subject, make_signatory, assign):
    """Grade 7 - Rose with students A and B, Math assigned to the section."""
    section = make_section("Grade 7", "Rose")
    student_a = make_student("A-001", "Ana", "Alpha", section_id=section["sectionId"])
    student_b = make_student("B-002", "Ben", "Bravo", section_id=section["sectionId"])
    math = make_subject("Math", grade_level_id=grade_ids["Grade 7"])
    adviser = make_signatory("mathdept", name="Math Department")
    assign(adviser["id"], math["id"], [section["sectionId"]])
    return {
        "section": section,
        "a": student_a,
        "b": student_b,
        "math": math,
        "signatory": adviser,
    }


def set_status(client, user_id, requirement_id, is_cleared, school_year=SCHOOL_YEAR, term="1"):
    return client.put("/clearance/status", json={
        "userId": user_id,
        "requirementId": requirement_id,
        "schoolYear": school_year,
        "term": term,
        "isCleared": is_cleared,
    })


def roster(client, section_id, requirement_id):
    response = client.get(f"/clearance/section/{section_id}/subject/{requirement_id}")
    assert response.status_code == 200, response.text
    return {s["studentId"]: s["isCleared"] for s in response.json()["students"]}
