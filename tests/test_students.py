from app.core.security import verify_password
from app.db.models.clearance import ClearanceRecord
from app.db.models.student import Student

from conftest import roster, set_status


def test_create_student(client, make_section):
    section = make_section("Grade 9", "Rizal")
    response = client.post("/students", json={
        "studentId": "2024-0001",
        "firstName": "Jose",
        "middleName": "Protasio",
        "lastName": "Mercado",
        "sectionId": section["sectionId"],
    })
    assert response.status_code == 201
    data = response.json()
    assert data["studentId"] == "2024-0001"
    assert data["gradeLevel"] == "Grade 9"
    assert data["sectionName"] == "Rizal"
    assert data["role"] == "student"
    assert isinstance(data["userId"], int)


def test_create_student_without_section(client, make_student):
    data = make_student("2024-0002", "Gabriela", "Silang")
    assert data["sectionId"] is None
    assert [s["studentId"] for s in client.get("/students/unassigned").json()] == ["2024-0002"]


def test_duplicate_student_id_is_a_conflict(client, make_student):
    make_student("2024-0003", "Andres", "Bonifacio")
    response = client.post("/students", json={
        "studentId": "2024-0003", "firstName": "Other", "lastName": "Person",
    })
    assert response.status_code == 409
    assert response.json()["error"] == "Student ID 2024-0003 already exists"


def test_blank_name_is_rejected(client):
    response = client.post("/students", json={
        "studentId": "2024-0004", "firstName": " ", "lastName": "Luna",
    })
    assert response.status_code == 422


def test_unknown_section_on_create(client):
    response = client.post("/students", json={
        "studentId": "2024-0005", "firstName": "Juan", "lastName": "Luna", "sectionId": 404,
    })
    assert response.status_code == 404


def test_update_section_tri_state(client, make_section, make_student):
    rose = make_section("Grade 7", "Rose")
    lily = make_section("Grade 7", "Lily")
    make_student("2024-0006", "Melchora", "Aquino", section_id=rose["sectionId"])

    # Omitted: section unchanged
    response = client.put("/students/2024-0006", json={"firstName": "Tandang"})
    assert response.json()["firstName"] == "Tandang"
    assert response.json()["sectionId"] == rose["sectionId"]

    # Number: moved
    response = client.put("/students/2024-0006", json={"sectionId": lily["sectionId"]})
    assert response.json()["sectionId"] == lily["sectionId"]

    # Explicit null: unassigned
    response = client.put("/students/2024-0006", json={"sectionId": None})
    assert response.status_code == 200
    assert response.json()["sectionId"] is None


def test_moving_a_student_changes_their_rosters(client, rose, make_section, make_subject,
                                                 make_signatory, assign):
    lily = make_section("Grade 7", "Lily")
    science = make_subject("Science")
    assign(make_signatory("scidept")["id"], science["id"], [lily["sectionId"]])
    math_id = rose["math"]["id"]

    response = client.put("/students/A-001", json={"sectionId": lily["sectionId"]})
    assert response.status_code == 200

    assert roster(client, rose["section"]["sectionId"], math_id) == {"B-002": False}
    assert roster(client, lily["sectionId"], science["id"]) == {"A-001": False}

    # Math is no longer in scope for the moved student; Science is
    response = set_status(client, rose["a"]["userId"], math_id, True)
    assert response.status_code == 422
    assert set_status(client, rose["a"]["userId"], science["id"], True).status_code == 204

    profile = client.get("/students/A-001/clearance").json()
    assert [item["requirementName"] for item in profile["clearanceStatus"]] == ["Science"]


def test_update_missing_student(client):
    response = client.put("/students/nope", json={"firstName": "X"})
    assert response.status_code == 404
    assert "not found" in response.json()["error"]


def test_update_to_taken_student_id(client, make_student):
    make_student("2024-0007", "Apolinario", "Mabini")
    make_student("2024-0008", "Emilio", "Jacinto")
    response = client.put("/students/2024-0008", json={"studentId": "2024-0007"})
    assert response.status_code == 409


def test_password_is_stored_hashed(client, db, make_student):
    make_student("2024-0009", "Juan", "Luna")
    client.put("/students/2024-0009", json={"password": "painter1885"})

    student = db.query(Student).filter(Student.student_id == "2024-0009").first()
    assert student.hashed_password != "painter1885"
    assert verify_password("painter1885", student.hashed_password)


def test_delete_student_removes_clearance_records(client, db, rose):
    assert set_status(client, rose["a"]["userId"], rose["math"]["id"], True).status_code == 204

    response = client.delete("/students/A-001")
    assert response.status_code == 200
    assert "1 clearance record(s)" in response.json()["message"]

    assert db.query(ClearanceRecord).filter(
        ClearanceRecord.student_id == rose["a"]["userId"]
    ).count() == 0
    assert client.get("/students/A-001").status_code == 404


def test_student_clearance_profile(client, rose, make_account, make_signatory, assign):
    library = make_account("Library")
    librarian = make_signatory("librarian", name="Library Office")
    assign(librarian["id"], library["id"], [rose["section"]["sectionId"]])
    set_status(client, rose["a"]["userId"], library["id"], True)

    profile = client.get("/students/A-001/clearance").json()
    assert profile["activeTerm"] == {
        "schoolYear": "2024-2025", "termName": "Quarter", "termNumber": "1",
    }
    assert [(i["requirementName"], i["type"], i["isCleared"]) for i in profile["clearanceStatus"]] == [
        ("Library", "Account", True),
        ("Math", "Subject", False),
    ]
    assert profile["clearanceStatus"][0]["signatoryNames"] == ["Library Office"]


def test_unassigned_student_profile_is_empty(client, make_student):
    make_student("2024-0010", "Gregorio", "del Pilar")
    profile = client.get("/students/2024-0010/clearance").json()
    assert profile["activeTerm"] is None
    assert profile["clearanceStatus"] == []
