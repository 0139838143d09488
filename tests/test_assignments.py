from app.core.security import verify_password
from app.db.models.clearance import ClearanceRecord
from app.db.models.signatory import Signatory

from conftest import set_status


def test_assign_requirement_is_idempotent(client, make_subject, make_signatory):
    math = make_subject("Math")
    signatory = make_signatory("adviser")
    body = {"signatoryId": signatory["id"], "requirementId": math["id"]}

    first = client.post("/assignments/assign-requirement", json=body)
    second = client.post("/assignments/assign-requirement", json=body)
    assert first.status_code == second.status_code == 200
    assert first.json()["assignmentId"] == second.json()["assignmentId"]

    items = client.get(f"/signatories/{signatory['id']}/assignments").json()
    assert len(items) == 1


def test_assign_classes_is_a_set_union(client, make_section, make_subject, make_signatory, assign):
    a = make_section("Grade 7", "Rose")
    b = make_section("Grade 7", "Lily")
    math = make_subject("Math")
    signatory = make_signatory("adviser")

    assign(signatory["id"], math["id"], [a["sectionId"]])
    result = assign(signatory["id"], math["id"], [a["sectionId"], b["sectionId"], b["sectionId"]])
    assert result["sectionIds"] == sorted([a["sectionId"], b["sectionId"]])


def test_assign_unknown_section(client, make_subject, make_signatory):
    math = make_subject("Math")
    signatory = make_signatory("adviser")
    response = client.post("/assignments/assign-classes", json={
        "signatoryId": signatory["id"], "requirementId": math["id"], "sectionIds": [41, 42],
    })
    assert response.status_code == 404
    assert response.json()["error"] == "Sections not found: 41, 42"


def test_assign_to_unknown_signatory(client, make_subject):
    math = make_subject("Math")
    response = client.post("/assignments/assign-requirement", json={
        "signatoryId": 99, "requirementId": math["id"],
    })
    assert response.status_code == 404


def test_sections_for_sorted_numerically(client, make_section, make_subject, make_signatory, assign):
    ids = [make_section(grade, name)["sectionId"] for grade, name in [
        ("Grade 10", "Narra"), ("Grade 12", "Apollo"), ("Grade 8", "Mabini"),
        ("Grade 9", "Rizal"), ("Grade 7", "Rose"), ("Grade 11", "Zeus"),
    ]]
    math = make_subject("Math")
    signatory = make_signatory("adviser")
    assign(signatory["id"], math["id"], ids)

    sections = client.get(f"/assignments/sections/{signatory['id']}/{math['id']}").json()
    assert [s["gradeLevel"] for s in sections] == [
        "Grade 7", "Grade 8", "Grade 9", "Grade 10", "Grade 11", "Grade 12",
    ]


def test_available_sections_are_recomputed(client, make_section, make_subject, make_signatory, assign):
    rose = make_section("Grade 7", "Rose")
    lily = make_section("Grade 7", "Lily")
    math = make_subject("Math")
    signatory = make_signatory("adviser")
    assign(signatory["id"], math["id"], [rose["sectionId"]])

    url = f"/assignments/available-sections/{signatory['id']}/{math['id']}"
    assert [s["sectionId"] for s in client.get(url).json()] == [lily["sectionId"]]

    narra = make_section("Grade 10", "Narra")
    assert [s["sectionId"] for s in client.get(url).json()] == [lily["sectionId"], narra["sectionId"]]


def test_unassign_requirement_keeps_history(client, db, rose):
    set_status(client, rose["a"]["userId"], rose["math"]["id"], True)

    response = client.delete(f"/assignments/{rose['signatory']['id']}/{rose['math']['id']}")
    assert response.status_code == 200
    assert client.get(f"/signatories/{rose['signatory']['id']}/assignments").json() == []

    # Out of every scope: the section no longer has a roster for Math
    status = client.get(
        f"/clearance/section/{rose['section']['sectionId']}/subject/{rose['math']['id']}"
    ).json()
    assert status["students"] == []

    assert db.query(ClearanceRecord).count() == 1

    again = client.delete(f"/assignments/{rose['signatory']['id']}/{rose['math']['id']}")
    assert again.status_code == 404


def test_unassign_single_section(client, rose, make_section, assign):
    lily = make_section("Grade 7", "Lily")
    assign(rose["signatory"]["id"], rose["math"]["id"], [lily["sectionId"]])

    url = f"/assignments/{rose['signatory']['id']}/{rose['math']['id']}/sections/{lily['sectionId']}"
    assert client.delete(url).status_code == 200
    assert client.delete(url).status_code == 404

    sections = client.get(
        f"/assignments/sections/{rose['signatory']['id']}/{rose['math']['id']}"
    ).json()
    assert [s["sectionName"] for s in sections] == ["Rose"]


def test_assigned_items_for_signatory(client, make_subject, make_account, make_signatory):
    signatory = make_signatory("registrar", name="Registrar")
    math = make_subject("Math")
    library = make_account("Library")
    for requirement in (math, library):
        client.post("/assignments/assign-requirement", json={
            "signatoryId": signatory["id"], "requirementId": requirement["id"],
        })

    items = client.get(f"/signatories/{signatory['id']}/assignments").json()
    assert [(i["name"], i["type"]) for i in items] == [("Library", "Account"), ("Math", "Subject")]


def test_faculty_shares_assignment_contract(client, make_section, make_subject, make_signatory, assign):
    section = make_section("Grade 8", "Mabini")
    science = make_subject("Science")
    faculty = make_signatory("jdelacruz", kind="faculty")
    assert faculty["kind"] == "faculty"
    assert faculty["name"] == "Maria Jdelacruz"

    assign(faculty["id"], science["id"], [section["sectionId"]])
    items = client.get(f"/faculty/{faculty['id']}/assignments").json()
    assert [(i["requirementId"], i["type"]) for i in items] == [(science["id"], "Subject")]

    # Faculty and signatory listings are kept apart
    assert client.get("/signatories").json() == []
    assert client.get(f"/signatories/{faculty['id']}").status_code == 404


def test_signatory_crud(client, db, make_signatory):
    signatory = make_signatory("cashier", name="Cashier")
    duplicate = client.post("/signatories", json={
        "firstName": "X", "lastName": "Y", "username": "cashier", "password": "pw",
    })
    assert duplicate.status_code == 409

    stored = db.query(Signatory).filter(Signatory.id == signatory["id"]).first()
    assert verify_password("s3cret-pass", stored.hashed_password)

    updated = client.put(f"/signatories/{signatory['id']}", json={"name": "Accounting Office"})
    assert updated.json()["name"] == "Accounting Office"
    assert updated.json()["username"] == "cashier"

    assert client.delete(f"/signatories/{signatory['id']}").status_code == 200
    assert client.get(f"/signatories/{signatory['id']}").status_code == 404
