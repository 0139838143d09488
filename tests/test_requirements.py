from conftest import set_status


def test_subject_and_account_crud(client, make_subject, make_account):
    math = make_subject("Math")
    library = make_account("Library")
    assert math["type"] == "Subject"
    assert library["type"] == "Account"

    assert [s["name"] for s in client.get("/subjects").json()] == ["Math"]
    assert [a["name"] for a in client.get("/accounts").json()] == ["Library"]

    renamed = client.put(f"/subjects/{math['id']}", json={"name": "Mathematics"})
    assert renamed.json()["name"] == "Mathematics"

    # An account id is not a subject id
    assert client.put(f"/subjects/{library['id']}", json={"name": "X"}).status_code == 404

    assert client.delete(f"/accounts/{library['id']}").status_code == 200
    assert client.get("/accounts").json() == []


def test_blank_requirement_name(client):
    response = client.post("/accounts", json={"name": ""})
    assert response.status_code == 422
    assert response.json()["error"] == "Account name is required"


def test_senior_subject_requires_semester(client, grade_ids):
    response = client.post("/subjects", json={"name": "Physics", "gradeLevelId": grade_ids["Grade 11"]})
    assert response.status_code == 422
    assert "semester" in response.json()["error"]
    assert client.get("/subjects").json() == []


def test_curriculum_view_follows_active_semester(client, active_term, grade_ids, make_subject):
    make_subject("English", grade_level_id=grade_ids["Grade 7"], semester=2)
    make_subject("Oral Communication", grade_level_id=grade_ids["Grade 11"], semester=1)
    make_subject("Reading and Writing", grade_level_id=grade_ids["Grade 11"], semester=2)
    make_subject("Guidance Only")

    curriculum = client.get("/subjects/curriculum").json()
    assert curriculum["activeSemester"] == "1"
    assert [(s["subjectName"], s["gradeLevel"], s["semester"]) for s in curriculum["subjects"]] == [
        ("English", "Grade 7", None),
        ("Oral Communication", "Grade 11", 1),
    ]

    client.put("/api/settings", json={
        "active_school_year": "2024-2025", "active_quarter_jhs": "1", "active_semester_shs": "2",
    })
    curriculum = client.get("/subjects/curriculum").json()
    assert [s["subjectName"] for s in curriculum["subjects"]] == ["English", "Reading and Writing"]


def test_deactivated_placement_leaves_subject_and_history(client, rose):
    set_status(client, rose["a"]["userId"], rose["math"]["id"], True)
    placement = client.get("/subjects/curriculum").json()["subjects"][0]
    assert placement["subjectName"] == "Math"

    response = client.post(f"/subjects/curriculum/{placement['requirementId']}/deactivate")
    assert response.status_code == 200
    assert response.json()["status"] == "inactive"

    assert client.get("/subjects/curriculum").json()["subjects"] == []
    assert [s["name"] for s in client.get("/subjects").json()] == ["Math"]
    status = client.get(
        f"/clearance/section/{rose['section']['sectionId']}/subject/{rose['math']['id']}"
    ).json()
    assert status["students"][0]["isCleared"] is True


def test_requirement_with_history_cannot_be_deleted(client, rose):
    set_status(client, rose["a"]["userId"], rose["math"]["id"], True)
    response = client.delete(f"/subjects/{rose['math']['id']}")
    assert response.status_code == 409
    assert "clearance records" in response.json()["error"]


def test_delete_requirement_drops_assignments(client, rose, make_account, assign):
    guidance = make_account("Guidance")
    assign(rose["signatory"]["id"], guidance["id"], [rose["section"]["sectionId"]])

    assert client.delete(f"/accounts/{guidance['id']}").status_code == 200
    items = client.get(f"/signatories/{rose['signatory']['id']}/assignments").json()
    assert [i["name"] for i in items] == ["Math"]
