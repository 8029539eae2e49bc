"""Tests for the registry web pages and the JSON API."""
import re

import pytest

from app import create_app
from init_db import init_db
from models.database import execute_db


def login(client, username, password):
    return client.post("/login", data={
        "username": username,
        "password": password,
    }, follow_redirects=True)


def get_csrf(html):
    match = re.search(r'name="csrf_token".*?value="(.+?)"', html)
    return match.group(1) if match else ""


BIRTH = {
    "child_name": "Liya Alemu",
    "date_of_birth": "2025-02-01",
    "sex": "Female",
    "nationality": "Ethiopian",
    "mother_name": "Tigist Bekele",
    "father_name": "Alemu Gebre",
    "city": "Jimma",
    "kebele": "Hermata Merkato",
    "house_number": "77",
}


API_BIRTH = {
    "child_name": "Kaleb Mesfin",
    "date_of_birth": "2025-03-01",
    "sex": "Male",
    "mother_name": "Selam Worku",
    "father_name": "Mesfin Dagne",
}


# --- Authentication ---

def test_pages_require_login(client):
    for path in ("/", "/births", "/search", "/persons", "/births/BRT-001/certificate"):
        response = client.get(path)
        assert response.status_code == 302
        assert "/login" in response.headers["Location"]


def test_login_page_renders(client):
    response = client.get("/login")
    assert response.status_code == 200
    assert "Sign in" in response.get_data(as_text=True)


def test_login_with_wrong_password(client):
    response = login(client, "admin", "wrong")
    assert "Invalid username or password." in response.get_data(as_text=True)
    assert client.get("/").status_code == 302


def test_login_and_logout(client):
    response = login(client, "admin", "admin")
    html = response.get_data(as_text=True)
    assert "Kebele Administrator" in html
    response = client.get("/logout", follow_redirects=True)
    assert "You have been logged out." in response.get_data(as_text=True)
    assert client.get("/").status_code == 302


def test_login_redirects_to_next(client):
    response = client.post("/login?next=/search", data={
        "username": "admin", "password": "admin",
    })
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/search")


def test_login_ignores_external_next(client):
    response = client.post("/login?next=http://example.com/", data={
        "username": "admin", "password": "admin",
    })
    assert response.status_code == 302
    assert "example.com" not in response.headers["Location"]


def test_deactivated_user_cannot_login(app, client):
    with app.app_context():
        execute_db("UPDATE users SET is_active = 0 WHERE username = ?", ("clerk",))
    response = login(client, "clerk", "clerk-pass")
    assert "Your account has been deactivated." in response.get_data(as_text=True)


def test_login_with_csrf_enabled(tmp_path):
    database = str(tmp_path / "csrf.db")
    init_db(database)
    app = create_app({"TESTING": True, "DATABASE": database, "SECRET_KEY": "test"})
    client = app.test_client()

    response = client.post("/login", data={"username": "admin", "password": "admin"})
    assert response.status_code == 400

    token = get_csrf(client.get("/login").get_data(as_text=True))
    assert token
    response = client.post("/login", data={
        "username": "admin", "password": "admin", "csrf_token": token,
    })
    assert response.status_code == 302


# --- Dashboard and language ---

def test_dashboard_counts(admin_client):
    html = admin_client.get("/").get_data(as_text=True)
    assert 'id="count-birth">2<' in html
    assert 'id="count-death">1<' in html
    assert 'id="count-marriage">1<' in html
    assert 'id="count-divorce">1<' in html


def test_language_switch(admin_client):
    html = admin_client.get("/").get_data(as_text=True)
    assert "Hermata Merkato Kebele - Jimma, Ethiopia" in html

    admin_client.get("/set-language/om")
    html = admin_client.get("/").get_data(as_text=True)
    assert "Kebele Hermata Merkato - Jimmaa, Itiyoophiyaa" in html

    admin_client.get("/set-language/am")
    html = admin_client.get("/births/BRT-001/certificate").get_data(as_text=True)
    assert "ሰርተፍኬት አትም" in html


def test_unknown_language_is_ignored(client):
    client.get("/set-language/om")
    client.get("/set-language/xx")
    with client.session_transaction() as session:
        assert session["lang"] == "om"


def test_login_required_message_is_translated(client):
    client.get("/set-language/en")
    response = client.get("/", follow_redirects=True)
    assert "Please sign in to access this page." in response.get_data(as_text=True)


# --- Registration ---

def test_register_birth(admin_client):
    response = admin_client.post("/births/new", data=BIRTH)
    assert response.status_code == 302
    match = re.search(r"/births/(BRT-\d{8}-[0-9A-F]{6})/certificate", response.headers["Location"])
    assert match
    regno = match.group(1)

    html = admin_client.get(response.headers["Location"]).get_data(as_text=True)
    assert regno in html
    assert "Liya Alemu" in html
    assert f"Registration number: {regno}" in html

    record = admin_client.get(f"/api/birth/{regno}").get_json()
    assert record["status"] == "Pending"
    assert record["created_by"] == "admin"
    assert record["registration_date"]


def test_register_form_prefills_defaults(admin_client):
    html = admin_client.get("/marriages/new").get_data(as_text=True)
    assert 'value="Jimma"' in html
    assert 'value="Ethiopian"' in html


def test_register_birth_missing_fields(admin_client):
    response = admin_client.post("/births/new", data={"child_name": "Liya"})
    assert response.status_code == 200
    assert "Please correct the highlighted fields." in response.get_data(as_text=True)
    assert 'id="count-birth">2<' in admin_client.get("/").get_data(as_text=True)


def test_death_before_birth_is_rejected(admin_client):
    response = admin_client.post("/deaths/new", data={
        "name": "Tesfaye Abera",
        "date_of_birth": "1950-05-01",
        "date_of_death": "1940-01-01",
        "sex": "Male",
        "nationality": "Ethiopian",
        "cause_of_death": "Illness",
        "city": "Jimma",
        "kebele": "Hermata Merkato",
    })
    assert response.status_code == 200
    assert "Date of death cannot be before date of birth." in response.get_data(as_text=True)


def test_register_divorce(clerk_client):
    response = clerk_client.post("/divorces/new", data={
        "husband_name": "Yonas Tadesse",
        "husband_age": "40",
        "husband_nationality": "Ethiopian",
        "wife_name": "Marta Girma",
        "wife_age": "38",
        "wife_nationality": "Ethiopian",
        "date_of_divorce": "2025-03-10",
        "requester": "Wife",
        "city": "Jimma",
        "kebele": "Hermata Merkato",
    })
    assert response.status_code == 302
    assert "/divorces/DIV-" in response.headers["Location"]


def test_unknown_certificate_is_404(admin_client):
    response = admin_client.get("/births/BRT-999/certificate")
    assert response.status_code == 404


def test_unknown_category_is_404(admin_client):
    assert admin_client.get("/adoptions").status_code == 404


# --- Lists ---

def test_list_records(admin_client):
    html = admin_client.get("/births").get_data(as_text=True)
    assert "BRT-001" in html
    assert "BRT-002" in html


def test_list_search(admin_client):
    html = admin_client.get("/births?search=hanna").get_data(as_text=True)
    assert "BRT-002" in html
    assert "BRT-001" not in html


def test_list_empty_search(admin_client):
    html = admin_client.get("/deaths?search=nobody").get_data(as_text=True)
    assert "No records found." in html


# --- Status review ---

def test_admin_can_approve(admin_client):
    response = admin_client.post("/births/BRT-002/status", data={"status": "Approved"},
                                 follow_redirects=True)
    assert "Status of BRT-002 changed to Approved." in response.get_data(as_text=True)
    assert admin_client.get("/api/birth/BRT-002").get_json()["status"] == "Approved"


def test_employee_cannot_change_status(clerk_client):
    response = clerk_client.post("/births/BRT-002/status", data={"status": "Approved"})
    assert response.status_code == 403
    assert clerk_client.get("/api/birth/BRT-002").get_json()["status"] == "Pending"


def test_status_form_only_for_admin(clerk_client):
    html = clerk_client.get("/births/BRT-001/certificate").get_data(as_text=True)
    assert "/births/BRT-001/status" not in html


def test_status_change_rejects_unknown_status(admin_client):
    admin_client.post("/deaths/DTH-001/status", data={"status": "Lost"})
    assert admin_client.get("/api/death/DTH-001").get_json()["status"] == "Approved"


# --- Search page ---

def test_search_by_type_and_status(admin_client):
    html = admin_client.get("/search?q=&type=birth&status=Pending").get_data(as_text=True)
    assert "BRT-002" in html
    assert "BRT-001" not in html
    assert "DIV-001" not in html


def test_search_by_name(admin_client):
    html = admin_client.get("/search?q=KEBEDE").get_data(as_text=True)
    assert "BRT-001" in html
    assert "MAR-001" not in html


def test_search_no_results(admin_client):
    html = admin_client.get("/search?q=zzzz").get_data(as_text=True)
    assert "No records match your search." in html


# --- Persons ---

def test_create_and_edit_person(admin_client):
    response = admin_client.post("/persons/new", data={
        "first_name": "Bekele",
        "last_name": "Tola",
        "gender": "male",
        "date_of_birth": "1990-07-12",
        "nationality": "Ethiopian",
        "phone": "+251 911 000000",
    }, follow_redirects=True)
    html = response.get_data(as_text=True)
    assert "Bekele Tola" in html

    persons = admin_client.get("/api/person?search=Bekele").get_json()["persons"]
    assert len(persons) == 1
    person_id = persons[0]["person_id"]
    assert person_id.startswith("PRS-")

    html = admin_client.get(f"/persons/{person_id}/edit").get_data(as_text=True)
    assert 'value="1990-07-12"' in html

    admin_client.post(f"/persons/{person_id}/edit", data={
        "first_name": "Bekele",
        "last_name": "Gudeta",
        "gender": "male",
        "nationality": "Ethiopian",
    })
    person = admin_client.get(f"/api/person/{person_id}").get_json()
    assert person["last_name"] == "Gudeta"
    assert person["full_name"] == "Bekele Gudeta"


def test_person_invalid_phone(admin_client):
    response = admin_client.post("/persons/new", data={
        "first_name": "Bekele",
        "last_name": "Tola",
        "gender": "male",
        "nationality": "Ethiopian",
        "phone": "call me",
    })
    assert response.status_code == 200
    assert "Invalid phone number." in response.get_data(as_text=True)


def test_edit_unknown_person(admin_client):
    assert admin_client.get("/persons/PRS-NOPE/edit").status_code == 404


# --- JSON API ---

def test_api_requires_login(client):
    response = client.get("/api/me")
    assert response.status_code == 401
    assert response.get_json() == {"error": "Authentication required"}


def test_api_me(admin_client):
    user = admin_client.get("/api/me").get_json()["user"]
    assert user["username"] == "admin"
    assert user["role"] == "admin"
    assert user["fullName"] == "Kebele Administrator"


def test_api_list_pagination(admin_client):
    data = admin_client.get("/api/birth?limit=1&page=2").get_json()
    assert len(data["births"]) == 1
    assert data["pagination"] == {"page": 2, "limit": 1, "total": 2, "pages": 2}


def test_api_limit_is_capped(admin_client):
    data = admin_client.get("/api/death?limit=1000").get_json()
    assert data["pagination"]["limit"] == 100
    assert [d["death_regno"] for d in data["deaths"]] == ["DTH-001"]


def test_api_list_search(admin_client):
    data = admin_client.get("/api/marriage?search=meron").get_json()
    assert [m["marriage_regno"] for m in data["marriages"]] == ["MAR-001"]


def test_api_create_birth(admin_client):
    response = admin_client.post("/api/birth", json=dict(API_BIRTH, status="Approved"))
    assert response.status_code == 201
    record = response.get_json()
    assert record["birth_regno"].startswith("BRT-")
    assert record["status"] == "Pending"
    assert record["city"] == "Jimma"
    assert record["category"] == "birth"

    fetched = admin_client.get(f"/api/birth/{record['birth_regno']}").get_json()
    assert fetched["child_name"] == "Kaleb Mesfin"


@pytest.mark.parametrize("category,payload,field", [
    ("birth", {"child_name": "Kaleb"}, "date_of_birth"),
    ("marriage", {"husband_name": "Abel", "husband_age": 17, "wife_name": "Ruth",
                  "wife_age": 22, "date_of_marriage": "2025-01-01"}, "husband_age"),
    ("divorce", {"husband_name": "Abel", "husband_age": 30, "wife_name": "Ruth",
                 "wife_age": 29, "date_of_divorce": "2025-01-01",
                 "requester": "Nobody"}, "requester"),
])
def test_api_create_invalid(admin_client, category, payload, field):
    response = admin_client.post(f"/api/{category}", json=payload)
    assert response.status_code == 400
    data = response.get_json()
    assert data["error"] == "Validation failed"
    assert field in data["fields"]


def test_api_create_without_json(admin_client):
    response = admin_client.post("/api/death", data="not json")
    assert response.status_code == 400


def test_api_record_not_found(admin_client):
    response = admin_client.get("/api/divorce/DIV-999")
    assert response.status_code == 404
    assert response.get_json()["error"] == "Record not found"


def test_api_create_person(admin_client):
    response = admin_client.post("/api/person", json={
        "first_name": "Hawi",
        "last_name": "Abdi",
        "gender": "female",
    })
    assert response.status_code == 201
    person = response.get_json()
    assert person["nationality"] == "Ethiopian"
    assert admin_client.get(f"/api/person/{person['person_id']}").status_code == 200
    assert admin_client.get("/api/person/PRS-NOPE").status_code == 404


def test_api_search(admin_client):
    data = admin_client.get("/api/search?type=birth&status=Pending").get_json()
    assert [r["birth_regno"] for r in data["results"]["birth"]] == ["BRT-002"]
    assert data["results"]["divorce"] == []
    assert data["total"] == 1
    assert data["query"] == {"q": "", "type": "birth", "status": "Pending"}


def test_api_search_everything(admin_client):
    data = admin_client.get("/api/search").get_json()
    assert data["total"] == 5
    assert data["query"]["type"] == "all"


def test_api_converts_scalar_values(admin_client):
    response = admin_client.post("/api/birth", json=dict(API_BIRTH, house_number=123))
    assert response.status_code == 201
    assert response.get_json()["house_number"] == "123"

    response = admin_client.post("/api/person", json={
        "first_name": "Hawi", "last_name": "Abdi", "gender": "female", "phone": 911000000,
    })
    assert response.status_code == 201
    assert response.get_json()["phone"] == "911000000"


@pytest.mark.parametrize("category,payload,field", [
    ("birth", dict(API_BIRTH, date_of_birth=20250101), "date_of_birth"),
    ("birth", dict(API_BIRTH, sex=True), "sex"),
    ("birth", dict(API_BIRTH, child_name=""), "child_name"),
    ("person", {"first_name": "Hawi", "last_name": "Abdi", "gender": True}, "gender"),
    ("person", {"first_name": "Hawi", "last_name": "Abdi", "gender": "female",
                "phone": 12.5}, "phone"),
])
def test_api_rejects_badly_typed_values(admin_client, category, payload, field):
    response = admin_client.post(f"/api/{category}", json=payload)
    assert response.status_code == 400
    assert field in response.get_json()["fields"]


def test_api_rejects_nested_values(admin_client):
    response = admin_client.post("/api/birth", json=dict(API_BIRTH, mother_name=["Selam"]))
    assert response.status_code == 400
    assert "fields" not in response.get_json()


# --- Search wildcards ---

def test_list_search_treats_wildcards_literally(admin_client):
    assert "No records found." in admin_client.get("/births?search=%25").get_data(as_text=True)
    data = admin_client.get("/api/birth?search=BRT-00_").get_json()
    assert data["pagination"]["total"] == 0
    data = admin_client.get("/api/birth?search=BRT-00").get_json()
    assert data["pagination"]["total"] == 2


def test_person_search_treats_wildcards_literally(admin_client):
    admin_client.post("/api/person", json={
        "first_name": "Hawi", "last_name": "Abdi", "gender": "female",
    })
    assert admin_client.get("/api/person?search=%25").get_json()["persons"] == []
    assert admin_client.get("/api/person?search=H_wi").get_json()["persons"] == []
    assert len(admin_client.get("/api/person?search=Hawi").get_json()["persons"]) == 1


# --- Status review feedback ---

def test_invalid_status_change_is_reported(admin_client):
    response = admin_client.post("/births/BRT-002/status", data={"status": "Lost"},
                                 follow_redirects=True)
    assert "Please correct the highlighted fields." in response.get_data(as_text=True)
    assert admin_client.get("/api/birth/BRT-002").get_json()["status"] == "Pending"


# --- Dashboard activity ---

def test_dashboard_shows_recent_registrations(clerk_client):
    html = clerk_client.get("/").get_data(as_text=True)
    assert 'id="recent-birth">+2 ' in html
    assert "Registered by admin" in html
    assert "Abebe Kebede" in html

    clerk_client.post("/births/new", data=BIRTH)
    html = clerk_client.get("/").get_data(as_text=True)
    assert 'id="recent-birth">+3 ' in html
    assert "Birth Registration for Liya Alemu" in html
    assert "Registered by clerk" in html


def test_list_shows_who_registered(clerk_client):
    clerk_client.post("/births/new", data=BIRTH)
    html = clerk_client.get("/births").get_data(as_text=True)
    assert html.count('<td class="registered-by">admin</td>') == 2
    assert '<td class="registered-by">clerk</td>' in html


def test_api_dashboard_stats(app, admin_client):
    stats = admin_client.get("/api/dashboard/stats").get_json()
    assert stats["totalBirths"] == 2
    assert stats["recentBirths"] == 2
    assert stats["totalDivorces"] == 1
    assert stats["totalPersons"] == 0

    with app.app_context():
        execute_db("UPDATE births SET created_at = ? WHERE birth_regno = ?",
                   ("2020-01-01T00:00:00", "BRT-001"))
    stats = admin_client.get("/api/dashboard/stats").get_json()
    assert stats["totalBirths"] == 2
    assert stats["recentBirths"] == 1


def test_api_dashboard_recent(admin_client):
    activity = admin_client.get("/api/dashboard/recent").get_json()
    assert len(activity) == 5
    assert {item["regno"] for item in activity} == {
        "BRT-001", "BRT-002", "DTH-001", "MAR-001", "DIV-001"}
    marriage = next(item for item in activity if item["type"] == "marriage")
    assert marriage["name"] == "Samuel Desta & Meron Yohannes"
    assert marriage["registered_by"] == "admin"

    assert len(admin_client.get("/api/dashboard/recent?limit=2").get_json()) == 2


# --- Records linked to a person ---

def create_person(client, **values):
    payload = {"first_name": "Hawi", "last_name": "Abdi", "gender": "female",
               "date_of_birth": "2025-02-01"}
    payload.update(values)
    return client.post("/api/person", json=payload).get_json()


def test_birth_form_prefilled_from_person(admin_client):
    person = create_person(admin_client)
    html = admin_client.get(f"/births/new?person_id={person['person_id']}").get_data(as_text=True)
    assert 'value="Hawi Abdi"' in html
    assert f'value="{person["person_id"]}"' in html
    assert 'value="2025-02-01"' in html


def test_register_birth_linked_to_person(admin_client):
    person = create_person(admin_client)
    response = admin_client.post("/births/new", data=dict(BIRTH, person_id=person["person_id"]))
    assert response.status_code == 302

    html = admin_client.get(response.headers["Location"]).get_data(as_text=True)
    assert person["person_id"] in html
    regno = re.search(r"/births/([^/]+)/certificate", response.headers["Location"]).group(1)
    assert admin_client.get(f"/api/birth/{regno}").get_json()["person_id"] == person["person_id"]


def test_register_birth_without_person_stores_no_link(admin_client):
    response = admin_client.post("/births/new", data=dict(BIRTH, person_id=""))
    regno = re.search(r"/births/([^/]+)/certificate", response.headers["Location"]).group(1)
    assert admin_client.get(f"/api/birth/{regno}").get_json()["person_id"] is None


def test_register_birth_with_unknown_person(admin_client):
    response = admin_client.post("/births/new", data=dict(BIRTH, person_id="PRS-NOPE"))
    assert response.status_code == 200
    assert "No registered person has this ID." in response.get_data(as_text=True)


def test_api_death_linked_to_person(admin_client):
    person = create_person(admin_client, first_name="Girma", gender="male",
                           date_of_birth="1950-01-01")
    death = {
        "name": "Girma Abdi",
        "date_of_birth": "1950-01-01",
        "date_of_death": "2025-01-10",
        "cause_of_death": "Illness",
        "sex": "Male",
    }
    response = admin_client.post("/api/death", json=dict(death, person_id="PRS-NOPE"))
    assert response.status_code == 400
    assert "person_id" in response.get_json()["fields"]

    response = admin_client.post("/api/death", json=dict(death, person_id=person["person_id"]))
    assert response.status_code == 201
    assert response.get_json()["person_id"] == person["person_id"]
