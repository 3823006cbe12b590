# /tests/test_admin_api.py

"""Schools, staff accounts and the dashboard."""

from app.core import security
from app.db.base import Monitor


def _monitor(name="Nina", national_id="333", role="monitor", school_id=None, password="pw"):
    payload = {"name": name, "national_id": national_id, "role": role, "school_id": school_id}
    if password is not None:
        payload["password"] = password
    return payload


# --- Schools ---

def test_admin_school_crud(client, seed, as_admin):
    created = client.post("/api/schools", json={"name": "  Jefferson  "}, headers=as_admin)
    assert created.status_code == 201
    school_id = created.json()["id"]
    assert created.json()["data"]["name"] == "Jefferson"

    names = [s["name"] for s in client.get("/api/schools", headers=as_admin).json()]
    assert names == ["Jefferson", "Lincoln", "Roosevelt"]

    renamed = client.put(f"/api/schools/{school_id}", json={"name": "Jefferson High"}, headers=as_admin)
    assert renamed.json()["data"]["name"] == "Jefferson High"

    assert client.delete(f"/api/schools/{school_id}", headers=as_admin).status_code == 200
    assert client.get(f"/api/schools/{school_id}", headers=as_admin).status_code == 404


def test_monitor_only_sees_its_own_school(client, seed, as_lincoln):
    listed = client.get("/api/schools", headers=as_lincoln).json()
    assert [s["id"] for s in listed] == [seed["lincoln_id"]]
    assert client.get(f"/api/schools/{seed['lincoln_id']}", headers=as_lincoln).status_code == 200
    assert client.get(f"/api/schools/{seed['roosevelt_id']}", headers=as_lincoln).status_code == 404


def test_monitor_cannot_write_schools(client, seed, as_lincoln):
    assert client.post("/api/schools", json={"name": "X"}, headers=as_lincoln).status_code == 404
    assert client.put(f"/api/schools/{seed['lincoln_id']}", json={"name": "X"}, headers=as_lincoln).status_code == 404
    assert client.delete(f"/api/schools/{seed['lincoln_id']}", headers=as_lincoln).status_code == 404


def test_school_with_dependents_cannot_be_deleted(client, seed, as_admin):
    response = client.delete(f"/api/schools/{seed['lincoln_id']}", headers=as_admin)
    assert response.status_code == 409
    assert response.json()["category"] == "conflict"
    assert client.get(f"/api/schools/{seed['lincoln_id']}", headers=as_admin).status_code == 200


# --- Monitors ---

def test_monitor_endpoints_are_admin_only(client, seed, as_lincoln):
    own_id = seed["lincoln_monitor"].id
    responses = [
        client.get("/api/monitors", headers=as_lincoln),
        client.get(f"/api/monitors/{own_id}", headers=as_lincoln),
        client.post("/api/monitors", json=_monitor(school_id=seed["lincoln_id"]), headers=as_lincoln),
        client.put(f"/api/monitors/{own_id}", json=_monitor(name="Lara", national_id="111",
                                                            school_id=seed["lincoln_id"]), headers=as_lincoln),
        client.delete(f"/api/monitors/{own_id}", headers=as_lincoln),
    ]
    for response in responses:
        assert response.status_code == 404
        assert response.json()["category"] == "not_found_or_out_of_scope"


def test_monitor_listing_never_exposes_password_hashes(client, seed, as_admin):
    listed = client.get("/api/monitors", headers=as_admin).json()
    assert [m["name"] for m in listed] == ["Admin", "Lara", "Rui"]
    assert listed[1]["school_name"] == "Lincoln"
    for monitor in listed:
        assert "password" not in monitor
        assert "password_hash" not in monitor

    only_admins = client.get("/api/monitors", params={"role": "admin"}, headers=as_admin).json()
    assert [m["name"] for m in only_admins] == ["Admin"]


def test_created_monitor_can_log_in(client, db_session, seed, as_admin):
    response = client.post("/api/monitors", json=_monitor(school_id=seed["lincoln_id"], password="nina-pass"),
                           headers=as_admin)
    assert response.status_code == 201
    assert response.json()["data"]["school_name"] == "Lincoln"

    stored = db_session.query(Monitor).filter(Monitor.name == "Nina").one().password_hash
    assert stored.startswith("pbkdf2:sha256:")
    assert security.verify_password("nina-pass", stored)

    login = client.post("/api/auth/login", json={"username": "Nina", "password": "nina-pass"})
    assert login.status_code == 200
    assert login.json()["user"]["school_id"] == seed["lincoln_id"]


def test_monitor_role_requires_a_school(client, seed, as_admin):
    response = client.post("/api/monitors", json=_monitor(school_id=None), headers=as_admin)
    assert response.status_code == 400
    assert response.json()["field"] == "school_id"


def test_admin_account_is_stored_without_a_school(client, seed, as_admin):
    response = client.post("/api/monitors", json=_monitor(role="admin", school_id=seed["lincoln_id"]),
                           headers=as_admin)
    assert response.status_code == 201
    assert response.json()["data"]["school_id"] is None


def test_duplicate_national_id_is_a_conflict(client, seed, as_admin):
    response = client.post("/api/monitors", json=_monitor(national_id="111", school_id=seed["lincoln_id"]),
                           headers=as_admin)
    assert response.status_code == 409
    assert response.json() == {"error": "A monitor with this national ID already exists", "category": "conflict"}


def test_update_keeps_password_unless_a_new_one_is_given(client, seed, as_admin):
    lara_id = seed["lincoln_monitor"].id
    unchanged = _monitor(name="Lara", national_id="111", school_id=seed["lincoln_id"], password=None)
    assert client.put(f"/api/monitors/{lara_id}", json=unchanged, headers=as_admin).status_code == 200
    assert client.post("/api/auth/login", json={"username": "Lara", "password": "lara-pass"}).status_code == 200
    client.cookies.clear()

    changed = _monitor(name="Lara", national_id="111", school_id=seed["lincoln_id"], password="new-pass")
    assert client.put(f"/api/monitors/{lara_id}", json=changed, headers=as_admin).status_code == 200
    assert client.post("/api/auth/login", json={"username": "Lara", "password": "lara-pass"}).status_code == 401
    assert client.post("/api/auth/login", json={"username": "Lara", "password": "new-pass"}).status_code == 200


def test_update_to_another_accounts_national_id_is_a_conflict(client, seed, as_admin):
    lara_id = seed["lincoln_monitor"].id
    payload = _monitor(name="Lara", national_id="222", school_id=seed["lincoln_id"], password=None)
    assert client.put(f"/api/monitors/{lara_id}", json=payload, headers=as_admin).status_code == 409


def test_delete_monitor(client, seed, as_admin):
    rui_id = seed["roosevelt_monitor"].id
    assert client.delete(f"/api/monitors/{rui_id}", headers=as_admin).status_code == 200
    assert client.get(f"/api/monitors/{rui_id}", headers=as_admin).status_code == 404


# --- Dashboard ---

def test_dashboard_counts_are_scoped(client, seed, as_admin, as_lincoln):
    client.post("/api/students", json={"name": "Ana", "number": "1", "class_label": "3A", "year": 2024,
                                       "school_id": seed["lincoln_id"]}, headers=as_admin)
    client.post("/api/students", json={"name": "Rita", "number": "1", "class_label": "2B", "year": 2024,
                                       "school_id": seed["roosevelt_id"]}, headers=as_admin)

    admin_stats = client.get("/api/dashboard/stats", headers=as_admin).json()
    assert admin_stats == {"total_students": 2, "total_schools": 2, "total_monitors": 3}

    lincoln_stats = client.get("/api/dashboard/stats", headers=as_lincoln).json()
    # Schools are only counted for administrators.
    assert lincoln_stats == {"total_students": 1, "total_schools": 0, "total_monitors": 1}
