from datetime import datetime, timedelta

import pytest

from conftest import bearer


def create_job(client, token, **overrides):
    payload = {"company": "Acme", "position": "Eng", "status": "APPLIED"}
    payload.update(overrides)
    return client.post("/jobs", json=payload, headers=bearer(token))


def test_create_job_assigns_id_and_timestamp(client, alice):
    response = create_job(client, alice["token"])
    assert response.status_code == 201

    job = response.json()
    assert job["id"]
    assert job["createdAt"]
    assert job["company"] == "Acme"
    assert job["position"] == "Eng"
    assert job["status"] == "APPLIED"
    assert job["email"] is None
    assert job["userId"] == alice["user"]["id"]


def test_created_at_is_sent_as_utc(client, alice):
    created_at = create_job(client, alice["token"]).json()["createdAt"]

    assert created_at.endswith("+00:00")
    assert datetime.fromisoformat(created_at).utcoffset() == timedelta(0)


def test_created_job_is_listed_first(client, alice):
    create_job(client, alice["token"], company="Older")
    newest = create_job(client, alice["token"]).json()

    jobs = client.get("/jobs", headers=bearer(alice["token"])).json()
    assert [j["id"] for j in jobs][0] == newest["id"]
    assert [j["company"] for j in jobs] == ["Acme", "Older"]


def test_create_defaults_status_to_applied(client, alice):
    response = client.post("/jobs", json={"company": "Acme", "position": "Eng"}, headers=bearer(alice["token"]))
    assert response.status_code == 201
    assert response.json()["status"] == "APPLIED"


def test_create_trims_and_keeps_contact_email(client, alice):
    job = create_job(client, alice["token"], company="  Acme  ", email="hr@acme.com").json()
    assert job["company"] == "Acme"
    assert job["email"] == "hr@acme.com"


@pytest.mark.parametrize("overrides", [
    {"company": ""},
    {"position": "   "},
    {"status": "GHOSTED"},
    {"company": None},
])
def test_create_rejects_invalid_fields(client, alice, overrides):
    response = create_job(client, alice["token"], **overrides)
    assert response.status_code == 400
    assert "error" in response.json()


def test_create_requires_auth(client):
    response = client.post("/jobs", json={"company": "Acme", "position": "Eng", "status": "APPLIED"})
    assert response.status_code == 401


def test_jobs_are_scoped_to_owner(client, alice, bob):
    job = create_job(client, alice["token"]).json()

    assert client.get("/jobs", headers=bearer(bob["token"])).json() == []
    assert client.get(f"/jobs/{job['id']}", headers=bearer(bob["token"])).status_code == 404


def test_other_users_job_looks_missing(client, alice, bob):
    job = create_job(client, alice["token"]).json()

    patch = client.patch(f"/jobs/{job['id']}", json={"status": "OFFER"}, headers=bearer(bob["token"]))
    delete = client.delete(f"/jobs/{job['id']}", headers=bearer(bob["token"]))
    missing = client.delete("/jobs/does-not-exist", headers=bearer(bob["token"]))

    assert patch.status_code == 404
    assert delete.status_code == 404
    assert patch.json() == missing.json()

    # Alice's job is untouched
    unchanged = client.get(f"/jobs/{job['id']}", headers=bearer(alice["token"])).json()
    assert unchanged["status"] == "APPLIED"


def test_partial_update_leaves_other_fields(client, alice):
    job = create_job(client, alice["token"], email="hr@acme.com").json()

    response = client.patch(f"/jobs/{job['id']}", json={"status": "OFFER"}, headers=bearer(alice["token"]))
    assert response.status_code == 200

    stored = client.get("/jobs", headers=bearer(alice["token"])).json()[0]
    assert stored["status"] == "OFFER"
    assert stored["company"] == job["company"]
    assert stored["position"] == job["position"]
    assert stored["email"] == "hr@acme.com"
    assert stored["createdAt"] == job["createdAt"]


def test_update_several_fields(client, alice):
    job = create_job(client, alice["token"]).json()

    response = client.patch(
        f"/jobs/{job['id']}",
        json={"company": "Globex", "position": "Staff Eng", "email": "jobs@globex.com"},
        headers=bearer(alice["token"]),
    )
    updated = response.json()
    assert updated["company"] == "Globex"
    assert updated["position"] == "Staff Eng"
    assert updated["email"] == "jobs@globex.com"
    assert updated["status"] == "APPLIED"


@pytest.mark.parametrize("cleared", ["", None])
def test_empty_email_clears_contact(client, alice, cleared):
    job = create_job(client, alice["token"], email="hr@acme.com").json()

    response = client.patch(f"/jobs/{job['id']}", json={"email": cleared}, headers=bearer(alice["token"]))
    assert response.status_code == 200
    assert response.json()["email"] is None


@pytest.mark.parametrize("payload", [
    {"company": ""},
    {"position": "  "},
    {"company": None},
    {"status": None},
    {"status": "HIRED"},
])
def test_update_rejects_invalid_fields(client, alice, payload):
    job = create_job(client, alice["token"]).json()

    response = client.patch(f"/jobs/{job['id']}", json=payload, headers=bearer(alice["token"]))
    assert response.status_code == 400

    stored = client.get(f"/jobs/{job['id']}", headers=bearer(alice["token"])).json()
    assert stored == job


def test_delete_then_delete_again_is_not_found(client, alice):
    job = create_job(client, alice["token"]).json()

    first = client.delete(f"/jobs/{job['id']}", headers=bearer(alice["token"]))
    assert first.status_code == 204
    assert first.content == b""

    second = client.delete(f"/jobs/{job['id']}", headers=bearer(alice["token"]))
    assert second.status_code == 404
    assert client.get("/jobs", headers=bearer(alice["token"])).json() == []


def test_delete_unknown_id_is_not_found_every_time(client, alice):
    for _ in range(2):
        response = client.delete("/jobs/unknown", headers=bearer(alice["token"]))
        assert response.status_code == 404
        assert response.json() == {"error": "Job not found"}
