"""Tests for the server-rendered pages and the legacy form endpoint."""

import pytest


@pytest.fixture
def form():
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "Jane@Example.com",
        "phone": "555-123-4567",
        "password": "Secret@123",
        "confirmPassword": "Secret@123",
        "age": "29",
        "country": "UK",
        "gender": "female",
        "interests": ["music", "travel"],
        "bio": "<b>hi</b>",
        "terms": "on",
    }


def test_index_renders_registration_form(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert '<form method="post" action="/submit"' in resp.text
    assert 'name="confirmPassword"' in resp.text


def test_terms_page(client):
    resp = client.get("/views/terms.html")
    assert resp.status_code == 200
    assert "Terms and Conditions" in resp.text


def test_valid_form_is_stored_and_shown(client, form):
    resp = client.post("/submit", data=form)
    assert resp.status_code == 200
    assert "Registration Successful!" in resp.text
    assert "#1" in resp.text
    assert "jane@example.com" in resp.text
    assert "&lt;b&gt;hi&lt;/b&gt;" in resp.text
    assert "<b>hi</b>" not in resp.text

    stored = client.get("/api/submissions/1").json()["data"]
    assert stored["email"] == "jane@example.com"
    assert stored["age"] == 29
    assert stored["interests"] == ["music", "travel"]


def test_form_without_terms_or_matching_password(client, form):
    del form["terms"]
    form["confirmPassword"] = "Different@1"
    resp = client.post("/submit", data=form)
    assert resp.status_code == 200
    assert "Validation Failed" in resp.text
    assert "Passwords do not match" in resp.text
    assert "You must agree to the terms and conditions" in resp.text
    assert client.get("/api/stats").json()["data"]["total"] == 0


def test_weak_password_lists_missed_rules(client, form):
    form["password"] = form["confirmPassword"] = "weak"
    resp = client.post("/submit", data=form)
    assert "Password does not meet security requirements" in resp.text
    assert "Password requirements" in resp.text
    assert 'class="rule-failed">&#10007; One uppercase letter' in resp.text
    assert 'class="rule-ok">&#10003; One lowercase letter' in resp.text


def test_form_requires_password(client, form):
    del form["password"]
    del form["confirmPassword"]
    resp = client.post("/submit", data=form)
    assert "Password does not meet security requirements" in resp.text


def test_form_values_are_escaped_on_success_page(client, form):
    form["firstName"] = "<i>Jo</i>"
    form["interests"] = ['"quoted"']
    resp = client.post("/submit", data=form)
    assert "Registration Successful!" in resp.text
    assert "&lt;i&gt;Jo&lt;/i&gt;" in resp.text
    assert "<i>Jo</i>" not in resp.text
    assert "&#34;quoted&#34;" in resp.text


def test_error_page_omits_checklist_when_password_passes(client, form):
    del form["terms"]
    resp = client.post("/submit", data=form)
    assert "You must agree to the terms and conditions" in resp.text
    assert "Password requirements" not in resp.text
