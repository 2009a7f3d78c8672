"""Login, token y autorización por rol."""

import pytest

from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD, RECEPTION_EMAIL, RECEPTION_PASSWORD

LOGIN_URL = "/api/v1/auth/login"


class TestLogin:

    def test_login_success_returns_public_fields_and_token(self, client, admin_user):
        resp = client.post(LOGIN_URL, json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Login exitoso"
        assert body["user"] == {
            "id": admin_user.id,
            "name": "Admin Test",
            "email": ADMIN_EMAIL,
            "role_id": 1,
            "role_name": "admin",
        }
        assert body["token"]
        assert "password" not in resp.text
        assert "password_hash" not in resp.text

    def test_wrong_password_and_unknown_email_are_indistinguishable(self, client, admin_user):
        wrong_password = client.post(LOGIN_URL, json={"email": ADMIN_EMAIL, "password": "nope"})
        unknown_email = client.post(LOGIN_URL, json={"email": "nadie@arlab.test", "password": "nope"})

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {"detail": "Credenciales inválidas."}

    @pytest.mark.parametrize("payload", [
        {"email": ADMIN_EMAIL},
        {"password": ADMIN_PASSWORD},
        {"email": "", "password": ""},
        {},
    ])
    def test_missing_fields_returns_400(self, client, payload):
        resp = client.post(LOGIN_URL, json=payload)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Email y contraseña son requeridos."

    def test_inactive_user_cannot_login(self, client, db_session, reception_user):
        reception_user.active = False
        db_session.commit()

        resp = client.post(LOGIN_URL, json={"email": RECEPTION_EMAIL, "password": RECEPTION_PASSWORD})
        assert resp.status_code == 403


class TestTokenAndRoles:

    def test_me_returns_current_user(self, client, reception_headers):
        resp = client.get("/api/v1/auth/me", headers=reception_headers)
        assert resp.status_code == 200
        assert resp.json()["email"] == RECEPTION_EMAIL
        assert resp.json()["role_name"] == "reception"

    @pytest.mark.parametrize("path", [
        "/api/v1/clients",
        "/api/v1/products",
        "/api/v1/sales",
        "/api/v1/users",
        "/api/v1/reports/summary",
    ])
    def test_requires_token(self, client, path):
        assert client.get(path).status_code == 401

    def test_tampered_token_is_rejected(self, client, admin_headers):
        headers = {"Authorization": admin_headers["Authorization"] + "x"}
        resp = client.get("/api/v1/clients", headers=headers)
        assert resp.status_code == 401

    @pytest.mark.parametrize("method,path", [
        ("GET", "/api/v1/users"),
        ("GET", "/api/v1/reports/summary"),
        ("GET", "/api/v1/reports/top-products"),
        ("GET", "/api/v1/reports/weekly-sales"),
        ("POST", "/api/v1/products"),
    ])
    def test_reception_denied_admin_operations(self, client, reception_headers, method, path):
        resp = client.request(method, path, headers=reception_headers, json={"description": "X"})
        assert resp.status_code == 403

    def test_deactivated_user_token_stops_working(self, client, db_session, reception_user, reception_headers):
        reception_user.active = False
        db_session.commit()

        assert client.get("/api/v1/clients", headers=reception_headers).status_code == 403
