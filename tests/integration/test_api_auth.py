"""
Integration tests for credential and user API endpoints.
Uses TestClient over the full app with in-memory repositories (no real DB).
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
import pytest

pytestmark = pytest.mark.integration


def _register(client, username="ada", password="lovelace"):
    return client.post("/register", json={"username": username, "password": password})


class TestRegisterAPI:
    """Tests for POST /register"""

    def test_register_success(self, client):
        response = _register(client)
        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["id"]
        assert len(data["accessToken"]) == 256

    def test_register_missing_password_returns_400(self, client):
        response = client.post("/register", json={"username": "ada"})
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Username and password are required",
        }

    def test_register_malformed_body_returns_400(self, client):
        response = client.post(
            "/register",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_register_duplicate_returns_400_and_keeps_first_token(self, client):
        first = _register(client).json()
        response = _register(client, password="different")
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Username already exists"}

        secrets = client.get("/secrets", headers={"Authorization": first["accessToken"]})
        assert secrets.status_code == 200


class TestLoginAPI:
    """Tests for POST /login"""

    def test_login_returns_registration_token(self, client):
        registered = _register(client).json()
        response = client.post("/login", json={"username": "ada", "password": "lovelace"})
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "id": registered["id"],
            "accessToken": registered["accessToken"],
        }

    def test_login_wrong_password_returns_401(self, client):
        _register(client)
        response = client.post("/login", json={"username": "ada", "password": "wrong"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid username or password"}

    def test_login_unknown_user_same_message(self, client):
        response = client.post("/login", json={"username": "nobody", "password": "wrong"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid username or password"


class TestLongPasswordsAPI:
    """Register and login with passwords past bcrypt's 72-byte input limit"""

    @pytest.mark.parametrize("password", ["p" * 72, "p" * 73, "p" * 100, "é" * 37])
    def test_register_then_login(self, client, password):
        registered = _register(client, password=password)
        assert registered.status_code == 201

        response = client.post("/login", json={"username": "ada", "password": password})
        assert response.status_code == 200
        assert response.json()["accessToken"] == registered.json()["accessToken"]

    def test_login_rejects_password_differing_after_72_bytes(self, client):
        _register(client, password="p" * 72 + "a")
        response = client.post("/login", json={"username": "ada", "password": "p" * 72 + "b"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid username or password"}


class TestUsersAndSecretsAPI:
    """Tests for GET /users and GET /secrets"""

    def test_users_lists_only_public_fields(self, client):
        _register(client, "ada")
        _register(client, "grace")
        response = client.get("/users")
        assert response.status_code == 200
        users = response.json()
        assert sorted(u["username"] for u in users) == ["ada", "grace"]
        assert all(set(u) == {"id", "username"} for u in users)

    def test_users_empty_list(self, client):
        response = client.get("/users")
        assert response.status_code == 200
        assert response.json() == []

    def test_secrets_without_token_returns_401(self, client):
        response = client.get("/secrets")
        assert response.status_code == 401
        assert response.json() == {"error": "Access token missing"}

    def test_secrets_with_unknown_token_returns_401(self, client):
        response = client.get("/secrets", headers={"Authorization": "deadbeef"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid access token"}

    @pytest.mark.parametrize("scheme", ["", "Bearer ", "bearer "])
    def test_secrets_accepts_raw_or_bearer_token(self, client, scheme):
        token = _register(client).json()["accessToken"]
        response = client.get("/secrets", headers={"Authorization": f"{scheme}{token}"})
        assert response.status_code == 200
        assert response.json() == {"secret": "This is a super secret message"}


class TestIndexAPI:
    """Tests for GET /"""

    def test_index_lists_endpoints(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Happy Thoughts API"
        paths = {endpoint["path"] for endpoint in data["endpoints"]}
        assert {"/thoughts", "/thoughts/random", "/thoughts/{thought_id}", "/login"} <= paths
