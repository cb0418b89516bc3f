"""
Integration tests for POST /users.
"""
import pytest

from blog_api.core.security import verify_password

pytestmark = pytest.mark.integration


class TestRegisterUser:

    def test_register_returns_public_representation(self, client):
        response = client.post("/users", json={"userName": "abc", "password": "pw123"})
        assert response.status_code == 201
        assert response.json() == {"userName": "abc"}

    def test_register_with_names(self, client):
        response = client.post(
            "/users",
            json={"userName": "abc", "password": "pw123", "firstName": "Ann", "lastName": "Bee"},
        )
        assert response.status_code == 201
        assert response.json() == {"userName": "abc", "firstName": "Ann", "lastName": "Bee"}

    def test_stored_password_is_a_hash(self, client, user_repository):
        client.post("/users", json={"userName": "abc", "password": "pw123"})
        stored = user_repository.users["abc"]
        assert stored.hashed_password != "pw123"
        assert verify_password("pw123", stored.hashed_password)

    def test_registered_user_can_authenticate(self, client):
        client.post("/users", json={"userName": "abc", "password": "pw123"})
        assert client.get("/posts", auth=("abc", "pw123")).status_code == 200

    def test_duplicate_username_is_400(self, client):
        first = client.post("/users", json={"userName": "abc", "password": "pw123"})
        second = client.post("/users", json={"userName": "abc", "password": "other"})
        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json() == {"message": "This username already exists"}

    def test_empty_body_is_400(self, client):
        assert client.post("/users").status_code == 400
        assert client.post("/users", json={}).status_code == 400

    def test_malformed_json_is_400(self, client):
        response = client.post(
            "/users", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "payload, message",
        [
            ({"password": "pw123"}, "Missing username"),
            ({"userName": 5, "password": "pw123"}, "Username must be a string"),
            ({"userName": " ", "password": "pw123"}, "Username is nonexistent"),
            ({"userName": "abc"}, "Missing password"),
            ({"userName": "abc", "password": True}, "password must be a string"),
            ({"userName": "abc", "password": "  "}, "password is nonexistent"),
        ],
    )
    def test_field_validation_is_422(self, client, payload, message):
        response = client.post("/users", json=payload)
        assert response.status_code == 422
        assert response.json() == {"message": message}

    def test_password_longer_than_72_bytes_registers_and_authenticates(self, client):
        password = "x" * 80
        response = client.post("/users", json={"userName": "longpw", "password": password})
        assert response.status_code == 201
        assert client.get("/posts", auth=("longpw", password)).status_code == 200

    def test_non_ascii_credentials_authenticate(self, client):
        response = client.post("/users", json={"userName": "jürgen", "password": "pässwörd"})
        assert response.status_code == 201
        assert client.get("/posts", auth=("jürgen", "pässwörd")).status_code == 200
        assert client.get("/posts", auth=("jürgen", "passwort")).status_code == 401
