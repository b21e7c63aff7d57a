from app.security.jwt import decode_token


class TestSuperAdminUsers:
    def test_create_user(self, client, admin_headers):
        response = client.post(
            "/api/v1/sa/users",
            json={"login": "alice", "password": "secret123", "email": "alice@example.com"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["login"] == "alice"
        assert body["email"] == "alice@example.com"
        assert body["createdAt"].endswith("Z")
        assert "password" not in body and "passwordHash" not in body

    def test_create_user_with_plus_address(self, client, admin_headers):
        response = client.post(
            "/api/v1/sa/users",
            json={"login": "alice", "password": "secret123", "email": "alice+blog@example.com"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["email"] == "alice+blog@example.com"

    def test_create_user_requires_admin(self, client):
        response = client.post(
            "/api/v1/sa/users",
            json={"login": "alice", "password": "secret123", "email": "alice@example.com"},
        )

        assert response.status_code == 401

    def test_wrong_admin_password(self, client):
        response = client.post(
            "/api/v1/sa/users",
            json={"login": "alice", "password": "secret123", "email": "alice@example.com"},
            auth=("admin", "wrong"),
        )

        assert response.status_code == 401

    def test_duplicate_login(self, client, admin_headers, make_user):
        make_user("alice")

        response = client.post(
            "/api/v1/sa/users",
            json={"login": "alice", "password": "secret123", "email": "other@example.com"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "USER_EXISTS"
        assert response.json()["detail"]["field"] == "login"

    def test_invalid_login_and_email(self, client, admin_headers):
        response = client.post(
            "/api/v1/sa/users",
            json={"login": "a!", "password": "secret123", "email": "not-an-email"},
            headers=admin_headers,
        )

        assert response.status_code == 422


class TestLogin:
    def test_login_with_login_or_email(self, client, make_user):
        user = make_user("alice")

        for identifier in ("alice", "alice@example.com"):
            response = client.post(
                "/api/v1/auth/login",
                json={"loginOrEmail": identifier, "password": "secret123"},
            )
            assert response.status_code == 200
            token = response.json()["accessToken"]
            assert decode_token(token)["payload"]["userId"] == user.id

    def test_wrong_password(self, client, make_user, caplog):
        make_user("alice")

        with caplog.at_level("WARNING"):
            response = client.post(
                "/api/v1/auth/login",
                json={"loginOrEmail": "alice", "password": "nope"},
            )

        assert response.status_code == 401
        assert "Failed login attempt" in caplog.text

    def test_me(self, client, make_user, auth_headers):
        user = make_user("alice")

        response = client.get("/api/v1/auth/me", headers=auth_headers(user))

        assert response.status_code == 200
        assert response.json() == {"userId": user.id, "login": "alice", "email": "alice@example.com"}

    def test_me_without_token(self, client):
        response = client.get("/api/v1/auth/me")

        assert response.status_code == 401

    def test_me_for_deleted_user(self, client, make_user, auth_headers, db):
        user = make_user("alice")
        headers = auth_headers(user)
        db.delete(user)
        db.commit()

        response = client.get("/api/v1/auth/me", headers=headers)

        assert response.status_code == 401
        assert response.json()["detail"]["error"] == "INVALID_TOKEN"


def test_root(client):
    assert client.get("/").json() == {"message": "Welcome to Blog Platform Backend"}
